"""bloom - Animated transitions of a fixed point set between geometric layouts."""

from bloom.clock import FrameClock
from bloom.config import SceneConfig
from bloom.driver import IDLE, TRANSITIONING, TweenDriver
from bloom.easing import EASINGS, resolve_easing, validate_easing
from bloom.engine import Animator
from bloom.points import Point, PointSet, TransitionRecord
from bloom.sequencer import Sequencer
from bloom.types import (
    ConfigurationError,
    DriverStateError,
    EasingContractError,
    FrameContext,
    Layout,
    RangeMismatchError,
)

__all__ = [
    "Animator",
    "TweenDriver",
    "Sequencer",
    "FrameClock",
    "FrameContext",
    "SceneConfig",
    "Point",
    "PointSet",
    "TransitionRecord",
    "Layout",
    "EASINGS",
    "resolve_easing",
    "validate_easing",
    "IDLE",
    "TRANSITIONING",
    "ConfigurationError",
    "RangeMismatchError",
    "EasingContractError",
    "DriverStateError",
]
