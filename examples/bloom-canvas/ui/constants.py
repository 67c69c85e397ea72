"""Display constants and color definitions."""

# Colors
BG_COLOR = (255, 255, 255)
PAUSED_COLOR = (90, 90, 110)

# Viridis control points, evenly spaced over [0, 1].
VIRIDIS = [
    (68, 1, 84),
    (72, 36, 117),
    (65, 68, 135),
    (53, 95, 141),
    (42, 120, 142),
    (33, 145, 140),
    (34, 168, 132),
    (68, 191, 112),
    (122, 209, 81),
    (189, 223, 38),
    (253, 231, 37),
]
