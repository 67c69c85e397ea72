"""Anchor and line tables for the sacred-geometry motifs.

Indices refer to the default 17x9 ``Lattice``; index 76 is its centre.
"""
from __future__ import annotations

# Flower of life: centre anchor, then hexagonal shells of 6, 12, 18 and 24.
FLOWER_F: tuple[int, ...] = (
    76,
    68, 58, 66, 84, 94, 86,
    78, 60, 50, 40, 48, 56, 74, 92, 102, 112, 104, 96,
    70, 52, 42, 32, 22, 30, 38, 46, 64, 82, 100, 110, 120, 130, 122, 114, 106, 88,
    80, 62, 44, 34, 24, 14, 4, 12, 20, 28, 36, 54, 72, 90, 108, 118, 128, 138,
    148, 140, 132, 124, 116, 98,
)

# Seed, flower of seven, and the next two shells.
FLOWER_1 = FLOWER_F[:1]
FLOWER_2 = FLOWER_F[:7]
FLOWER_3 = FLOWER_F[:19]
FLOWER_4 = FLOWER_F[:37]

KETHER = 4
CHOKMAH = 24
BINAH = 20
CHESED = 60
GEBURAH = 56
TIPHARETH = 76
NETZACH = 96
HOD = 92
YESOD = 112
MALKUTH = 148

TREE_CIRCLES: tuple[int, ...] = (
    TIPHARETH, CHESED, GEBURAH, HOD, NETZACH, YESOD, KETHER, CHOKMAH, BINAH, MALKUTH,
)

# The 22 paths.
TREE_LINES: tuple[tuple[int, int], ...] = (
    (KETHER, CHOKMAH),
    (KETHER, BINAH),
    (KETHER, TIPHARETH),
    (CHOKMAH, BINAH),
    (CHOKMAH, TIPHARETH),
    (CHOKMAH, CHESED),
    (BINAH, TIPHARETH),
    (BINAH, GEBURAH),
    (CHESED, GEBURAH),
    (CHESED, TIPHARETH),
    (CHESED, NETZACH),
    (GEBURAH, TIPHARETH),
    (GEBURAH, HOD),
    (TIPHARETH, NETZACH),
    (TIPHARETH, YESOD),
    (TIPHARETH, HOD),
    (NETZACH, HOD),
    (NETZACH, YESOD),
    (NETZACH, MALKUTH),
    (HOD, YESOD),
    (HOD, MALKUTH),
    (YESOD, MALKUTH),
)

# Metatron's cube: inner ring two radii out, outer ring four radii out,
# both listed clockwise from the top.
META_INNER: tuple[int, ...] = (40, 60, 96, 112, 92, 56)
META_OUTER: tuple[int, ...] = (4, 44, 116, 148, 108, 36)

# Centre is listed twice so it draws heavier.
META_CIRCLES: tuple[int, ...] = (
    76, 76, 60, 44, 56, 36, 92, 108, 96, 116, 112, 148, 40, 4,
)


def _meta_lines() -> tuple[tuple[int, int], ...]:
    o, n = META_OUTER, META_INNER
    lines: list[tuple[int, int]] = []
    lines += [(o[k], o[(k + 1) % 6]) for k in range(6)]  # outer hexagon
    lines += [(n[k], n[(k + 1) % 6]) for k in range(6)]  # inner hexagon
    lines += [(o[k], o[(k + 2) % 6]) for k in range(6)]  # outer hexagram
    lines += [(n[k], n[(k + 2) % 6]) for k in range(6)]  # inner hexagram
    for step in (1, -1, 2, -2):
        lines += [(o[k], n[(k + step) % 6]) for k in range(6)]
    return tuple(lines)


META_LINES: tuple[tuple[int, int], ...] = _meta_lines()
