"""Hex math helpers shared by the coordinate systems.

Formulas follow the Red Blob Games *Hexagonal Grids* article
(https://www.redblobgames.com/grids/hexagons).
"""

from __future__ import annotations

import math
from typing import Tuple


def round_half_away(x: float) -> int:
    """Round to the nearest integer, sending exact halves away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def cube_round(q: float, r: float, s: float) -> Tuple[int, int, int]:
    """Round fractional cube coordinates to the nearest hex.

    The component with the largest rounding error is recomputed from the
    other two so the result always satisfies ``q + r + s == 0``.
    """

    rq = round_half_away(q)
    rr = round_half_away(r)
    rs = round_half_away(s)

    dq = abs(rq - q)
    dr = abs(rr - r)
    ds = abs(rs - s)

    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs
    else:
        rs = -rq - rr

    return int(rq), int(rr), int(rs)


def cube_distance(a: Tuple[int, int, int], b: Tuple[int, int, int]) -> int:
    """Return hex distance between two cube triples."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]), abs(a[2] - b[2]))


__all__ = ["cube_round", "cube_distance", "round_half_away"]
