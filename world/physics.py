"""
bubs_world module: world/physics.py

World bounds. Bubs move in unit steps, so the only physics left is
keeping them inside the rectangle [0, w] x [0, h].
"""

from __future__ import annotations
from typing import Tuple


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def clamp_to_world(x: float, y: float, w: float, h: float) -> Tuple[float, float]:
    """
    Pull a point back inside the world; edges themselves are valid positions.
    """
    return clamp(x, 0.0, w), clamp(y, 0.0, h)
