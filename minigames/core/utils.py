"""
Vector and geometry helpers shared by both games
"""

from __future__ import annotations
import math
from typing import Tuple


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def vec_len(x: float, y: float) -> float:
    """Calculate vector length (magnitude)"""
    return math.hypot(x, y)


def normalize(x: float, y: float, eps: float = 1e-8) -> Tuple[float, float]:
    """Normalize a vector to unit length"""
    l = math.hypot(x, y)
    if l < eps:
        return 0.0, 0.0
    return x / l, y / l


def clamp_to_unit(x: float, y: float) -> Tuple[float, float]:
    """Shrink a vector onto the unit circle if it lies outside it"""
    l = math.hypot(x, y)
    if l > 1.0:
        return x / l, y / l
    return x, y


def rect_collide(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """Check if two axis-aligned rectangles overlap (touching edges don't count)"""
    return x1 < x2 + w2 and x2 < x1 + w1 and y1 < y2 + h2 and y2 < y1 + h1


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap (touching circles don't count)"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) < (rr * rr)


def sanitize_dt(dt: float) -> float:
    """Negative, NaN, infinite or non-numeric frame times become 0"""
    try:
        dt = float(dt)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(dt) or dt < 0:
        return 0.0
    return dt
