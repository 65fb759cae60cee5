"""Axis-aligned rectangle helpers.

Anything with ``x``, ``y``, ``w`` and ``h`` attributes counts as a rectangle.
"""
from __future__ import annotations

from typing import Protocol


class RectLike(Protocol):
    x: float
    y: float
    w: float
    h: float


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def overlaps(a: RectLike, b: RectLike) -> bool:
    """True if the rectangles intersect. Touching edges do not count."""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y
