"""Small numeric helpers shared by the scorer and compliance engine."""

from __future__ import annotations

import math

from .models import Position


def planar_distance(a: Position, b: Position) -> float:
    """Distance on the floor plane (x, z), ignoring level height."""
    return math.hypot(a.x - b.x, a.z - b.z)


def round_half_up(value: float) -> int:
    # x.5 always rounds up; builtin round() would go to even
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
