"""Numeric helpers shared by the scorers."""
from __future__ import annotations

import math


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity (56.5 -> 57)."""
    return math.floor(value + 0.5)


def to_score(value: float) -> int:
    """Round half-up and clamp into [0, 100]."""
    return int(clamp(round_half_up(value)))
