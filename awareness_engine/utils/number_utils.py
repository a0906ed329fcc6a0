"""Numeric helpers shared by the scoring components"""

import math


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (2.5 -> 3, -2.5 -> -2), unlike built-in round()"""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
