"""Rounding shared by the housing engine and its display helpers."""

import math


def js_round(value: float) -> int:
    """Round half up (2.5 -> 3, -2.5 -> -2), unlike Python's round-half-even."""
    return math.floor(value + 0.5)
