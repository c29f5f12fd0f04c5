"""
Rounding helpers.

Scores are rounded half-up (0.125 -> 0.13), not with Python's
round-half-to-even, so stored and displayed values match what the
UI has always shown.
"""

import math


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round to a fixed number of decimal places, halves away from zero.

    Example:
        >>> round_half_up(0.125)
        0.13
        >>> round_half_up(2.5, 0)
        3.0
    """
    factor = 10 ** places
    if value < 0:
        return -math.floor(-value * factor + 0.5) / factor
    return math.floor(value * factor + 0.5) / factor
