"""
Numeric helpers.
"""

import math
from typing import Iterable


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves toward positive infinity.

    2.5 -> 3, -2.5 -> -2. Python's round() would give 2 and -2.
    """
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def rounded_mean(values: Iterable[float]) -> int:
    """Mean of `values` rounded half up, or 0 when there are none."""
    values = list(values)
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))
