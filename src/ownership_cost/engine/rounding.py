"""Currency rounding shared by the calculator and financing."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, .5 always upward.

    Python's ``round`` rounds half to even, which would make 2.5 → 2 and
    3.5 → 4 in the same breakdown.
    """
    return int(math.floor(value + 0.5))
