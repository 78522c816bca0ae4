"""Numeric helpers shared by scoring and pricing."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up.

    Python's ``round`` uses banker's rounding; scores and costs are expected
    to round ``0.5`` upwards.
    """
    return int(math.floor(value + 0.5))
