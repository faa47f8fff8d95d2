# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rounding of monetary amounts to whole minor units (cents).

Amounts are quantized through ``decimal.Decimal`` built from the exact binary
value of the float, so a product such as ``0.49999999999999994`` is not pushed
over a tie by the addition error a ``floor(x + 0.5)`` approach would introduce.
"""

from __future__ import annotations

import math
import numbers
from decimal import ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from typing import Union

from .enums import RoundingMethod

# (non-negative, negative) decimal rounding per method; HALF_UP breaks ties
# toward positive infinity on both sides of zero
_DECIMAL_ROUNDING = {
    RoundingMethod.HALF_UP: (ROUND_HALF_UP, ROUND_HALF_DOWN),
    RoundingMethod.HALF_EVEN: (ROUND_HALF_EVEN, ROUND_HALF_EVEN),
}

_UNIT = Decimal(1)


def round_amount(
    value: Union[int, float], method: RoundingMethod = RoundingMethod.HALF_UP
) -> Union[int, float]:
    """
    Round an amount to the nearest whole minor unit.

    Args:
        value: Amount to round
        method: Tie-breaking rule

    Returns:
        int: Rounded amount. Non-finite input is returned unchanged as a
        float, so a NaN rate or size propagates into the schedule instead of
        raising.

    Example:
        >>> round_amount(510.05)
        510
        >>> round_amount(2.5)
        3
        >>> round_amount(-2.5)
        -2
        >>> round_amount(2.5, RoundingMethod.HALF_EVEN)
        2
    """
    if isinstance(value, numbers.Integral):
        return int(value)
    if not math.isfinite(value):
        return value
    non_negative, negative = _DECIMAL_ROUNDING[RoundingMethod(method)]
    rounding = non_negative if value >= 0 else negative
    return int(Decimal(value).quantize(_UNIT, rounding=rounding))
