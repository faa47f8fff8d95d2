# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for monetary rounding."""

import math

import numpy as np
import pytest

from devfinance.core.primitives import RoundingMethod, round_amount


@pytest.mark.parametrize(
    "value, half_up, half_even",
    [
        (2.5, 3, 2),
        (3.5, 4, 4),
        (510.05, 510, 510),
        (504.5, 505, 504),
        (0.49999999999999994, 0, 0),
        (0.0, 0, 0),
    ],
)
def test_rounding_methods(value, half_up, half_even):
    assert round_amount(value) == half_up
    assert round_amount(value, RoundingMethod.HALF_UP) == half_up
    assert round_amount(value, RoundingMethod.HALF_EVEN) == half_even


def test_integers_unchanged():
    assert round_amount(1_234) == 1_234
    assert round_amount(np.int64(7)) == 7
    assert isinstance(round_amount(np.int64(7)), int)


def test_returns_int():
    assert isinstance(round_amount(12.7), int)


def test_method_accepts_string_value():
    assert round_amount(2.5, "half_even") == 2


def test_non_finite_passes_through():
    assert math.isnan(round_amount(float("nan")))
    assert round_amount(float("inf")) == float("inf")


@pytest.mark.parametrize(
    "value, half_up, half_even",
    [
        (-2.5, -2, -2),
        (-3.5, -3, -4),
        (-2.6, -3, -3),
        (-2.4, -2, -2),
    ],
)
def test_negative_ties_round_toward_positive_infinity(value, half_up, half_even):
    assert round_amount(value) == half_up
    assert round_amount(value, RoundingMethod.HALF_EVEN) == half_even
