from __future__ import annotations

import math

import pytest

from src.core.rounding import TWO_MANT_DIG, round_half_away


@pytest.mark.parametrize(
    "x, expected",
    [
        (0.5, 1.0),
        (-0.5, -1.0),
        (1.5, 2.0),
        (-1.5, -2.0),
        (2.5, 3.0),
        (-2.5, -3.0),
        (2.4999999999999996, 2.0),
        (1.4999999999999998, 1.0),
        (-1.4999999999999998, -1.0),
        (7.6, 8.0),
        (-7.6, -8.0),
    ],
)
def test_round_half_away_ties_and_neighbours(x: float, expected: float) -> None:
    assert round_half_away(x) == expected


def test_round_half_away_just_below_half_is_zero() -> None:
    # Naive floor(x + 0.5) rounds this up to 1.0.
    x = 0.49999999999999994
    assert x + 0.5 == 1.0
    assert round_half_away(x) == 0.0
    assert round_half_away(-x) == 0.0
    assert math.copysign(1.0, round_half_away(-x)) == -1.0


def test_round_half_away_small_negative_returns_negative_zero() -> None:
    out = round_half_away(-0.3)
    assert out == 0.0
    assert math.copysign(1.0, out) == -1.0

    out = round_half_away(-5e-324)
    assert math.copysign(1.0, out) == -1.0


def test_round_half_away_preserves_signed_zero() -> None:
    assert math.copysign(1.0, round_half_away(0.0)) == 1.0
    assert math.copysign(1.0, round_half_away(-0.0)) == -1.0


def test_round_half_away_tiny_positive_is_zero() -> None:
    out = round_half_away(5e-324)
    assert out == 0.0
    assert math.copysign(1.0, out) == 1.0


@pytest.mark.parametrize("x", [0.0, 1.0, -1.0, 42.0, -1e6, 2.0**52, -(2.0**52), 2.0**53 + 2, 1e300, -1e300])
def test_round_half_away_integral_inputs_unchanged(x: float) -> None:
    assert round_half_away(x) == x


def test_round_half_away_near_precision_limit() -> None:
    assert TWO_MANT_DIG == 2.0**52
    # Largest half-integer: ties away to 2^52 exactly.
    assert round_half_away(2.0**52 - 0.5) == 2.0**52
    assert round_half_away(-(2.0**52 - 0.5)) == -(2.0**52)
    assert round_half_away(2.0**52 - 1.5) == 2.0**52 - 1
    assert round_half_away(2.0**52 + 1) == 2.0**52 + 1


def test_round_half_away_infinities_and_nan_pass_through() -> None:
    assert round_half_away(math.inf) == math.inf
    assert round_half_away(-math.inf) == -math.inf
    assert math.isnan(round_half_away(math.nan))
