from __future__ import annotations

import math

import pytest

from src.core.exp2 import (
    EXP2_TABLE,
    OVERFLOW_THRESHOLD,
    UNDERFLOW_THRESHOLD,
    Exp2Scaling,
    exp2,
)


def test_exp2_zero_is_exactly_one() -> None:
    assert exp2(0.0) == 1.0
    assert exp2(-0.0) == 1.0


@pytest.mark.parametrize("k", range(-20, 21))
def test_exp2_small_integers_are_exact(k: int) -> None:
    assert exp2(float(k)) == 2.0**k


def test_exp2_half_integers_hit_table_endpoints() -> None:
    # 0.5 -> n=1, m=-128; -0.5 -> n=-1, m=128. z is 0 in both cases.
    assert exp2(0.5) == math.sqrt(2.0)
    assert exp2(-0.5) == math.sqrt(0.5)
    assert exp2(10.5) == 1024.0 * math.sqrt(2.0)


@pytest.mark.parametrize("x", [0.1, 0.3333333333333333, 1.7, 10.25, 52.999, -3.3, -17.01, 100.125, -500.75])
def test_exp2_matches_pow_closely(x: float) -> None:
    expected = 2.0**x
    assert abs(exp2(x) - expected) <= 4 * math.ulp(expected)


def test_exp2_overflow_saturates_to_inf() -> None:
    assert OVERFLOW_THRESHOLD == 1024.0
    assert exp2(math.nextafter(1024.0, math.inf)) == math.inf
    assert exp2(1e308) == math.inf
    assert exp2(math.inf) == math.inf
    # 2^1024 itself is not representable; scaling saturates.
    assert exp2(1024.0) == math.inf


def test_exp2_largest_finite_region() -> None:
    v = exp2(1023.9999)
    assert math.isfinite(v)
    assert abs(v - 2.0**1023.9999) <= 4 * math.ulp(v)
    assert exp2(1023.0) == 2.0**1023


def test_exp2_underflow_returns_zero() -> None:
    assert UNDERFLOW_THRESHOLD == -1075.0
    assert exp2(math.nextafter(-1075.0, -math.inf)) == 0.0
    assert exp2(-2000.0) == 0.0
    assert exp2(-math.inf) == 0.0


def test_exp2_subnormal_results() -> None:
    assert exp2(-1074.0) == 5e-324
    assert exp2(-1022.0) == 2.2250738585072014e-308
    assert exp2(-1030.0) == math.ldexp(1.0, -1030)
    # Exactly half the smallest subnormal: ties to even, i.e. zero.
    assert exp2(-1075.0) == 0.0


def test_exp2_nan_propagates() -> None:
    assert math.isnan(exp2(math.nan))


def test_exp2_legacy_scaling_ignores_negative_integer_part() -> None:
    legacy = Exp2Scaling.LEGACY_DOUBLING
    assert exp2(3.0, scaling=legacy) == 8.0
    assert exp2(0.5, scaling=legacy) == exp2(0.5)
    # The doubling loop never runs for n <= 0.
    assert exp2(-1.0, scaling=legacy) == 1.0
    assert exp2(-0.5, scaling=legacy) == math.sqrt(2.0)
    assert exp2(-10.0, scaling=legacy) == 1.0


def test_exp2_legacy_scaling_overflows_by_doubling() -> None:
    assert exp2(1024.0, scaling=Exp2Scaling.LEGACY_DOUBLING) == math.inf
    assert exp2(1000.0, scaling=Exp2Scaling.LEGACY_DOUBLING) == 2.0**1000


def test_exp2_scaling_accepts_string_values() -> None:
    assert exp2(-1.0, scaling="legacy") == 1.0
    assert exp2(-1.0, scaling="ldexp") == 0.5
    with pytest.raises(ValueError):
        exp2(1.0, scaling="shift")


def test_exp2_table_shape_and_anchors() -> None:
    assert isinstance(EXP2_TABLE, tuple)
    assert len(EXP2_TABLE) == 257
    assert EXP2_TABLE[128] == 1.0
    assert EXP2_TABLE[0] == math.sqrt(0.5)
    assert EXP2_TABLE[256] == math.sqrt(2.0)
    assert all(a < b for a, b in zip(EXP2_TABLE, EXP2_TABLE[1:]))


@pytest.mark.parametrize("i", [1, 37, 64, 127, 129, 192, 255])
def test_exp2_table_entries_match_exp(i: int) -> None:
    assert math.isclose(EXP2_TABLE[i], math.exp((i - 128) * math.log(2.0) / 256), rel_tol=1e-15)


def test_exp2_is_deterministic() -> None:
    xs = [i / 7.0 for i in range(-700, 700)]
    assert [exp2(x) for x in xs] == [exp2(x) for x in xs]


@pytest.mark.parametrize("x", [-897.1054268269316, -758.0256201860611])
def test_exp2_worst_observed_inputs_stay_within_error_bound(x: float) -> None:
    # Table rounding plus the division and the final product can add up to
    # just under 3 ULP; these inputs sit near that bound.
    expected = 2.0**x
    got = exp2(x)
    assert got != 0.0
    assert abs(got - expected) <= 4 * math.ulp(max(got, expected))
