import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from gamemath.scalar import clamp, lerp, normalize, remap

finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)
fraction = st.floats(min_value=0.0, max_value=1.0, allow_nan=False)


def test_clamp_inside_range_returns_value():
    assert clamp(5.0, 0.0, 10.0) == 5.0


def test_clamp_below_range_returns_minimum():
    assert clamp(-3.0, 0.0, 10.0) == 0.0


def test_clamp_above_range_returns_maximum():
    assert clamp(42.0, 0.0, 10.0) == 10.0


def test_clamp_with_inverted_bounds_prefers_maximum():
    assert clamp(5.0, 10.0, 2.0) == 2.0
    assert clamp(20.0, 10.0, 2.0) == 2.0


@given(finite, finite, finite)
def test_clamp_result_within_bounds(value, a, b):
    low, high = min(a, b), max(a, b)
    result = clamp(value, low, high)
    assert low <= result <= high


@given(finite, finite, finite)
def test_clamp_is_idempotent(value, a, b):
    low, high = min(a, b), max(a, b)
    once = clamp(value, low, high)
    assert clamp(once, low, high) == once


def test_lerp_endpoints():
    assert lerp(3.0, 7.0, 0.0) == 3.0
    assert lerp(3.0, 7.0, 1.0) == 7.0


def test_lerp_midpoint():
    assert lerp(2.0, 8.0, 0.5) == 5.0


def test_lerp_extrapolates_beyond_one():
    assert lerp(0.0, 4.0, 2.0) == 8.0


@given(finite, finite, fraction)
def test_lerp_stays_between_endpoints(start, end, amount):
    result = lerp(start, end, amount)
    low, high = min(start, end), max(start, end)
    tolerance = 1e-9 * (abs(start) + abs(end) + 1.0)
    assert low - tolerance <= result <= high + tolerance


def test_normalize_endpoints():
    assert normalize(3.0, 3.0, 7.0) == 0.0
    assert normalize(7.0, 3.0, 7.0) == 1.0


def test_normalize_empty_range_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(1.0, 2.0, 2.0)


@given(finite, finite, fraction)
def test_normalize_inverts_lerp(start, end, amount):
    assume(abs(end - start) > 1e-3)
    value = lerp(start, end, amount)
    assert math.isclose(normalize(value, start, end), amount, abs_tol=1e-6)


def test_remap_endpoints():
    assert remap(0.0, 0.0, 10.0, 100.0, 200.0) == 100.0
    assert remap(10.0, 0.0, 10.0, 100.0, 200.0) == 200.0


def test_remap_empty_input_range_raises():
    with pytest.raises(ZeroDivisionError):
        remap(1.0, 5.0, 5.0, 0.0, 1.0)


@given(finite, finite, finite, finite, fraction)
def test_remap_round_trip(in_start, in_end, out_start, out_end, amount):
    assume(abs(in_end - in_start) > 1e-3)
    assume(abs(out_end - out_start) > 1e-3)
    value = lerp(in_start, in_end, amount)
    mapped = remap(value, in_start, in_end, out_start, out_end)
    back = remap(mapped, out_start, out_end, in_start, in_end)
    scale = abs(in_start) + abs(in_end) + 1.0
    assert math.isclose(back, value, abs_tol=1e-6 * scale)


@given(finite, finite, fraction)
def test_remap_onto_unit_range_matches_normalize(start, end, amount):
    assume(abs(end - start) > 1e-3)
    value = lerp(start, end, amount)
    assert math.isclose(
        remap(value, start, end, 0.0, 1.0),
        normalize(value, start, end),
        abs_tol=1e-12,
    )