import math

import pytest

from vector3core.utils import (
    almost_equals_with_abs_tolerance,
    clamped_acos,
    combine_hashes,
    cos_sin,
    ieee_divide,
    ieee_pow,
    transform_special_case,
)


@pytest.mark.parametrize("value, expected", [
    (0.0, 0.0),
    (-0.0, 0.0),
    (math.inf, 1.0),
    (-math.inf, -1.0),
])
def test_transform_special_case(value, expected):
    assert transform_special_case(value) == expected


@pytest.mark.parametrize("value", [1.0, -3.5, 1e-300, math.nan])
def test_transform_special_case_finite_is_nan(value):
    assert math.isnan(transform_special_case(value))


def test_ieee_helpers_do_not_raise():
    assert ieee_divide(1, 0) == math.inf
    assert ieee_divide(-1, 0) == -math.inf
    assert math.isnan(ieee_divide(0, 0))
    assert ieee_pow(10, 400) == math.inf
    assert math.isnan(ieee_pow(-2, 0.5))
    assert all(math.isnan(c) for c in cos_sin(math.inf))


def test_clamped_acos_caps_only_above():
    assert clamped_acos(1.0000000000000002) == 0.0
    assert clamped_acos(-1.0) == math.pi
    assert math.isnan(clamped_acos(-1.0000000000000002))
    assert math.isnan(clamped_acos(math.nan))


def test_almost_equals_with_abs_tolerance():
    assert almost_equals_with_abs_tolerance(math.inf, math.inf, 0)
    assert almost_equals_with_abs_tolerance(1.0, 1.05, 0.1)
    assert not almost_equals_with_abs_tolerance(1.0, 1.2, 0.1)


def test_combine_hashes_fits_in_64_bits():
    h = combine_hashes(1e300, -1e300, 123.456)
    assert 0 <= h < 2 ** 64


@pytest.mark.parametrize("x, y, z", [
    (1.0, 2.0, 3.0),
    (-4.5, 0.25, 7.0),
    (1e300, -1e300, 123.456),
])
def test_combine_hashes_uses_397_multiplier(x, y, z):
    mask = 2 ** 64 - 1
    expected = hash(x)
    expected = ((expected * 397) ^ hash(y)) & mask
    expected = ((expected * 397) ^ hash(z)) & mask
    assert combine_hashes(x, y, z) == expected
