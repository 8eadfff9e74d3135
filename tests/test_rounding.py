import math

import pytest

from vector3core import InvalidArgumentError, MidpointRounding, Vector3
from vector3core.rounding import round_component


def test_default_round_is_half_to_even():
    assert Vector3(0.5, 1.5, 2.5).round() == Vector3(0, 2, 2)
    assert Vector3(-0.5, -1.5, 2.4).round() == Vector3(0, -2, 2)


def test_builtin_round():
    assert round(Vector3(0.5, 1.5, 2.6)) == Vector3(0, 2, 3)
    assert round(Vector3(1.25, 1.35, -0.125), 1) == Vector3(1.2, 1.4, -0.1)


def test_round_with_digits():
    assert Vector3(1.2345, 2.3456, 3.4567).round(2) == Vector3(1.23, 2.35, 3.46)


def test_round_away_from_zero():
    v = Vector3(0.5, 1.5, -2.5)
    assert v.round(mode=MidpointRounding.AWAY_FROM_ZERO) == Vector3(1, 2, -3)
    assert Vector3(0.125, 0.375, -0.625).round(2, MidpointRounding.AWAY_FROM_ZERO) == \
        Vector3(0.13, 0.38, -0.63)


@pytest.mark.parametrize("mode, expected", [
    (MidpointRounding.TO_ZERO, (1.0, -1.0)),
    (MidpointRounding.TO_NEGATIVE_INFINITY, (1.0, -2.0)),
    (MidpointRounding.TO_POSITIVE_INFINITY, (2.0, -1.0)),
])
def test_directed_modes(mode, expected):
    assert round_component(1.7, 0, mode) == expected[0]
    assert round_component(-1.3, 0, mode) == expected[1]


def test_round_keeps_non_finite_and_signed_zero():
    v = Vector3(math.inf, -math.inf, -0.2).round(mode=MidpointRounding.AWAY_FROM_ZERO)
    assert v.x == math.inf and v.y == -math.inf
    assert v.z == 0 and math.copysign(1.0, v.z) == -1.0
    assert Vector3(math.nan, 0, 0).round().is_nan()


@pytest.mark.parametrize("digits", [-1, 16, 1.5])
def test_invalid_digits(digits):
    with pytest.raises(InvalidArgumentError):
        Vector3(1, 2, 3).round(digits)


def test_invalid_mode():
    with pytest.raises(InvalidArgumentError):
        round_component(1.0, 0, "half_up")
