# vector3core/rounding.py
import math
from enum import Enum
from vector3core.errors import InvalidArgumentError

MAX_ROUNDING_DIGITS = 15


class MidpointRounding(Enum):
    """
    How a value is rounded when it has to lose fractional digits.
    TO_EVEN and AWAY_FROM_ZERO only differ for values exactly halfway
    between two candidates; the directed modes always round one way.
    """
    TO_EVEN = "to_even"
    AWAY_FROM_ZERO = "away_from_zero"
    TO_ZERO = "to_zero"
    TO_NEGATIVE_INFINITY = "to_negative_infinity"
    TO_POSITIVE_INFINITY = "to_positive_infinity"


def _round_half_away(value: float) -> float:
    fraction, integral = math.modf(value)
    if abs(fraction) >= 0.5:
        integral += math.copysign(1.0, value)
    return integral


_DIRECTED = {
    MidpointRounding.AWAY_FROM_ZERO: _round_half_away,
    MidpointRounding.TO_ZERO: math.trunc,
    MidpointRounding.TO_NEGATIVE_INFINITY: math.floor,
    MidpointRounding.TO_POSITIVE_INFINITY: math.ceil,
}


def round_component(value: float, digits: int = 0,
                    mode: MidpointRounding = MidpointRounding.TO_EVEN) -> float:
    """
    Rounds a single float to the given number of decimal digits.
    Non-finite values are returned unchanged and the sign of zero is kept.
    """
    if not isinstance(digits, int) or isinstance(digits, bool):
        raise InvalidArgumentError(f"digits must be an int, got {type(digits).__name__}")
    if digits < 0 or digits > MAX_ROUNDING_DIGITS:
        raise InvalidArgumentError(
            f"digits must be between 0 and {MAX_ROUNDING_DIGITS}, got {digits}")
    if not isinstance(mode, MidpointRounding):
        raise InvalidArgumentError(f"unknown rounding mode: {mode!r}")

    if not math.isfinite(value):
        return value

    if mode is MidpointRounding.TO_EVEN:
        result = round(value, digits)
    else:
        power10 = 10.0 ** digits
        scaled = value * power10
        # Already an integer at this precision
        if abs(scaled) >= 2.0 ** 52:
            return value
        result = float(_DIRECTED[mode](scaled)) / power10

    return math.copysign(result, value) if result == 0 else result
