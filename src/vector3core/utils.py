# vector3core/utils.py
import math
import numpy as np

# Largest value a 64-bit hash can hold; combined hashes wrap around it.
_HASH_MASK = 0xFFFFFFFFFFFFFFFF
_HASH_MULTIPLIER = 397


def ieee_pow(base: float, exponent: float) -> float:
    """
    Raises base to exponent, returning inf/NaN instead of raising on
    overflow or a negative base with a fractional exponent.
    """
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))


def ieee_sqrt(value: float) -> float:
    """
    Square root that yields NaN for negative input.
    """
    with np.errstate(all="ignore"):
        return float(np.sqrt(np.float64(value)))


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Division that yields +-inf or NaN when the denominator is zero.
    """
    with np.errstate(all="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def cos_sin(rad: float):
    """
    Returns (cos(rad), sin(rad)); non-finite angles give NaN.
    """
    with np.errstate(all="ignore"):
        angle = np.float64(rad)
        return float(np.cos(angle)), float(np.sin(angle))


def clamped_acos(value: float) -> float:
    """
    Arccosine of value capped at 1.0 from above. Values below -1 and NaN
    give NaN.
    """
    with np.errstate(all="ignore"):
        return float(np.arccos(np.float64(min(value, 1.0))))


def transform_special_case(num: float) -> float:
    """
    Maps a component to {-1, 0, 1, NaN}: zeros become 0, +inf becomes 1,
    -inf becomes -1 and everything else becomes NaN.
    """
    if num == 0:
        return 0.0
    if num == math.inf:
        return 1.0
    if num == -math.inf:
        return -1.0
    return math.nan


def almost_equals_with_abs_tolerance(a: float, b: float, max_absolute_error: float) -> bool:
    if a == b:
        return True
    return abs(a - b) <= max_absolute_error


def components_equal(a: float, b: float) -> bool:
    """
    Structural float equality: like ==, but NaN equals NaN.
    """
    return a == b or (math.isnan(a) and math.isnan(b))


def component_hash(value: float) -> int:
    # hash(nan) is identity based on recent interpreters
    if math.isnan(value):
        return 0
    return hash(value)


def combine_hashes(x: float, y: float, z: float) -> int:
    hash_code = component_hash(x)
    hash_code = ((hash_code * _HASH_MULTIPLIER) ^ component_hash(y)) & _HASH_MASK
    hash_code = ((hash_code * _HASH_MULTIPLIER) ^ component_hash(z)) & _HASH_MASK
    return hash_code
