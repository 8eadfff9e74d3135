"""
vector3core: an immutable 3D vector value type.
"""
import logging

from vector3core.errors import InvalidArgumentError
from vector3core.rounding import MidpointRounding
from vector3core.vector import (
    EPSILON,
    MAX_VALUE,
    MIN_VALUE,
    NAN,
    ORIGIN,
    X_AXIS,
    Y_AXIS,
    Z_AXIS,
    ZERO,
    Vector3,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector3",
    "ORIGIN",
    "ZERO",
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
    "MIN_VALUE",
    "MAX_VALUE",
    "EPSILON",
    "NAN",
    "MidpointRounding",
    "InvalidArgumentError",
]
