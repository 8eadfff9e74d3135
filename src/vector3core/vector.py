# vector3core/vector.py
import logging
import math
import numbers
import sys
from typing import Iterator, List, Mapping, Optional, Sequence

import numpy as np

from vector3core.errors import InvalidArgumentError
from vector3core.rounding import MidpointRounding, round_component
from vector3core.utils import (
    almost_equals_with_abs_tolerance,
    clamped_acos,
    combine_hashes,
    components_equal,
    cos_sin,
    ieee_divide,
    ieee_pow,
    ieee_sqrt,
    transform_special_case,
)

logger = logging.getLogger(__name__)


class Vector3:
    """
    An immutable 3D vector of double-precision components.

    Every operation returns a new instance. Operations that are undefined
    for some inputs (normalizing a zero vector, scaling by a negative
    magnitude, ...) return None instead of raising.
    """
    __slots__ = ("_x", "_y", "_z")

    # Let numpy scalars on the left hand side defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "_x", float(x))
        object.__setattr__(self, "_y", float(y))
        object.__setattr__(self, "_z", float(z))

    @classmethod
    def from_array(cls, arr: Sequence[float]) -> "Vector3":
        """
        Builds a vector from an ordered sequence of exactly three numbers.
        """
        try:
            length = len(arr)
        except TypeError:
            raise InvalidArgumentError(
                f"expected a sequence of 3 numbers, got {type(arr).__name__}") from None
        if length != 3:
            logger.debug("Rejected %d-element sequence for Vector3", length)
            raise InvalidArgumentError(f"expected a sequence of 3 numbers, got {length}")
        return cls(arr[0], arr[1], arr[2])

    @classmethod
    def from_vector(cls, v: "Vector3") -> "Vector3":
        return cls(v.x, v.y, v.z)

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "Vector3":
        """
        Inverse of to_dict(): reads the named components x, y and z.
        """
        try:
            return cls(data["x"], data["y"], data["z"])
        except KeyError as e:
            raise InvalidArgumentError(f"missing vector component {e.args[0]!r}") from None

    def __setattr__(self, name, value):
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def array(self) -> List[float]:
        """A fresh [x, y, z] list."""
        return [self._x, self._y, self._z]

    def to_numpy(self) -> np.ndarray:
        return np.array([self._x, self._y, self._z], dtype=np.float64)

    def to_dict(self) -> dict:
        return {"x": self._x, "y": self._y, "z": self._z}

    def copy(self) -> "Vector3":
        return Vector3(self._x, self._y, self._z)

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y
        yield self._z

    # ------------------------------------------------------------------
    # Arithmetic

    def sum_components(self) -> float:
        return self._x + self._y + self._z

    def pow_components(self, power: float) -> "Vector3":
        return Vector3(
            ieee_pow(self._x, power),
            ieee_pow(self._y, power),
            ieee_pow(self._z, power)
        )

    def sqr_components(self) -> "Vector3":
        return self.pow_components(2)

    def sqrt_components(self) -> "Vector3":
        return Vector3(
            ieee_sqrt(self._x),
            ieee_sqrt(self._y),
            ieee_sqrt(self._z)
        )

    def sum_component_sqrs(self) -> float:
        return self.sqr_components().sum_components()

    def magnitude(self) -> float:
        return ieee_sqrt(self.sum_component_sqrs())

    def abs(self) -> float:
        return self.magnitude()

    def cross_product(self, v: "Vector3") -> "Vector3":
        return Vector3(
            self._y * v.z - self._z * v.y,
            self._z * v.x - self._x * v.z,
            self._x * v.y - self._y * v.x
        )

    def dot_product(self, v: "Vector3") -> float:
        return self._x * v.x + self._y * v.y + self._z * v.z

    def mixed_product(self, other1: "Vector3", other2: "Vector3") -> float:
        """Scalar triple product (self x other1) . other2."""
        return self.cross_product(other1).dot_product(other2)

    def is_unit_vector(self, tolerance: Optional[float] = None) -> bool:
        if tolerance is None:
            return self.magnitude() == 1
        return almost_equals_with_abs_tolerance(self.magnitude(), 1, tolerance)

    def is_nan(self) -> bool:
        return math.isnan(self._x) or math.isnan(self._y) or math.isnan(self._z)

    # ------------------------------------------------------------------
    # Normalization

    def normalize(self) -> Optional["Vector3"]:
        """
        Returns the unit vector pointing the same way, or None when the
        direction is undefined (zero or NaN magnitude).

        Vectors with infinite magnitude are reduced component by component:
        infinities become +-1 and zeros stay 0. If a finite non-zero
        component sits next to an infinite one the direction is still
        undefined and None is returned.
        """
        magnitude = self.magnitude()

        if magnitude == 0 or math.isnan(magnitude):
            logger.debug("Cannot normalize %r: magnitude is %s", self, magnitude)
            return None

        if math.isinf(magnitude):
            result = self._special_cases()
            if result.is_nan():
                logger.debug("Cannot normalize %r: mixed infinite and finite components", self)
                return None
            return result

        inverse = ieee_divide(1, magnitude)
        return Vector3(self._x * inverse, self._y * inverse, self._z * inverse)

    def normalize_or_default(self) -> "Vector3":
        normalized = self.normalize()
        return normalized if normalized is not None else ORIGIN

    def _special_cases(self) -> "Vector3":
        return Vector3(
            transform_special_case(self._x),
            transform_special_case(self._y),
            transform_special_case(self._z)
        )

    # ------------------------------------------------------------------
    # Angles and orientation

    def angle(self, other: "Vector3") -> float:
        """
        Angle between the two vectors in radians. Zero vectors count as
        pointing nowhere and produce pi/2 against anything but themselves.
        """
        if self.equals(other):
            return 0.0

        dot_product = self.normalize_or_default().dot_product(other.normalize_or_default())
        return clamped_acos(dot_product)

    def is_back_face(self, line_of_sight: "Vector3") -> Optional[bool]:
        """
        True when this normal faces away from the line of sight. None if
        either vector has no direction.
        """
        normal = self.normalize()
        sight = line_of_sight.normalize()
        if normal is None or sight is None:
            return None
        return normal.dot_product(sight) < 0

    def is_perpendicular(self, other: "Vector3", tolerance: Optional[float] = None) -> bool:
        # Finite non-zero components map to NaN, so only axis-aligned
        # infinite vectors can compare as perpendicular.
        v1 = self._special_cases()
        v2 = other._special_cases()

        if v1 == ZERO or v2 == ZERO:
            return False

        dot_product = v1.dot_product(v2)
        if tolerance is None:
            return dot_product == 0
        return almost_equals_with_abs_tolerance(dot_product, 0, tolerance)

    # ------------------------------------------------------------------
    # Distance and interpolation

    def distance(self, other: "Vector3") -> float:
        dx = self._x - other.x
        dy = self._y - other.y
        dz = self._z - other.z
        return ieee_sqrt(dx * dx + dy * dy + dz * dz)

    def interpolate(self, other: "Vector3", control: float,
                    allow_extrapolation: bool = False) -> Optional["Vector3"]:
        """
        Linear interpolation between self (control=0) and other (control=1).
        Returns None for control outside [0, 1] unless extrapolation is allowed.
        """
        if not allow_extrapolation and (control > 1 or control < 0):
            logger.debug("Interpolation control %s outside [0, 1]", control)
            return None

        return Vector3(
            self._x * (1 - control) + other.x * control,
            self._y * (1 - control) + other.y * control,
            self._z * (1 - control) + other.z * control
        )

    def max(self, other: "Vector3") -> "Vector3":
        return self if self > other else other

    def min(self, other: "Vector3") -> "Vector3":
        return self if self <= other else other

    # ------------------------------------------------------------------
    # Projection, rejection and reflection

    def projection(self, direction: "Vector3") -> "Vector3":
        factor = ieee_divide(self.dot_product(direction), ieee_pow(direction.magnitude(), 2))
        return direction * factor

    def rejection(self, direction: "Vector3") -> "Vector3":
        return self - self.projection(direction)

    def reflection(self, reflector: "Vector3") -> Optional["Vector3"]:
        """
        Mirrors this vector about the reflector axis, keeping its magnitude.
        """
        if abs(abs(self.angle(reflector)) - math.pi / 2) < EPSILON.x:
            return -self

        reflected = 2 * self.projection(reflector) - self
        return reflected.scale(self.magnitude())

    def scale(self, magnitude: float) -> Optional["Vector3"]:
        """
        Returns a vector with the same direction and the given magnitude.
        None for a negative magnitude or a zero vector.
        """
        if magnitude < 0 or self == ZERO:
            logger.debug("Cannot scale %r to magnitude %s", self, magnitude)
            return None

        return self * ieee_divide(magnitude, self.magnitude())

    # ------------------------------------------------------------------
    # Rotation (right handed, radians)

    def rotate_x(self, rad: float, y_offset: float = 0.0, z_offset: float = 0.0) -> "Vector3":
        """
        Rotates about the x axis, or about the line parallel to it through
        (y_offset, z_offset) when offsets are given.
        """
        cos, sin = cos_sin(rad)
        y = self._y * cos - self._z * sin
        z = self._y * sin + self._z * cos
        if y_offset or z_offset:
            y += y_offset * (1 - cos) + z_offset * sin
            z += z_offset * (1 - cos) - y_offset * sin
        return Vector3(self._x, y, z)

    def rotate_y(self, rad: float, x_offset: float = 0.0, z_offset: float = 0.0) -> "Vector3":
        """
        Rotates about the y axis, or about the line parallel to it through
        (x_offset, z_offset) when offsets are given.
        """
        cos, sin = cos_sin(rad)
        x = self._z * sin + self._x * cos
        z = self._z * cos - self._x * sin
        if x_offset or z_offset:
            x += x_offset * (1 - cos) - z_offset * sin
            # Sign is + here: expanding R(p - c) + c keeps (x_offset, z_offset) fixed
            z += z_offset * (1 - cos) + x_offset * sin
        return Vector3(x, self._y, z)

    def rotate_z(self, rad: float, x_offset: float = 0.0, y_offset: float = 0.0) -> "Vector3":
        """
        Rotates about the z axis, or about the line parallel to it through
        (x_offset, y_offset) when offsets are given.
        """
        cos, sin = cos_sin(rad)
        x = self._x * cos - self._y * sin
        y = self._x * sin + self._y * cos
        if x_offset or y_offset:
            x += x_offset * (1 - cos) + y_offset * sin
            y += y_offset * (1 - cos) - x_offset * sin
        return Vector3(x, y, self._z)

    pitch = rotate_x
    yaw = rotate_y
    roll = rotate_z

    # ------------------------------------------------------------------
    # Rounding

    def round(self, digits: int = 0, mode: MidpointRounding = MidpointRounding.TO_EVEN) -> "Vector3":
        return Vector3(
            round_component(self._x, digits, mode),
            round_component(self._y, digits, mode),
            round_component(self._z, digits, mode)
        )

    def __round__(self, ndigits: Optional[int] = None) -> "Vector3":
        return self.round(0 if ndigits is None else ndigits)

    # ------------------------------------------------------------------
    # Operators

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self._x + other.x, self._y + other.y, self._z + other.z)

    def __pos__(self) -> "Vector3":
        return Vector3(+self._x, +self._y, +self._z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self._x - other.x, self._y - other.y, self._z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self._x, -self._y, -self._z)

    def __mul__(self, d: float) -> "Vector3":
        if not isinstance(d, numbers.Real):
            return NotImplemented
        return Vector3(self._x * d, self._y * d, self._z * d)

    def __rmul__(self, d: float) -> "Vector3":
        return self.__mul__(d)

    def __truediv__(self, d: float) -> "Vector3":
        if not isinstance(d, numbers.Real):
            return NotImplemented
        return Vector3(
            ieee_divide(self._x, d),
            ieee_divide(self._y, d),
            ieee_divide(self._z, d)
        )

    def __abs__(self) -> float:
        return self.magnitude()

    # Ordering compares squared magnitudes, not components
    def __lt__(self, other: "Vector3") -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.sum_component_sqrs() < other.sum_component_sqrs()

    def __gt__(self, other: "Vector3") -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.sum_component_sqrs() > other.sum_component_sqrs()

    def __le__(self, other: "Vector3") -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.sum_component_sqrs() <= other.sum_component_sqrs()

    def __ge__(self, other: "Vector3") -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.sum_component_sqrs() >= other.sum_component_sqrs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._x == other.x and self._y == other.y and self._z == other.z

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return combine_hashes(self._x, self._y, self._z)

    def equals(self, other: object) -> bool:
        """
        Structural equality. Unlike ==, NaN components equal each other.
        """
        if not isinstance(other, Vector3):
            return False
        return (components_equal(self._x, other.x)
                and components_equal(self._y, other.y)
                and components_equal(self._z, other.z))

    def almost_equals(self, other: "Vector3", tolerance: float) -> bool:
        return (almost_equals_with_abs_tolerance(self._x, other.x, tolerance)
                and almost_equals_with_abs_tolerance(self._y, other.y, tolerance)
                and almost_equals_with_abs_tolerance(self._z, other.z, tolerance))

    # ------------------------------------------------------------------
    # Formatting and pickling

    def __format__(self, format_spec: str) -> str:
        """
        'x', 'y' or 'z' as the first character formats only that component
        with the rest of the spec ("x.3f"). Any other spec is applied to all
        three components, joined by ", ".
        """
        if not format_spec:
            return str(self)
        if format_spec.isspace():
            return f"{self._x}, {self._y}, {self._z}"

        first, remainder = format_spec[0], format_spec[1:]
        if first == "x":
            return format(self._x, remainder)
        if first == "y":
            return format(self._y, remainder)
        if first == "z":
            return format(self._z, remainder)
        return ", ".join(format(c, format_spec) for c in self)

    def __str__(self) -> str:
        return f"Vector3 ({self._x} {self._y} {self._z})"

    def __repr__(self) -> str:
        return f"Vector3({self._x}, {self._y}, {self._z})"

    def __reduce__(self):
        return (Vector3, (self._x, self._y, self._z))

    def __copy__(self) -> "Vector3":
        return self.copy()

    def __deepcopy__(self, memo) -> "Vector3":
        return self.copy()


ORIGIN = Vector3(0, 0, 0)
ZERO = ORIGIN
X_AXIS = Vector3(1, 0, 0)
Y_AXIS = Vector3(0, 1, 0)
Z_AXIS = Vector3(0, 0, 1)
MIN_VALUE = Vector3(-sys.float_info.max, -sys.float_info.max, -sys.float_info.max)
MAX_VALUE = Vector3(sys.float_info.max, sys.float_info.max, sys.float_info.max)
# Smallest positive subnormal double, not the machine epsilon
EPSILON = Vector3(5e-324, 5e-324, 5e-324)
NAN = Vector3(math.nan, math.nan, math.nan)
