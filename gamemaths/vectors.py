"""Two, three and four component floating point vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

Number = Union[int, float]

F32_EPSILON = 2.0 ** -23
_ISIZE_MAX = 2 ** 63 - 1
_ISIZE_MIN = -(2 ** 63)


def _div(a: float, b: float) -> float:
    """Divide with IEEE semantics: zero divisors give infinities or NaN."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _acos(value: float) -> float:
    if -1.0 <= value <= 1.0:
        return math.acos(value)
    return math.nan


def _floor(value: float) -> float:
    if math.isfinite(value):
        return float(math.floor(value))
    return value


def _round_to_int(value: float) -> int:
    """Round half away from zero, saturating to the signed 64-bit range."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _ISIZE_MAX if value > 0 else _ISIZE_MIN
    rounded = math.floor(abs(value) + 0.5)
    result = rounded if value >= 0 else -rounded
    return max(_ISIZE_MIN, min(_ISIZE_MAX, result))


def _fmt(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


class _Constant:
    """Class-level constant that hands out a fresh vector on every access."""

    def __init__(self, *values: float) -> None:
        self._values = values

    def __get__(self, instance: object, owner: type) -> object:
        return owner(*self._values)


@dataclass(order=True, slots=True)
class Vector2:
    """A two component vector."""

    x: float = 0.0
    y: float = 0.0

    X = _Constant(1.0, 0.0)
    Y = _Constant(0.0, 1.0)
    ZERO = _Constant(0.0, 0.0)
    ONE = _Constant(1.0, 1.0)
    EPSILON = _Constant(F32_EPSILON, F32_EPSILON)

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    @classmethod
    def from_any(cls, value: Union["Vector2", Iterable[Number]]) -> "Vector2":
        """Build a vector from another vector or any two-item iterable."""
        items = [float(v) for v in value]
        if len(items) != 2:
            raise ValueError(f"expected 2 components, got {len(items)}")
        return cls(*items)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalised(self) -> "Vector2":
        length = self.magnitude()
        return Vector2(_div(self.x, length), _div(self.y, length))

    def normalise(self) -> None:
        length = self.magnitude()
        self.x = _div(self.x, length)
        self.y = _div(self.y, length)

    def dot(self, rhs: Union["Vector2", Iterable[Number]]) -> float:
        other = Vector2.from_any(rhs)
        return self.x * other.x + self.y * other.y

    def sum(self) -> float:
        return self.x + self.y

    def floor(self) -> "Vector2":
        return Vector2(_floor(self.x), _floor(self.y))

    def to_isize_array(self) -> list[int]:
        return [_round_to_int(self.x), _round_to_int(self.y)]

    def extend(self) -> "Vector3":
        """Extend to a three component vector with a zero z."""
        return Vector3(self.x, self.y, 0.0)

    def extend_with(self, extension: float) -> "Vector3":
        return Vector3(self.x, self.y, extension)

    def __add__(self, other: object) -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if _is_scalar(other):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vector2":
        if _is_scalar(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(_div(self.x, other.x), _div(self.y, other.y))
        if _is_scalar(other):
            return Vector2(_div(self.x, other), _div(self.y, other))
        return NotImplemented

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __str__(self) -> str:
        return f"[{_fmt(self.x)}, {_fmt(self.y)}]"


@dataclass(order=True, slots=True)
class Vector3:
    """A three component vector, ordered by x, then y, then z."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    X = _Constant(1.0, 0.0, 0.0)
    Y = _Constant(0.0, 1.0, 0.0)
    Z = _Constant(0.0, 0.0, 1.0)
    ZERO = _Constant(0.0, 0.0, 0.0)
    ONE = _Constant(1.0, 1.0, 1.0)
    EPSILON = _Constant(F32_EPSILON, F32_EPSILON, F32_EPSILON)

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    @classmethod
    def from_any(cls, value: Union["Vector3", Iterable[Number]]) -> "Vector3":
        """Build a vector from another vector or any three-item iterable."""
        items = [float(v) for v in value]
        if len(items) != 3:
            raise ValueError(f"expected 3 components, got {len(items)}")
        return cls(*items)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalise(self) -> None:
        length = self.magnitude()
        self.x = _div(self.x, length)
        self.y = _div(self.y, length)
        self.z = _div(self.z, length)

    def normalised(self) -> "Vector3":
        length = self.magnitude()
        return Vector3(_div(self.x, length), _div(self.y, length), _div(self.z, length))

    def dot(self, rhs: Union["Vector3", Iterable[Number]]) -> float:
        other = Vector3.from_any(rhs)
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, rhs: Union["Vector3", Iterable[Number]]) -> "Vector3":
        other = Vector3.from_any(rhs)
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def outer_product(self) -> tuple["Vector3", "Vector3", "Vector3"]:
        return (
            Vector3(self.x * self.x, self.x * self.y, self.x * self.z),
            Vector3(self.y * self.x, self.y * self.y, self.y * self.z),
            Vector3(self.z * self.x, self.z * self.y, self.z * self.z),
        )

    def skew_symmetric(self) -> tuple["Vector3", "Vector3", "Vector3"]:
        return (
            Vector3(0.0, -self.z, self.y),
            Vector3(self.z, 0.0, -self.x),
            Vector3(-self.y, self.x, 0.0),
        )

    def angle_to(self, rhs: Union["Vector3", Iterable[Number]]) -> float:
        other = Vector3.from_any(rhs)
        return _acos(_div(self.dot(other), self.magnitude() * other.magnitude()))

    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def xz(self) -> Vector2:
        return Vector2(self.x, self.z)

    def yz(self) -> Vector2:
        return Vector2(self.y, self.z)

    def direction_directions(self) -> "Vector3":
        """Sign of each component, e.g. (-7, 5, -1) gives (-1, 1, -1)."""
        return Vector3(
            _div(self.x, abs(self.x)),
            _div(self.y, abs(self.y)),
            _div(self.z, abs(self.z)),
        )

    def sum(self) -> float:
        return self.x + self.y + self.z

    def floor(self) -> "Vector3":
        return Vector3(_floor(self.x), _floor(self.y), _floor(self.z))

    def to_isize_array(self) -> list[int]:
        return [_round_to_int(self.x), _round_to_int(self.y), _round_to_int(self.y)]

    def extend(self) -> "Vector4":
        """Extend to a four component vector with a zero w."""
        return Vector4(self.x, self.y, self.z, 0.0)

    def extend_with(self, extension: float) -> "Vector4":
        return Vector4(self.x, self.y, self.z, extension)

    def truncate(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __add__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> "Vector3":
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if _is_scalar(other):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vector3":
        if _is_scalar(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> "Vector3":
        if isinstance(other, Vector3):
            return Vector3(_div(self.x, other.x), _div(self.y, other.y), _div(self.z, other.z))
        if _is_scalar(other):
            return Vector3(_div(self.x, other), _div(self.y, other), _div(self.z, other))
        return NotImplemented

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"[{_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)}]"


@dataclass(order=True, slots=True)
class Vector4:
    """A four component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    X = _Constant(1.0, 0.0, 0.0, 0.0)
    Y = _Constant(0.0, 1.0, 0.0, 0.0)
    Z = _Constant(0.0, 0.0, 1.0, 0.0)
    W = _Constant(0.0, 0.0, 0.0, 1.0)
    ZERO = _Constant(0.0, 0.0, 0.0, 0.0)
    ONE = _Constant(1.0, 1.0, 1.0, 1.0)
    EPSILON = _Constant(F32_EPSILON, F32_EPSILON, F32_EPSILON, F32_EPSILON)

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)
        self.w = float(self.w)

    @classmethod
    def from_any(cls, value: Union["Vector4", Iterable[Number]]) -> "Vector4":
        """Build a vector from another vector or any four-item iterable."""
        items = [float(v) for v in value]
        if len(items) != 4:
            raise ValueError(f"expected 4 components, got {len(items)}")
        return cls(*items)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalise(self) -> None:
        length = self.magnitude()
        self.x = _div(self.x, length)
        self.y = _div(self.y, length)
        self.z = _div(self.z, length)
        self.w = _div(self.w, length)

    def dot(self, rhs: Union["Vector4", Iterable[Number]]) -> float:
        other = Vector4.from_any(rhs)
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def xz(self) -> Vector2:
        return Vector2(self.x, self.z)

    def yz(self) -> Vector2:
        return Vector2(self.y, self.z)

    def sum(self) -> float:
        return self.x + self.y + self.z + self.w

    def truncate(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def truncate_n(self, n: int) -> Vector3:
        """Drop the component at index ``n`` and return the remaining three."""
        components = list(self)
        if not 0 <= n < 4:
            raise IndexError(f"component index {n} out of range")
        del components[n]
        return Vector3(*components)

    def __add__(self, other: object) -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: object) -> "Vector4":
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: object) -> "Vector4":
        if _is_scalar(other):
            return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vector4":
        if _is_scalar(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> "Vector4":
        if _is_scalar(other):
            return Vector4(
                _div(self.x, other), _div(self.y, other), _div(self.z, other), _div(self.w, other)
            )
        return NotImplemented

    def __neg__(self) -> "Vector4":
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __str__(self) -> str:
        return f"[{_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)}, {_fmt(self.w)}]"