"""Square two, three and four dimensional matrices stored as row vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Union

from .vectors import Vector2, Vector3, Vector4, _div, _is_scalar

Number = Union[int, float]


class _Constant:
    """Class-level constant that builds a fresh matrix on every access."""

    def __init__(self, factory: Callable[[type], object]) -> None:
        self._factory = factory

    def __get__(self, instance: object, owner: type) -> object:
        return self._factory(owner)


def _check_count(name: str, args: tuple, expected: int) -> None:
    if len(args) != expected:
        raise TypeError(f"{name}.from_values() takes {expected} values, got {len(args)}")


def _asin(value: float) -> float:
    if -1.0 <= value <= 1.0:
        return math.asin(value)
    return math.nan


@dataclass(order=True, slots=True)
class Matrix2:
    """A 2x2 matrix held as two row vectors."""

    x: Vector2 = field(default_factory=Vector2)
    y: Vector2 = field(default_factory=Vector2)

    IDENTITY = _Constant(lambda cls: cls(Vector2.X, Vector2.Y))
    ONE = _Constant(lambda cls: cls(Vector2.ONE, Vector2.ONE))
    EPSILON = _Constant(lambda cls: cls(Vector2.EPSILON, Vector2.EPSILON))

    def __post_init__(self) -> None:
        self.x = Vector2.from_any(self.x)
        self.y = Vector2.from_any(self.y)

    @classmethod
    def from_values(cls, *args: Number) -> "Matrix2":
        """Build from four values given row by row."""
        _check_count("Matrix2", args, 4)
        return cls(args[0:2], args[2:4])

    @classmethod
    def from_rows(cls, x: Iterable[Number], y: Iterable[Number]) -> "Matrix2":
        return cls(x, y)

    def __iter__(self) -> Iterator[Vector2]:
        yield self.x
        yield self.y

    def c0(self) -> Vector2:
        return Vector2(self.x.x, self.y.x)

    def c1(self) -> Vector2:
        return Vector2(self.x.y, self.y.y)

    def det(self) -> float:
        return self.x.x * self.y.y - self.x.y * self.y.x

    def inverted(self) -> "Matrix2":
        return Matrix2.from_values(self.y.y, -self.x.y, -self.y.x, self.x.x) / self.det()

    def extend(self) -> "Matrix3":
        return Matrix3.from_values(
            self.x.x, self.x.y, 0.0,
            self.y.x, self.y.y, 0.0,
            0.0, 0.0, 1.0,
        )

    def __matmul__(self, other: object) -> Union["Matrix2", Vector2]:
        if isinstance(other, Matrix2):
            columns = (other.c0(), other.c1())
            return Matrix2(*([row.dot(col) for col in columns] for row in self))
        if isinstance(other, Vector2):
            return Vector2(self.x.dot(other), self.y.dot(other))
        return NotImplemented

    def __add__(self, other: object) -> "Matrix2":
        if not isinstance(other, Matrix2):
            return NotImplemented
        return Matrix2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Matrix2":
        if not isinstance(other, Matrix2):
            return NotImplemented
        return Matrix2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object) -> "Matrix2":
        if not _is_scalar(other):
            return NotImplemented
        return Matrix2(self.x * other, self.y * other)

    def __rmul__(self, other: object) -> "Matrix2":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "Matrix2":
        if not _is_scalar(other):
            return NotImplemented
        return Matrix2(self.x / other, self.y / other)

    def __str__(self) -> str:
        return f"[\n   {self.x},\n   {self.y}\n]"


@dataclass(order=True, slots=True)
class Matrix3:
    """A 3x3 matrix held as three row vectors."""

    x: Vector3 = field(default_factory=Vector3)
    y: Vector3 = field(default_factory=Vector3)
    z: Vector3 = field(default_factory=Vector3)

    IDENTITY = _Constant(lambda cls: cls(Vector3.X, Vector3.Y, Vector3.Z))
    ONE = _Constant(lambda cls: cls(Vector3.ONE, Vector3.ONE, Vector3.ONE))
    EPSILON = _Constant(lambda cls: cls(Vector3.EPSILON, Vector3.EPSILON, Vector3.EPSILON))

    def __post_init__(self) -> None:
        self.x = Vector3.from_any(self.x)
        self.y = Vector3.from_any(self.y)
        self.z = Vector3.from_any(self.z)

    @classmethod
    def from_values(cls, *args: Number) -> "Matrix3":
        """Build from nine values given row by row."""
        _check_count("Matrix3", args, 9)
        return cls(args[0:3], args[3:6], args[6:9])

    @classmethod
    def from_rows(
        cls, r0: Iterable[Number], r1: Iterable[Number], r2: Iterable[Number]
    ) -> "Matrix3":
        return cls(r0, r1, r2)

    @classmethod
    def from_columns(
        cls, c0: Iterable[Number], c1: Iterable[Number], c2: Iterable[Number]
    ) -> "Matrix3":
        return cls.from_rows(c0, c1, c2).transposed()

    def __iter__(self) -> Iterator[Vector3]:
        yield self.x
        yield self.y
        yield self.z

    def c0(self) -> Vector3:
        return Vector3(self.x.x, self.y.x, self.z.x)

    def c1(self) -> Vector3:
        return Vector3(self.x.y, self.y.y, self.z.y)

    def c2(self) -> Vector3:
        return Vector3(self.x.z, self.y.z, self.z.z)

    @classmethod
    def from_angle_x(cls, angle: float) -> "Matrix3":
        """Anticlockwise rotation about the x axis."""
        c, s = math.cos(angle), math.sin(angle)
        return cls.from_values(1.0, 0.0, 0.0, 0.0, c, -s, 0.0, s, c)

    @classmethod
    def from_angle_y(cls, angle: float) -> "Matrix3":
        """Anticlockwise rotation about the y axis."""
        c, s = math.cos(angle), math.sin(angle)
        return cls.from_values(c, 0.0, s, 0.0, 1.0, 0.0, -s, 0.0, c)

    @classmethod
    def from_angle_z(cls, angle: float) -> "Matrix3":
        """Anticlockwise rotation about the z axis."""
        c, s = math.cos(angle), math.sin(angle)
        return cls.from_values(c, -s, 0.0, s, c, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_angle_and_axis(cls, angle: float, axis: Iterable[Number]) -> "Matrix3":
        """Anticlockwise rotation of ``angle`` about ``axis``."""
        axis = Vector3.from_any(axis)
        axis.normalise()
        if angle == 0.0:
            return cls.IDENTITY
        c, s = math.cos(angle), math.sin(angle)
        t = 1.0 - c
        ax, ay, az = axis
        return cls.from_values(
            c + ax ** 2 * t, ax * ay * t - az * s, ax * az * t + ay * s,
            ay * ax * t + az * s, c + ay ** 2 * t, ay * az * t - ax * s,
            az * ax * t - ay * s, az * ay * t + ax * s, c + az ** 2 * t,
        )

    @classmethod
    def from_euler_angles(cls, angles: Iterable[Number]) -> "Matrix3":
        x, y, z = Vector3.from_any(angles)
        sx, cx = math.sin(x), math.cos(x)
        sy, cy = math.sin(y), math.cos(y)
        sz, cz = math.sin(z), math.cos(z)
        return cls.from_values(
            cy * cz, sx * sy * cz - cx * sz, cx * sy * cz + sx * sz,
            cy * sz, sx * sy * sz + cx * cz, cx * sy * sz - sx * cz,
            -sy, sx * cy, cx * cy,
        )

    @staticmethod
    def euler_angles_from(rot: "Matrix3") -> Vector3:
        """Euler angles that reproduce the rotation matrix ``rot``."""
        if rot.z.x == 1.0:
            return Vector3(-math.atan2(rot.x.y, -rot.x.z), -math.pi / 2.0, 0.0)
        if rot.z.x == -1.0:
            return Vector3(math.atan2(rot.x.y, rot.x.z), math.pi / 2.0, 0.0)
        y = -_asin(rot.z.x)
        cos_y = math.cos(y)
        x = math.atan2(_div(rot.z.y, cos_y), _div(rot.z.z, cos_y))
        z = math.atan2(_div(rot.y.x, cos_y), _div(rot.x.x, cos_y))
        return Vector3(x, y, z)

    @classmethod
    def from_scale(cls, scale: float) -> "Matrix3":
        return cls.from_values(scale, 0.0, 0.0, 0.0, scale, 0.0, 0.0, 0.0, scale)

    def transposed(self) -> "Matrix3":
        return Matrix3(self.c0(), self.c1(), self.c2())

    def determinant(self) -> float:
        return (
            self.x.x * (self.y.y * self.z.z - self.z.y * self.y.z)
            - self.x.y * (self.y.x * self.z.z - self.z.x * self.y.z)
            + self.x.z * (self.y.x * self.z.y - self.z.x * self.y.y)
        )

    def inverted(self) -> "Matrix3":
        """The inverse, or an unchanged copy when the matrix is singular."""
        det = self.determinant()
        if det == 0.0:
            return Matrix3(self.x, self.y, self.z)
        return Matrix3.from_columns(
            self.y.cross(self.z), self.z.cross(self.x), self.x.cross(self.y)
        ) / det

    def extend(self) -> "Matrix4":
        return Matrix4(
            self.x.extend(), self.y.extend(), self.z.extend(), Vector4.W
        )

    def truncate(self) -> Matrix2:
        return Matrix2(self.x.truncate(), self.y.truncate())

    def __matmul__(self, other: object) -> Union["Matrix3", Vector3]:
        if isinstance(other, Matrix3):
            columns = (other.c0(), other.c1(), other.c2())
            return Matrix3(*([row.dot(col) for col in columns] for row in self))
        if isinstance(other, Vector3):
            return Vector3(other.dot(self.x), other.dot(self.y), other.dot(self.z))
        return NotImplemented

    def __add__(self, other: object) -> "Matrix3":
        if not isinstance(other, Matrix3):
            return NotImplemented
        return Matrix3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> "Matrix3":
        if not isinstance(other, Matrix3):
            return NotImplemented
        return Matrix3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> "Matrix3":
        if not _is_scalar(other):
            return NotImplemented
        return Matrix3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: object) -> "Matrix3":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "Matrix3":
        if not _is_scalar(other):
            return NotImplemented
        return Matrix3(self.x / other, self.y / other, self.z / other)

    def __str__(self) -> str:
        return f"[\n   {self.x},\n   {self.y},\n   {self.z}\n]"


@dataclass(order=True, slots=True)
class Matrix4:
    """A 4x4 matrix held as four row vectors."""

    x: Vector4 = field(default_factory=Vector4)
    y: Vector4 = field(default_factory=Vector4)
    z: Vector4 = field(default_factory=Vector4)
    w: Vector4 = field(default_factory=Vector4)

    IDENTITY = _Constant(lambda cls: cls(Vector4.X, Vector4.Y, Vector4.Z, Vector4.W))
    ONE = _Constant(lambda cls: cls(Vector4.ONE, Vector4.ONE, Vector4.ONE, Vector4.ONE))
    EPSILON = _Constant(
        lambda cls: cls(Vector4.EPSILON, Vector4.EPSILON, Vector4.EPSILON, Vector4.EPSILON)
    )

    def __post_init__(self) -> None:
        self.x = Vector4.from_any(self.x)
        self.y = Vector4.from_any(self.y)
        self.z = Vector4.from_any(self.z)
        self.w = Vector4.from_any(self.w)

    @classmethod
    def from_values(cls, *args: Number) -> "Matrix4":
        """Build from sixteen values given row by row."""
        _check_count("Matrix4", args, 16)
        return cls(args[0:4], args[4:8], args[8:12], args[12:16])

    @classmethod
    def from_rows(
        cls,
        x: Iterable[Number],
        y: Iterable[Number],
        z: Iterable[Number],
        w: Iterable[Number],
    ) -> "Matrix4":
        return cls(x, y, z, w)

    def __iter__(self) -> Iterator[Vector4]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def c0(self) -> Vector4:
        return Vector4(self.x.x, self.y.x, self.z.x, self.w.x)

    def c1(self) -> Vector4:
        return Vector4(self.x.y, self.y.y, self.z.y, self.w.y)

    def c2(self) -> Vector4:
        return Vector4(self.x.z, self.y.z, self.z.z, self.w.z)

    def c3(self) -> Vector4:
        return Vector4(self.x.w, self.y.w, self.z.w, self.w.w)

    @classmethod
    def perspective_matrix(
        cls, fovy: float, aspect: float, znear: float, zfar: float
    ) -> "Matrix4":
        """OpenGL style perspective projection."""
        f = _div(1.0, math.tan(fovy / 2.0))
        return cls.from_values(
            _div(f, aspect), 0.0, 0.0, 0.0,
            0.0, f, 0.0, 0.0,
            0.0, 0.0, _div(znear + zfar, znear - zfar), -1.0,
            0.0, 0.0, _div(2.0 * zfar * znear, znear - zfar), 0.0,
        )

    def transpose(self) -> None:
        """Transpose this matrix in place."""
        self.x, self.y, self.z, self.w = self.transposed()

    def transposed(self) -> "Matrix4":
        return Matrix4(self.c0(), self.c1(), self.c2(), self.c3())

    def truncate(self) -> Matrix3:
        return Matrix3(self.x.truncate(), self.y.truncate(), self.z.truncate())

    def determinant(self) -> float:
        lower = (self.y, self.z, self.w)
        return sum(
            sign * coefficient
            * Matrix3.from_rows(*(row.truncate_n(n) for row in lower)).determinant()
            for n, (sign, coefficient) in enumerate(zip((1.0, -1.0, 1.0, -1.0), self.x))
        )

    def inverted(self) -> "Matrix4":
        """The inverse, or an unchanged copy when the matrix is singular."""
        det = self.determinant()
        if det == 0.0:
            return Matrix4(self.x, self.y, self.z, self.w)
        inv_det = 1.0 / det
        columns = tuple(self.transposed())

        def cofactor(i: int, j: int) -> float:
            kept = [col.truncate_n(j) for k, col in enumerate(columns) if k != i]
            sign = -1.0 if (i + j) % 2 else 1.0
            return Matrix3.from_columns(*kept).determinant() * sign * inv_det

        return Matrix4.from_values(*(cofactor(i, j) for i in range(4) for j in range(4)))

    def to_lists(self) -> list[list[float]]:
        return [list(row) for row in self]

    def __matmul__(self, other: object) -> Union["Matrix4", Vector4]:
        if isinstance(other, Matrix4):
            columns = (other.c0(), other.c1(), other.c2(), other.c3())
            return Matrix4(*([row.dot(col) for col in columns] for row in self))
        if isinstance(other, Vector4):
            return Vector4(*(row.dot(other) for row in self))
        return NotImplemented

    def __add__(self, other: object) -> "Matrix4":
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: object) -> "Matrix4":
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other: object) -> "Matrix4":
        if not _is_scalar(other):
            return NotImplemented
        return Matrix4(*(row * other for row in self))

    def __rmul__(self, other: object) -> "Matrix4":
        return self.__mul__(other)

    def __str__(self) -> str:
        return f"[\n   {self.x},\n   {self.y},\n   {self.z},\n   {self.w}\n]"


def direction_to_euler_angles(start_dir: Iterable[Number]) -> Vector3:
    """Euler angles for a direction, where zero angles correspond to +Y."""
    direction = Vector3.from_any(start_dir)
    direction.normalise()
    if direction == -Vector3.Y:
        return Vector3(math.pi, 0.0, 0.0)
    if direction == Vector3.Y:
        return Vector3.ZERO
    c = direction.cross(Vector3.Y)
    cross_mat = Matrix3.from_values(
        0.0, -c.z, c.y,
        c.z, 0.0, -c.x,
        -c.y, c.x, 0.0,
    )
    angle_cos = direction.dot(Vector3.Y)
    rot = Matrix3.IDENTITY + cross_mat + (cross_mat @ cross_mat) * _div(1.0, 1.0 + angle_cos)
    return Matrix3.euler_angles_from(rot)


def euler_angles_to_direction(rot: Iterable[Number]) -> Vector3:
    """Direction for given Euler angles, where zero angles correspond to +Y."""
    return Matrix3.from_euler_angles(rot) @ Vector3.Y