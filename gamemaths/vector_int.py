"""Three component vector with 32-bit integer components."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, Union

from .vectors import Vector3

I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1


def _floor_to_i32(value: float) -> int:
    """Floor a float into the signed 32-bit range, saturating; NaN becomes zero."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return I32_MAX if value > 0 else I32_MIN
    return max(I32_MIN, min(I32_MAX, math.floor(value)))


@dataclass(frozen=True, order=True, slots=True)
class Vector3Int:
    """An immutable, hashable vector of three signed 32-bit integers."""

    x: int = 0
    y: int = 0
    z: int = 0

    X: ClassVar["Vector3Int"]
    Y: ClassVar["Vector3Int"]
    Z: ClassVar["Vector3Int"]
    ZERO: ClassVar["Vector3Int"]
    ONE: ClassVar["Vector3Int"]

    def __post_init__(self) -> None:
        for component in (self.x, self.y, self.z):
            if isinstance(component, bool) or not isinstance(component, int):
                raise TypeError(f"integer component expected, got {component!r}")
            if not I32_MIN <= component <= I32_MAX:
                raise OverflowError(f"component {component} outside the 32-bit range")

    @classmethod
    def from_any(
        cls, value: Union["Vector3Int", Vector3, Iterable[int]]
    ) -> "Vector3Int":
        """Build from an integer vector, a float vector (floored) or three integers."""
        if isinstance(value, Vector3Int):
            return cls(value.x, value.y, value.z)
        if isinstance(value, Vector3):
            return cls(*(_floor_to_i32(component) for component in value))
        items = list(value)
        if len(items) != 3:
            raise ValueError(f"expected 3 components, got {len(items)}")
        return cls(*items)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def to_list(self) -> list[int]:
        return [self.x, self.y, self.z]

    def __add__(self, other: object) -> "Vector3Int":
        if not isinstance(other, Vector3Int):
            return NotImplemented
        return Vector3Int(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> "Vector3Int":
        if not isinstance(other, Vector3Int):
            return NotImplemented
        return Vector3Int(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> "Vector3Int":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Vector3Int(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: object) -> "Vector3Int":
        return self.__mul__(other)


Vector3Int.X = Vector3Int(1, 0, 0)
Vector3Int.Y = Vector3Int(0, 1, 0)
Vector3Int.Z = Vector3Int(0, 0, 1)
Vector3Int.ZERO = Vector3Int(0, 0, 0)
Vector3Int.ONE = Vector3Int(1, 1, 1)