"""Arbitrarily sized matrices of floats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from .vectors import _is_scalar

Number = Union[int, float]


class MatrixIndexError(IndexError):
    """A row, column or element index lies outside the matrix."""


class MatrixArithmeticError(ValueError):
    """The matrices' shapes do not allow the requested operation."""


@dataclass
class MatrixNM:
    """A ``height`` x ``width`` matrix stored as a list of rows."""

    matrix: list[list[float]]
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("matrix dimensions must not be negative")
        rows = [[float(v) for v in row] for row in self.matrix]
        if len(rows) != self.height or any(len(row) != self.width for row in rows):
            raise ValueError(
                f"rows do not match a {self.height}x{self.width} matrix"
            )
        self.matrix = rows

    @classmethod
    def empty(cls, width: int, height: int) -> "MatrixNM":
        """A matrix of the given size filled with zeros."""
        return cls([[0.0] * width for _ in range(height)], width, height)

    @classmethod
    def from_items(cls, width: int, height: int, items: Iterable[Number]) -> "MatrixNM":
        """Fill a matrix row by row from ``items``; missing items are zero."""
        values = [float(v) for v in items]
        size = width * height
        if len(values) > size:
            raise ValueError(
                f"{len(values)} items do not fit a {height}x{width} matrix"
            )
        values.extend([0.0] * (size - len(values)))
        rows = [values[r * width:(r + 1) * width] for r in range(height)]
        return cls(rows, width, height)

    def row(self, index: int) -> list[float]:
        if not 0 <= index < self.height:
            raise MatrixIndexError(f"row {index} out of range")
        return list(self.matrix[index])

    def column(self, index: int) -> list[float]:
        if not 0 <= index < self.width:
            raise MatrixIndexError(f"column {index} out of range")
        return [row[index] for row in self.matrix]

    def element(self, x: int, y: int) -> float:
        """The element in column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MatrixIndexError(f"element ({x}, {y}) out of range")
        return self.matrix[y][x]

    def _same_shape(self, other: "MatrixNM") -> None:
        if self.width != other.width or self.height != other.height:
            raise MatrixArithmeticError("matrices differ in shape")

    def __add__(self, other: object) -> "MatrixNM":
        if not isinstance(other, MatrixNM):
            return NotImplemented
        self._same_shape(other)
        rows = [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self.matrix, other.matrix)]
        return MatrixNM(rows, self.width, self.height)

    def __sub__(self, other: object) -> "MatrixNM":
        if not isinstance(other, MatrixNM):
            return NotImplemented
        self._same_shape(other)
        rows = [[a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self.matrix, other.matrix)]
        return MatrixNM(rows, self.width, self.height)

    def __matmul__(self, other: object) -> "MatrixNM":
        if not isinstance(other, MatrixNM):
            return NotImplemented
        if self.width != other.height:
            raise MatrixArithmeticError(
                "left width must equal right height for multiplication"
            )
        columns = [other.column(x) for x in range(other.width)]
        items = [
            sum(a * b for a, b in zip(row, col))
            for row in self.matrix
            for col in columns
        ]
        return MatrixNM.from_items(other.width, self.height, items)

    def __mul__(self, other: object) -> "MatrixNM":
        if not _is_scalar(other):
            return NotImplemented
        rows = [[v * other for v in row] for row in self.matrix]
        return MatrixNM(rows, self.width, self.height)

    def __rmul__(self, other: object) -> "MatrixNM":
        return self.__mul__(other)