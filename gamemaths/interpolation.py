"""Linear, bilinear and trilinear interpolation over numbers or vectors."""

from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Any, Callable, Sequence

from .vectors import _div

Shaper = Callable[[float], float]


def _clamp01(value: float) -> float:
    if math.isnan(value):
        return value
    return max(0.0, min(1.0, value))


def _values(values: Sequence[Any], count: int) -> tuple:
    items = tuple(values)
    if len(items) != count:
        raise ValueError(f"expected {count} values, got {len(items)}")
    return items


def lerp(low: Any, high: Any, position: float) -> Any:
    """Linear interpolation between ``low`` and ``high``; position is clamped to 0..1."""
    pos = _clamp01(position)
    return low * (1.0 - pos) + high * pos


def interp_by_fn(low: Any, high: Any, position: float, func: Shaper) -> Any:
    """Like :func:`lerp`, but the position is passed through ``func`` first."""
    return lerp(low, high, func(position))


def inverse_lerp(low: float, high: float, value: float) -> float:
    """Position in 0..1 at which :func:`lerp` would give ``value``."""
    return _clamp01(_div(value - low, high - low))


def bilerp(values: Sequence[Any], position: tuple[float, float]) -> Any:
    """Bilinear interpolation.

    Values are ordered (x, y), (x + 1, y), (x, y + 1), (x + 1, y + 1);
    both position components are clamped to 0..1.
    """
    v = _values(values, 4)
    px, py = position
    x, y = _clamp01(px), _clamp01(py)
    terms = (
        v[0] * (1.0 - x) * (1.0 - y),
        v[1] * x * (1.0 - y),
        v[2] * (1.0 - x) * y,
        v[3] * x * y,
    )
    return reduce(operator.add, terms)


def bi_interp_by_fn(values: Sequence[Any], position: tuple[float, float], func: Shaper) -> Any:
    """Like :func:`bilerp`, with both clamped position components shaped by ``func``."""
    px, py = position
    return bilerp(values, (func(_clamp01(px)), func(_clamp01(py))))


def bi_interp_by_double_fn(
    values: Sequence[Any],
    position: tuple[float, float],
    x_func: Shaper,
    y_func: Shaper,
) -> Any:
    """Like :func:`bilerp`, shaping x by ``x_func`` and y by ``y_func``."""
    px, py = position
    return bilerp(values, (x_func(_clamp01(px)), y_func(_clamp01(py))))


def trilerp(values: Sequence[Any], position: tuple[float, float, float]) -> Any:
    """Trilinear interpolation.

    Values are ordered (x, y, z), (x+1, y, z), (x, y, z+1), (x+1, y, z+1),
    (x, y+1, z), (x+1, y+1, z), (x, y+1, z+1), (x+1, y+1, z+1);
    all position components are clamped to 0..1.
    """
    v = _values(values, 8)
    px, py, pz = position
    x, y, z = _clamp01(px), _clamp01(py), _clamp01(pz)
    terms = (
        v[0] * (1.0 - x) * (1.0 - y) * (1.0 - z),
        v[1] * x * (1.0 - y) * (1.0 - z),
        v[2] * (1.0 - x) * (1.0 - y) * z,
        v[3] * x * (1.0 - y) * z,
        v[4] * (1.0 - x) * y * (1.0 - z),
        v[5] * x * y * (1.0 - z),
        v[6] * (1.0 - x) * y * z,
        v[7] * x * y * z,
    )
    return reduce(operator.add, terms)


def tri_interp_by_fn(
    values: Sequence[Any], position: tuple[float, float, float], func: Shaper
) -> Any:
    """Like :func:`trilerp`, with every raw position component shaped by ``func``."""
    px, py, pz = position
    return trilerp(values, (func(px), func(py), func(pz)))


def tri_interp_by_triple_fn(
    values: Sequence[Any],
    position: tuple[float, float, float],
    x_func: Shaper,
    y_func: Shaper,
    z_func: Shaper,
) -> Any:
    """Like :func:`trilerp`, shaping each raw position component by its own function."""
    px, py, pz = position
    return trilerp(values, (x_func(px), y_func(py), z_func(pz)))