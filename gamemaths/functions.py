"""Statistical helpers, a keyed quicksort and a quadratic solver."""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence, TypeVar

from .vectors import _div

T = TypeVar("T")

ROOT_TWO_PI = math.sqrt(2.0 * math.pi)

# Abramowitz and Stegun, equation 7.1.26.
_P = 0.47047
_A1 = 0.3480242
_A2 = -0.0958798
_A3 = 0.7478556


def normal_probability_density(value: float, mean: float, standard_deviation: float) -> float:
    """Density of the normal distribution at ``value``."""
    scale = _div(1.0, standard_deviation * ROOT_TWO_PI)
    exponent = _div(-(value - mean) * (value - mean), 2.0 * standard_deviation * standard_deviation)
    return scale * math.exp(exponent)


def _error_fn_approx(value: float) -> float:
    """Approximation of the error function with a maximum error of about 2.5e-5."""
    t = _div(1.0, 1.0 + _P * value)
    return 1.0 - (_A1 * t + _A2 * t * t + _A3 * t * t * t) * math.exp(-(t * t))


def normal_cdf(value: float, mean: float, standard_deviation: float) -> float:
    """Cumulative normal distribution, accurate to about 2.5e-5."""
    x = _div(value - mean, standard_deviation * math.sqrt(2.0))
    if x == 0.0:
        return 0.5
    if x < 0.0:
        return 0.5 * (1.0 - _error_fn_approx(-x))
    return 0.5 * (1.0 + _error_fn_approx(x))


def quicksort(items: Sequence[tuple[Any, T]]) -> list[tuple[Any, T]]:
    """Sort ``(key, value)`` pairs by key in ascending order, keeping ties in order."""
    items = list(items)
    if len(items) <= 1:
        return items
    pivot = items[len(items) // 2][0]
    less = [item for item in items if item[0] < pivot]
    more = [item for item in items if not item[0] < pivot and item[0] > pivot]
    equal = [item for item in items if not item[0] < pivot and not item[0] > pivot]
    return quicksort(less) + equal + quicksort(more)


def solve_quadratic(a: float, b: float, c: float) -> tuple[Optional[float], Optional[float]]:
    """Real roots of ``a*x**2 + b*x + c = 0``; missing roots are ``None``."""
    det = b * b - 4.0 * a * c
    if det < 0.0:
        return None, None
    if det == 0.0:
        return _div(-b, 2.0 * a), None
    root = math.sqrt(det)
    return _div(-b + root, 2.0 * a), _div(-b - root, 2.0 * a)