"""Simplex noise in two and three dimensions, and noise blending."""

from __future__ import annotations

import math
from typing import Callable, Optional

from .interpolation import interp_by_fn, lerp
from .vector_int import _floor_to_i32
from .vectors import Vector3

Noise2D = Callable[[float, float], float]
Noise3D = Callable[[float, float, float], float]
Shaper = Callable[[float], float]

_GRADIENTS = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)

_PERMUTATION = (
    151, 160, 137, 91, 90, 15,
    131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23,
    190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33,
    88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166,
    77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244,
    102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169, 200, 196,
    135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226, 250, 124, 123,
    5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42,
    223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228,
    251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107,
    49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)
_PERM = _PERMUTATION * 2


def grad3(index: int) -> Vector3:
    """Gradient vector for a hashed index; negative remainders are rejected."""
    remainder = int(math.fmod(index, 12))
    if remainder < 0:
        raise ValueError(f"no gradient for index {index}")
    return Vector3(*_GRADIENTS[remainder])


def _skew(dimension: int) -> float:
    return (math.sqrt(dimension + 1.0) - 1.0) / dimension


def _unskew(dimension: int) -> float:
    return (1.0 - 1.0 / math.sqrt(dimension + 1.0)) / dimension


def _hash(value: int) -> int:
    if not 0 <= value < len(_PERM):
        raise IndexError(f"hash index {value} out of range")
    return _PERM[value]


def _corner(t: float, gradient_dot: Callable[[], float]) -> float:
    if t < 0.0:
        return 0.0
    t *= t
    return t * t * gradient_dot()


def simplex2d(x: float, y: float) -> float:
    """Two dimensional simplex noise, roughly in the range -1..1."""
    skew = _skew(2)
    unskew = _unskew(2)

    s = (x + y) * skew
    i = _floor_to_i32(x + s)
    j = _floor_to_i32(y + s)

    t = (i + j) * unskew
    x0 = x - (i - t)
    y0 = y - (j - t)

    i1, j1 = (1, 0) if x0 > y0 else (0, 1)

    x1 = x0 - i1 + unskew
    y1 = y0 - j1 + unskew
    x2 = x0 - 1.0 + 2.0 * unskew
    y2 = y0 - 1.0 + 2.0 * unskew

    ii = i & 255
    jj = j & 255
    gi0 = _hash(ii + _hash(jj))
    gi1 = _hash(ii + i1 + _hash(jj + j1))
    gi2 = _hash(ii + 1 + _hash(jj + 1))

    n0 = _corner(0.5 - x0 * x0 - y0 * y0, lambda: grad3(gi0).xy().dot((x0, y0)))
    n1 = _corner(0.5 - x1 * x1 - y1 * y1, lambda: grad3(gi1).xy().dot((x1, y1)))
    n2 = _corner(0.5 - x2 * x2 - y2 * y2, lambda: grad3(gi2).xy().dot((x2, y2)))

    return 45.23065 * (n0 + n1 + n2)


def _tetrahedron(x0: float, y0: float, z0: float) -> tuple[int, int, int, int, int, int]:
    if x0 >= y0:
        if y0 >= z0:
            return 1, 0, 0, 1, 1, 0
        if x0 >= z0:
            return 1, 0, 0, 1, 0, 1
        return 0, 0, 1, 1, 0, 1
    if y0 < z0:
        return 0, 0, 1, 0, 1, 1
    if x0 < z0:
        return 0, 1, 0, 0, 1, 1
    return 0, 1, 0, 1, 1, 0


def simplex3d(x: float, y: float, z: float) -> float:
    """Three dimensional simplex noise, roughly in the range -1..1."""
    skew = _skew(3)
    unskew = _unskew(3)

    s = (x + y + z) * skew
    i = _floor_to_i32(x + s)
    j = _floor_to_i32(y + s)
    k = _floor_to_i32(z + s)

    t = (i + j + k) * unskew
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    i1, j1, k1, i2, j2, k2 = _tetrahedron(x0, y0, z0)

    x1 = x0 - i1 + unskew
    y1 = y0 - j1 + unskew
    z1 = z0 - k1 + unskew
    x2 = x0 - i2 + 2.0 * unskew
    y2 = y0 - j2 + 2.0 * unskew
    z2 = z0 - k2 + 2.0 * unskew
    x3 = x0 - 1.0 + 3.0 * unskew
    y3 = y0 - 1.0 + 3.0 * unskew
    z3 = z0 - 1.0 + 3.0 * unskew

    ii = i & 255
    jj = j & 255
    kk = k & 255
    gi0 = _hash(ii + _hash(jj + _hash(kk)))
    gi1 = _hash(ii + i1 + _hash(jj + j1 + _hash(kk + k1)))
    gi2 = _hash(ii + i2 + _hash(jj + j2 + _hash(kk + k2)))
    gi3 = _hash(ii + 1 + _hash(jj + 1 + _hash(kk + 1)))

    n0 = _corner(0.5 - x0 * x0 - y0 * y0 - z0 * z0, lambda: grad3(gi0).dot((x0, y0, z0)))
    n1 = _corner(0.5 - x1 * x1 - y1 * y1 - z1 * z1, lambda: grad3(gi1).dot((x1, y1, z1)))
    n2 = _corner(0.5 - x2 * x2 - y2 * y2 - z2 * z2, lambda: grad3(gi2).dot((x2, y2, z2)))
    n3 = _corner(0.5 - x3 * x3 - y3 * y3 - z3 * z3, lambda: grad3(gi3).dot((x3, y3, z3)))

    return 32.0 * (n0 + n1 + n2 + n3)


def selector_noise_2d(
    x: float,
    y: float,
    low_noise: Noise2D,
    high_noise: Noise2D,
    selector_noise: Noise2D,
    interp_fn: Optional[Shaper] = None,
) -> float:
    """Blend two noise functions, using a third as the blend position."""
    low, high, select = low_noise(x, y), high_noise(x, y), selector_noise(x, y)
    if interp_fn is not None:
        return interp_by_fn(low, high, select, interp_fn)
    return lerp(low, high, select)


def selector_noise_3d(
    x: float,
    y: float,
    z: float,
    low_noise: Noise3D,
    high_noise: Noise3D,
    selector_noise: Noise3D,
    interp_fn: Optional[Shaper] = None,
) -> float:
    """Blend two 3D noise functions, using a third as the blend position."""
    low, high, select = low_noise(x, y, z), high_noise(x, y, z), selector_noise(x, y, z)
    if interp_fn is not None:
        return interp_by_fn(low, high, select, interp_fn)
    return lerp(low, high, select)