"""Single triangle collider using the Möller-Trumbore intersection test."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .collider_base import Collider, RayHitInfo, VectorLike, _prepare_ray
from .matrices import Matrix3
from .vectors import Vector3, _div


def _incentre(a: Vector3, b: Vector3, c: Vector3) -> Vector3:
    """Centre of the circle inscribed in the triangle ``abc``."""
    p = (b - c).magnitude()
    q = (c - a).magnitude()
    r = (a - b).magnitude()
    total = p + q + r
    return a * _div(p, total) + b * _div(q, total) + c * _div(r, total)


@dataclass(init=False)
class TriangleCollider(Collider):
    """A triangle given by three corner points."""

    normal: Vector3
    points: Matrix3
    edge_one: Vector3
    edge_two: Vector3
    centre: Vector3

    def __init__(self, a: VectorLike, b: VectorLike, c: VectorLike) -> None:
        a, b, c = Vector3.from_any(a), Vector3.from_any(b), Vector3.from_any(c)
        self.edge_one = b - a
        self.edge_two = c - a
        self.normal = self.edge_one.cross(self.edge_two).normalised()
        self.points = Matrix3.from_columns(a, b, c)
        self.centre = _incentre(a, b, c)

    def centre_dist_to(self, target: VectorLike) -> float:
        """Distance from the triangle's incentre to ``target``."""
        return (self.centre - Vector3.from_any(target)).magnitude()

    def check_ray(
        self,
        root_position: VectorLike,
        direction: VectorLike,
        max_distance: Optional[float] = None,
    ) -> Optional[RayHitInfo]:
        """Möller-Trumbore test; a ray parallel to the triangle never hits."""
        root, direction = _prepare_ray(root_position, direction)

        h = direction.cross(self.edge_two)
        a = h.dot(self.edge_one)
        if a == 0.0:
            return None

        f = 1.0 / a
        s = root - self.points.c0()
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(self.edge_one)
        v = f * direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * self.edge_two.dot(q)
        if (max_distance is not None and t > max_distance) or t < 0.0:
            return None

        return RayHitInfo(root + direction * t, t, Vector3(self.normal.x, self.normal.y, self.normal.z))