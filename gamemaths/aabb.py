"""Axis aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .bounding_sphere import BoundingSphere
from .collider_base import Collider, RayHitInfo, VectorLike, _prepare_ray
from .vectors import Vector3


def _slab(inv: float, origin: float, low: float, high: float) -> tuple[float, float]:
    """Far and near ray parameters for one axis slab."""
    if inv < 0.0:
        return (low - origin) * inv, (high - origin) * inv
    return (high - origin) * inv, (low - origin) * inv


@dataclass
class AABoundingBox(Collider):
    """A box given by its least and greatest corners."""

    min_corner: Vector3 = field(default_factory=Vector3)
    max_corner: Vector3 = field(default_factory=Vector3)

    def __post_init__(self) -> None:
        self.min_corner = Vector3.from_any(self.min_corner)
        self.max_corner = Vector3.from_any(self.max_corner)

    @classmethod
    def zero(cls) -> "AABoundingBox":
        return cls(Vector3.ZERO, Vector3.ZERO)

    def contains_point(self, point: VectorLike) -> bool:
        p = Vector3.from_any(point)
        return all(
            low <= value <= high
            for low, value, high in zip(self.min_corner, p, self.max_corner)
        )

    def contains_points(self, points: Iterable[VectorLike]) -> bool:
        return all(self.contains_point(p) for p in points)

    def contains_sphere(self, sphere: BoundingSphere) -> bool:
        if not self.contains_point(sphere.centre):
            return False
        return all(
            c - sphere.radius >= low and c + sphere.radius <= high
            for low, c, high in zip(self.min_corner, sphere.centre, self.max_corner)
        )

    def contains_spheres(self, spheres: Iterable[BoundingSphere]) -> bool:
        return all(self.contains_sphere(s) for s in spheres)

    @classmethod
    def from_spheres(cls, spheres: Iterable[BoundingSphere]) -> "AABoundingBox":
        spheres = list(spheres)
        if not spheres:
            return cls.zero()
        lows = [s.centre - Vector3.ONE * s.radius for s in spheres]
        highs = [s.centre + Vector3.ONE * s.radius for s in spheres]
        return cls(
            Vector3(min(v.x for v in lows), min(v.y for v in lows), min(v.z for v in lows)),
            Vector3(max(v.x for v in highs), max(v.y for v in highs), max(v.z for v in highs)),
        )

    @classmethod
    def from_points(cls, points: Iterable[VectorLike]) -> "AABoundingBox":
        points = [Vector3.from_any(p) for p in points]
        if not points:
            return cls.zero()
        return cls(
            Vector3(min(p.x for p in points), min(p.y for p in points), min(p.z for p in points)),
            Vector3(max(p.x for p in points), max(p.y for p in points), max(p.z for p in points)),
        )

    def is_intersecting_box(self, other: "AABoundingBox") -> bool:
        return all(
            s_low <= o_high and s_high >= o_low
            for s_low, s_high, o_low, o_high in zip(
                self.min_corner, self.max_corner, other.min_corner, other.max_corner
            )
        )

    def check_ray(
        self,
        root_position: VectorLike,
        direction: VectorLike,
        max_distance: Optional[float] = None,
    ) -> Optional[RayHitInfo]:
        """Slab intersection test; a ray starting inside hits at distance zero."""
        root, direction = _prepare_ray(root_position, direction)

        if self.contains_point(root):
            return RayHitInfo(root, 0.0, Vector3.ZERO)

        inv = Vector3.ONE / direction
        max_norm, min_norm = Vector3.X, -Vector3.X

        tmax, tmin = _slab(inv.x, root.x, self.min_corner.x, self.max_corner.x)

        for axis, normal in (("y", Vector3.Y), ("z", Vector3.Z)):
            t_far, t_near = _slab(
                getattr(inv, axis),
                getattr(root, axis),
                getattr(self.min_corner, axis),
                getattr(self.max_corner, axis),
            )
            if tmin > t_far or t_near > tmax:
                return None
            if t_near > tmin:
                tmin, min_norm = t_near, -normal
            if t_far < tmax:
                tmax, max_norm = t_far, normal

        if tmin < 0.0:
            dist, out_norm = tmax, max_norm
        elif tmax < 0.0:
            return None
        else:
            dist, out_norm = tmin, min_norm

        if max_distance is not None and dist > max_distance:
            return None
        return RayHitInfo(root + direction * dist, dist, out_norm)