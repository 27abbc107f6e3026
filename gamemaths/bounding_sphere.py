"""Bounding spheres: construction from points, overlap tests and ray casts."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Iterable, Optional

from .collider_base import Collider, RayHitInfo, VectorLike, _prepare_ray
from .functions import solve_quadratic
from .vectors import Vector3, _div

FOUR_THIRDS_PI = (4.0 / 3.0) * math.pi


@dataclass
class BoundingSphere(Collider):
    """A sphere given by its centre and radius."""

    centre: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0

    def __post_init__(self) -> None:
        self.centre = Vector3.from_any(self.centre)
        self.radius = float(self.radius)

    @classmethod
    def zero(cls) -> "BoundingSphere":
        return cls(Vector3.ZERO, 0.0)

    def set_zero(self) -> None:
        self.centre = Vector3.ZERO
        self.radius = 0.0

    def set_to(self, data: "BoundingSphere") -> None:
        self.centre = Vector3.from_any(data.centre)
        self.radius = data.radius

    def max_dist_from_point(self, point: VectorLike) -> float:
        return (self.centre - Vector3.from_any(point)).magnitude() + self.radius

    def furthest_point_from_point(self, point: VectorLike) -> Vector3:
        direction = (self.centre - Vector3.from_any(point)).normalised()
        return direction * self.radius + self.centre

    def contains_points(self, points: Iterable[VectorLike]) -> bool:
        return all(
            (self.centre - Vector3.from_any(p)).magnitude() <= self.radius for p in points
        )

    @classmethod
    def from_points(cls, points: Iterable[VectorLike]) -> "BoundingSphere":
        """The smaller of a Ritter sphere and a box-centred sphere around the points."""
        points = [Vector3.from_any(p) for p in points]
        if not points:
            return cls.zero()

        x_min, x_max = min(points, key=attrgetter("x")), max(points, key=attrgetter("x"))
        y_min, y_max = min(points, key=attrgetter("y")), max(points, key=attrgetter("y"))
        z_min, z_max = min(points, key=attrgetter("z")), max(points, key=attrgetter("z"))

        diameter_one, diameter_two = x_min, x_max
        max_span = (x_max - x_min).sqr_magnitude()
        for low, high in ((y_min, y_max), (z_min, z_max)):
            span = (high - low).sqr_magnitude()
            if span > max_span:
                max_span, diameter_one, diameter_two = span, low, high

        ritter_centre = (diameter_one + diameter_two) * 0.5
        radius_squared = (diameter_two - ritter_centre).sqr_magnitude()
        ritter_radius = math.sqrt(radius_squared)

        min_box = Vector3(x_min.x, y_min.y, z_min.z)
        max_box = Vector3(x_max.x, y_max.y, z_max.z)
        naive_centre = (max_box + min_box) * 0.5

        naive_radius = 0.0
        for point in points:
            naive_radius = max(naive_radius, (point - naive_centre).magnitude())

            to_point_squared = (point - ritter_centre).sqr_magnitude()
            if to_point_squared > radius_squared:
                to_point = math.sqrt(to_point_squared)
                ritter_radius = (ritter_radius + to_point) * 0.5
                radius_squared = ritter_radius * ritter_radius
                old_to_new = to_point - ritter_radius
                ritter_centre = (ritter_centre * ritter_radius + point * old_to_new) / to_point

        if ritter_radius < naive_radius:
            return cls(ritter_centre, ritter_radius)
        return cls(naive_centre, naive_radius)

    def is_intersecting_sphere(self, other: "BoundingSphere") -> bool:
        distance = (self.centre - other.centre).magnitude()
        small, large = sorted((self.radius, other.radius))
        return distance < self.radius + other.radius and distance + small != large

    def intersection_volume(self, other: "BoundingSphere") -> float:
        """Volume shared with ``other``; only meaningful for intersecting spheres."""
        distance = (self.centre - other.centre).magnitude()
        small, large = sorted((self.radius, other.radius))
        if distance + small < large:
            return self.volume() if self.radius < other.radius else other.volume()
        r_sum = self.radius + other.radius
        volume = (
            _div(math.pi, 12.0 * distance)
            * (r_sum - distance) ** 2
            * (distance ** 2 + 2.0 * distance * abs(r_sum) - 3.0 * (self.radius - other.radius) ** 2)
        )
        if math.isnan(volume):
            return 0.0
        if volume < 0.0:
            raise ValueError(
                f"negative intersection volume between {self!r} and {other!r}"
            )
        return volume

    def volume(self) -> float:
        return self.radius ** 3 * FOUR_THIRDS_PI

    def check_ray(
        self,
        root_position: VectorLike,
        direction: VectorLike,
        max_distance: Optional[float] = None,
    ) -> Optional[RayHitInfo]:
        root, direction = _prepare_ray(root_position, direction)

        offset = root - self.centre
        if offset.magnitude() <= self.radius:
            return RayHitInfo(root, 0.0, Vector3.ZERO)

        a = direction.dot(direction)
        b = 2.0 * direction.dot(offset)
        c = offset.dot(offset) - self.radius * self.radius
        first, second = solve_quadratic(a, b, c)
        if first is None:
            return None
        dist = first if second is None else min(first, second)

        if max_distance is not None and dist > max_distance:
            return None
        return RayHitInfo(root + direction * dist, dist, offset.normalised())