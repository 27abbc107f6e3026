"""Axis aligned plane collider lying flat in the x-z plane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .collider_base import Collider, RayHitInfo, VectorLike, _prepare_ray
from .vectors import Vector2, Vector3

SizeLike = Union[Vector2, Iterable[float]]


@dataclass(init=False)
class PlaneCollider(Collider):
    """A horizontal rectangle starting at ``position`` with an x and z extent."""

    position: Vector3
    x_length: float
    z_length: float
    centre: Vector3

    def __init__(self, position: VectorLike, size: SizeLike) -> None:
        size = Vector2.from_any(size)
        self.position = Vector3.from_any(position)
        self.x_length = float(size.x)
        self.z_length = float(size.y)
        self.centre = self.position + Vector3(size.x / 2.0, 0.0, size.y / 2.0)

    def check_ray(
        self,
        root_position: VectorLike,
        direction: VectorLike,
        max_distance: Optional[float] = None,
    ) -> Optional[RayHitInfo]:
        """A ray starting in the plane hits at distance zero."""
        root, direction = _prepare_ray(root_position, direction)
        up = Vector3(0.0, 1.0, 0.0)

        height = (self.centre - root).dot(up)
        if root == self.position or height == 0.0:
            return RayHitInfo(root, 0.0, up)

        climb = direction.dot(up)
        if climb == 0.0:
            return None

        distance = height / climb
        if max_distance is not None and distance > max_distance:
            return None

        point = root + direction * distance
        if point.x - self.position.x > self.x_length or point.z - self.position.z > self.z_length:
            return None

        return RayHitInfo(point, distance, up)