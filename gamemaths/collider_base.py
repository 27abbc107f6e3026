"""Common interface for ray colliders and the hit record they return."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .vectors import Vector3

VectorLike = Union[Vector3, Iterable[float]]


@dataclass
class RayHitInfo:
    """Where a ray struck a collider, how far it travelled and the surface normal."""

    hit_position: Vector3
    hit_distance: float
    hit_normal: Vector3


class Collider(ABC):
    """Something a ray can be tested against."""

    @abstractmethod
    def check_ray(
        self,
        root_position: VectorLike,
        direction: VectorLike,
        max_distance: Optional[float] = None,
    ) -> Optional[RayHitInfo]:
        """Return the first hit of the ray, or ``None`` when it misses."""


def _prepare_ray(root_position: VectorLike, direction: VectorLike) -> tuple[Vector3, Vector3]:
    """Convert ray inputs to vectors, with the direction normalised."""
    return Vector3.from_any(root_position), Vector3.from_any(direction).normalised()