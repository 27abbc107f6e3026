"""Triangle mesh collider."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .aabb import AABoundingBox
from .collider_base import Collider, RayHitInfo, VectorLike, _prepare_ray
from .functions import quicksort
from .triangle_collider import TriangleCollider
from .vectors import Vector3


@dataclass(init=False)
class MeshCollider(Collider):
    """A mesh of triangles with a bounding box used to reject rays early."""

    tris: list[TriangleCollider] = field(default_factory=list)
    bounds: AABoundingBox = field(default_factory=AABoundingBox)

    def __init__(self, vertices: Iterable[VectorLike], indices: Sequence[int]) -> None:
        points = [Vector3.from_any(v) for v in vertices]
        indices = list(indices)
        if len(indices) % 3:
            raise ValueError(f"index count {len(indices)} is not a multiple of three")
        corners = iter(indices)
        self.tris = [
            TriangleCollider(points[a], points[b], points[c])
            for a, b, c in zip(corners, corners, corners)
        ]
        self.bounds = AABoundingBox.from_points(points)

    def check_ray(
        self,
        root_position: VectorLike,
        direction: VectorLike,
        max_distance: Optional[float] = None,
    ) -> Optional[RayHitInfo]:
        """Test triangles nearest first; a mesh has no inside, so no containment test."""
        root, direction = _prepare_ray(root_position, direction)

        if self.bounds.check_ray(root, direction, max_distance) is None:
            return None

        ordered = quicksort([(tri.centre_dist_to(root), tri) for tri in self.tris])
        for _, tri in ordered:
            hit = tri.check_ray(root, direction, max_distance)
            if hit is not None:
                return hit
        return None