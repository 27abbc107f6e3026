import math

import pytest

from gamemaths.aabb import AABoundingBox
from gamemaths.bounding_sphere import BoundingSphere
from gamemaths.vectors import Vector3

POINTS = [Vector3(0.0, 0.0, 0.0), Vector3(0.0, 2.5, 0.0), Vector3(5.0, 1.5, 1.5)]


def _spheres():
    return [
        BoundingSphere(Vector3(0.0, 0.0, 0.0), 5.0),
        BoundingSphere(Vector3(0.0, 25.0, 0.0), 7.0),
        BoundingSphere(Vector3(5.0, 15.0, 15.0), 2.0),
    ]


def test_zero_points():
    assert AABoundingBox.from_points([]) == AABoundingBox.zero()


def test_zero_spheres():
    assert AABoundingBox.from_spheres([]) == AABoundingBox.zero()


def test_defined_bounds_points():
    bounds = AABoundingBox(Vector3.ZERO, Vector3(5.0, 2.5, 1.5))
    assert bounds.contains_points(POINTS) is True


def test_calculated_bounds_points():
    bounds = AABoundingBox.from_points(POINTS)
    assert bounds.contains_points(POINTS) is True
    assert bounds == AABoundingBox(Vector3.ZERO, Vector3(5.0, 2.5, 1.5))


def test_point_outside():
    bounds = AABoundingBox(Vector3.ZERO, Vector3.ONE)
    assert bounds.contains_point([0.5, 1.5, 0.5]) is False
    assert bounds.contains_points(POINTS) is False


def test_defined_bounds_spheres():
    bounds = AABoundingBox(Vector3(-7.0, -5.0, -7.0), Vector3(7.0, 32.0, 17.0))
    assert bounds.contains_spheres(_spheres()) is True


def test_calculated_bounds_spheres():
    bounds = AABoundingBox.from_spheres(_spheres())
    assert bounds.contains_spheres(_spheres()) is True
    assert bounds == AABoundingBox(Vector3(-7.0, -5.0, -7.0), Vector3(7.0, 32.0, 17.0))


def test_sphere_poking_out():
    bounds = AABoundingBox(Vector3.ZERO, Vector3.ONE * 5.0)
    assert bounds.contains_sphere(BoundingSphere(Vector3(1, 1, 1), 2.0)) is False


def test_intersection():
    one = AABoundingBox(Vector3.ZERO, Vector3.ONE * 5.0)
    two = AABoundingBox(Vector3.ONE * 2.5, Vector3.ONE * 5.0)
    assert one.is_intersecting_box(two) is True


def test_non_intersection():
    one = AABoundingBox(Vector3.ZERO, Vector3.ONE * 2.0)
    two = AABoundingBox(Vector3.ONE * 2.5, Vector3.ONE * 5.0)
    assert one.is_intersecting_box(two) is False


def test_ray_perpendicular():
    bounds = AABoundingBox(Vector3.ZERO, Vector3.ONE * 5.0)
    hit = bounds.check_ray([10, 2, 0], -Vector3.X, 25.0)
    assert hit.hit_position == Vector3(5, 2, 0)
    assert hit.hit_distance == 5.0
    assert hit.hit_normal == -Vector3.X


def test_ray_contained():
    bounds = AABoundingBox(Vector3.ZERO, Vector3.ONE * 5.0)
    hit = bounds.check_ray([3, 2, 0], -Vector3.X, 25.0)
    assert hit.hit_position == Vector3(3, 2, 0)
    assert hit.hit_distance == 0.0


def test_ray_angled():
    bounds = AABoundingBox(Vector3.ZERO, Vector3.ONE * 5.0)
    hit = bounds.check_ray([8, 2, 0], [-1, 0, 1], 25.0)
    assert list(hit.hit_position) == pytest.approx([5.0, 2.0, 3.0])
    assert hit.hit_distance == pytest.approx(3.0 * math.sqrt(2.0))


def test_ray_zero_height():
    bounds = AABoundingBox([-10, 0, -10], [10, 0, 10])
    hit = bounds.check_ray([0, 10, 0], [0, -1, 0], 25.0)
    assert hit.hit_position == Vector3(0, 0, 0)
    assert hit.hit_distance == 10.0


def test_ray_beyond_max_distance():
    bounds = AABoundingBox(Vector3.ZERO, Vector3.ONE * 5.0)
    assert bounds.check_ray([10, 2, 0], -Vector3.X, 4.0) is None


def test_ray_miss():
    bounds = AABoundingBox(Vector3.ZERO, Vector3.ONE * 5.0)
    assert bounds.check_ray([10, 2, 0], [0, 1, 0], 25.0) is None