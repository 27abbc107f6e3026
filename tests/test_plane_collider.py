import pytest

from gamemaths.plane_collider import PlaneCollider


def test_parallel_ray_misses():
    plane = PlaneCollider([0, 0, 0], [1, 1])
    assert plane.check_ray([0, 1, 0], [1, 0, 0], 25.0) is None


def test_ray_from_position():
    plane = PlaneCollider([0, 0, 0], [1, 1])
    hit = plane.check_ray([0, 0, 0], [1, 0, 0], 25.0)
    assert list(hit.hit_position) == pytest.approx([0.0, 0.0, 0.0])
    assert hit.hit_distance == 0.0


def test_ray_from_inside_plane():
    plane = PlaneCollider([0, 0, 0], [5, 5])
    hit = plane.check_ray([1, 0, 1], [1, 0, 0], 25.0)
    assert list(hit.hit_position) == pytest.approx([1.0, 0.0, 1.0])
    assert hit.hit_distance == 0.0


def test_ray_hit():
    plane = PlaneCollider([0, 0, 0], [5, 5])
    hit = plane.check_ray([0, 5, 0], [0, -1, 0], 25.0)
    assert list(hit.hit_position) == pytest.approx([0.0, 0.0, 0.0])
    assert hit.hit_distance == 5.0
    assert list(hit.hit_normal) == pytest.approx([0.0, 1.0, 0.0])


def test_ray_beyond_max_distance_misses():
    plane = PlaneCollider([0, 0, 0], [5, 5])
    assert plane.check_ray([0, 5, 0], [0, -1, 0], 2.0) is None


def test_ray_past_far_edge_misses():
    plane = PlaneCollider([0, 0, 0], [5, 5])
    assert plane.check_ray([9, 5, 1], [0, -1, 0], None) is None


def test_centre_and_lengths():
    plane = PlaneCollider([1, 2, 3], [4, 6])
    assert plane.x_length == 4.0
    assert plane.z_length == 6.0
    assert list(plane.centre) == pytest.approx([3.0, 2.0, 6.0])