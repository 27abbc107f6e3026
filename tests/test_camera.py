import pytest

from gamemaths.camera import Camera, CameraDirections
from gamemaths.matrices import Matrix3

KEYS = {
    "w": CameraDirections.FORWARD,
    "s": CameraDirections.BACKWARDS,
    "a": CameraDirections.LEFT,
    "d": CameraDirections.RIGHT,
    "q": CameraDirections.SPIN_LEFT,
    "e": CameraDirections.SPIN_RIGHT,
    "r": CameraDirections.SPIN_FORWARD,
    "f": CameraDirections.SPIN_BACKWARD,
}


def _camera():
    cam = Camera(movement_map=KEYS)
    cam.controllable()
    return cam


def test_defaults():
    cam = Camera()
    assert cam.move_speed == 3.0
    assert cam.rotate_speed == 1.0
    assert list(cam.direction) == [1.0, 0.0, 0.0]
    assert list(cam.up) == [0.0, -1.0, 0.0]
    assert list(cam.position) == [0.0, 0.0, 0.0]
    assert cam.is_controlled is False


def test_zero_direction_falls_back_to_x():
    cam = Camera(start_dir=[0, 0, 0])
    assert list(cam.direction) == [1.0, 0.0, 0.0]


def test_toggle_controlled():
    cam = Camera()
    cam.toggle_controlled()
    assert cam.is_controlled is True
    cam.toggle_controlled()
    assert cam.is_controlled is False


def test_uncontrolled_camera_does_not_move():
    cam = Camera(start_pos=[1, 2, 3], movement_map=KEYS)
    cam.process_input("w", True)
    cam.do_move(1.0)
    assert list(cam.position) == [1.0, 2.0, 3.0]


def test_forward_moves_along_direction():
    cam = _camera()
    cam.process_input("w", True)
    cam.do_move(0.5)
    assert list(cam.position) == pytest.approx(list(cam.direction * (cam.move_speed * 0.5)))


def test_forward_then_backward_returns():
    cam = _camera()
    cam.process_input("w", True)
    cam.do_move(0.7)
    cam.process_input("w", False)
    cam.process_input("s", True)
    cam.do_move(0.7)
    assert list(cam.position) == pytest.approx([0.0, 0.0, 0.0], abs=1e-12)


def test_left_and_right_are_opposite():
    cam = _camera()
    cam.process_input("a", True)
    cam.process_input("d", True)
    cam.do_move(1.0)
    assert list(cam.position) == pytest.approx([0.0, 0.0, 0.0], abs=1e-12)


def test_unmapped_control_is_ignored():
    cam = _camera()
    cam.process_input("z", True)
    assert cam.held == set()


def test_release_clears_movement():
    cam = _camera()
    cam.process_input("q", True)
    cam.process_input("q", False)
    assert CameraDirections.SPIN_LEFT not in cam.held


def test_spin_keeps_unit_direction_and_height():
    cam = _camera()
    cam.process_input("q", True)
    cam.do_move(0.3)
    assert cam.direction.magnitude() == pytest.approx(1.0)
    assert cam.direction.y == pytest.approx(0.0, abs=1e-12)
    assert list(cam.position) == pytest.approx([0.0, 0.0, 0.0])


def test_spin_left_then_right_restores_direction():
    cam = _camera()
    cam.process_input("q", True)
    cam.do_move(0.4)
    cam.process_input("q", False)
    cam.process_input("e", True)
    cam.do_move(0.4)
    assert list(cam.direction) == pytest.approx([1.0, 0.0, 0.0], abs=1e-9)


def test_spin_forward_then_backward_restores_direction():
    cam = _camera()
    cam.process_input("r", True)
    cam.do_move(0.25)
    cam.process_input("r", False)
    cam.process_input("f", True)
    cam.do_move(0.25)
    assert list(cam.direction) == pytest.approx([1.0, 0.0, 0.0], abs=1e-9)


def test_look_at_points_towards_target():
    cam = Camera(start_pos=[1, 1, 1])
    cam.look_at([1, 1, 6])
    assert list(cam.direction) == pytest.approx([0.0, 0.0, 1.0])


def test_view_matrix_rotation_is_orthonormal():
    cam = Camera(start_pos=[2, -1, 4], start_dir=[1, 2, 3])
    rotation = cam.view_matrix().truncate()
    product = rotation @ rotation.transposed()
    identity = Matrix3.IDENTITY
    for row, expected in zip(product, identity):
        assert list(row) == pytest.approx(list(expected), abs=1e-9)
    assert abs(rotation.determinant()) == pytest.approx(1.0)


def test_view_matrix_last_row_origin_is_zero():
    cam = Camera(start_dir=[0, 0, 1])
    assert list(cam.view_matrix().w) == pytest.approx([0.0, 0.0, 0.0, 1.0])