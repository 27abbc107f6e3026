"""A free-flying camera driven by mapped controls."""

from __future__ import annotations

from enum import Enum, auto
from typing import Generic, Hashable, Iterable, Mapping, Optional, TypeVar

from .matrices import Matrix3, Matrix4
from .vectors import Vector3

T = TypeVar("T", bound=Hashable)


class CameraDirections(Enum):
    """The movements a control can be bound to."""

    FORWARD = auto()
    BACKWARDS = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SPIN_RIGHT = auto()
    SPIN_LEFT = auto()
    SPIN_FORWARD = auto()
    SPIN_BACKWARD = auto()


def _copy(vector: Vector3) -> Vector3:
    return Vector3(vector.x, vector.y, vector.z)


class Camera(Generic[T]):
    """Position and orientation of a viewer, moved by held controls."""

    def __init__(
        self,
        start_pos: Optional[Iterable[float]] = None,
        start_dir: Optional[Iterable[float]] = None,
        move_speed: Optional[float] = None,
        rotate_speed: Optional[float] = None,
        movement_map: Optional[Mapping[T, CameraDirections]] = None,
    ) -> None:
        self.position = Vector3.from_any(start_pos) if start_pos is not None else Vector3(0.0, 0.0, 0.0)
        direction = Vector3.from_any(start_dir) if start_dir is not None else None
        if direction is None or list(direction) == [0.0, 0.0, 0.0]:
            direction = Vector3(1.0, 0.0, 0.0)
        self.direction = _copy(direction)
        self.up = Vector3(0.0, -1.0, 0.0)
        self.move_speed = 3.0 if move_speed is None else move_speed
        self.rotate_speed = 1.0 if rotate_speed is None else rotate_speed
        self.movement_map: dict[T, CameraDirections] = dict(movement_map or {})
        self.held: set[CameraDirections] = set()
        self._is_controlled = False

    @property
    def is_controlled(self) -> bool:
        return self._is_controlled

    def controllable(self) -> None:
        self._is_controlled = True

    def toggle_controlled(self) -> None:
        self._is_controlled = not self._is_controlled

    def view_matrix(self) -> Matrix4:
        f = self.direction.normalised()
        s = self.up.cross(f).normalised()
        u = f.cross(s)
        p = self.position
        return Matrix4.from_values(
            s.x, u.x, -f.x, 0.0,
            s.y, u.y, -f.y, 0.0,
            s.z, u.z, -f.z, 0.0,
            -p.dot(s), -p.dot(u), p.dot(f), 1.0,
        )

    def look_at(self, target: Iterable[float]) -> None:
        self.direction = (Vector3.from_any(target) - self.position).normalised()

    def process_input(self, control: T, state: bool) -> None:
        """Press (``state`` true) or release whatever movement ``control`` is bound to."""
        movement = self.movement_map.get(control)
        if movement is None:
            return
        if state:
            self.held.add(movement)
        else:
            self.held.discard(movement)

    def do_move(self, delta_time: float) -> None:
        """Apply the held movements for ``delta_time`` seconds."""
        if not self._is_controlled:
            return

        left = self.direction.cross(self.up)
        forward = left.cross(self.up)
        step = self.move_speed * delta_time
        held = self.held

        if CameraDirections.FORWARD in held:
            self.position = self.position - forward * step
        if CameraDirections.BACKWARDS in held:
            self.position = self.position + forward * step
        if CameraDirections.LEFT in held:
            self.position = self.position + left * step
        if CameraDirections.RIGHT in held:
            self.position = self.position - left * step
        if CameraDirections.UP in held:
            self.position = self.position - self.up * step
        if CameraDirections.DOWN in held:
            self.position = self.position + self.up * step

        angle = self.rotate_speed * delta_time
        self.up = self.up.normalised()
        if CameraDirections.SPIN_LEFT in held:
            self.direction = Matrix3.from_angle_and_axis(angle, _copy(self.up)) @ self.direction
        if CameraDirections.SPIN_RIGHT in held:
            self.direction = Matrix3.from_angle_and_axis(-angle, _copy(self.up)) @ self.direction

        left = left.normalised()
        if CameraDirections.SPIN_FORWARD in held:
            self.direction = Matrix3.from_angle_and_axis(angle, _copy(left)) @ self.direction
        if CameraDirections.SPIN_BACKWARD in held:
            self.direction = Matrix3.from_angle_and_axis(-angle, _copy(left)) @ self.direction