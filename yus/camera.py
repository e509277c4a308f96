"""Orbit camera and the mouse controls that steer it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from yus.linalg import look_at_rh, perspective_rh_gl

FOV_Y = math.radians(45.0)
Z_NEAR = 0.1
Z_FAR = 100.0

ROTATE_SPEED = 0.005
ZOOM_SPEED = 0.01
MIN_DISTANCE = 1.0
MAX_DISTANCE = 50.0
MAX_PITCH = math.pi / 2 - 0.01
LEFT_BUTTON = 0


def _vector(*values: float) -> np.ndarray:
    return np.array(values, dtype=np.float64)


@dataclass(eq=False)
class Camera:
    """A camera orbiting ``target`` at ``distance``, steered by yaw and pitch (radians)."""

    eye: np.ndarray = field(default_factory=lambda: _vector(0.0, 0.0, 5.0))
    target: np.ndarray = field(default_factory=lambda: _vector(0.0, 0.0, 0.0))
    up: np.ndarray = field(default_factory=lambda: _vector(0.0, 1.0, 0.0))
    distance: float = 5.0
    yaw: float = 0.0
    pitch: float = 0.0

    def orbit_eye(self) -> np.ndarray:
        """Eye position implied by yaw, pitch and distance."""
        offset = self.distance * np.array(
            [
                math.cos(self.yaw) * math.cos(self.pitch),
                math.sin(self.pitch),
                math.sin(self.yaw) * math.cos(self.pitch),
            ]
        )
        return offset + np.asarray(self.target, dtype=np.float64)

    def update_eye(self) -> np.ndarray:
        """Move the eye to its orbit position and return it."""
        self.eye = self.orbit_eye()
        return self.eye

    def view_proj(self, aspect: float) -> np.ndarray:
        """Projection times view for the current orbit position."""
        self.update_eye()
        proj = perspective_rh_gl(FOV_Y, aspect, Z_NEAR, Z_FAR)
        view = look_at_rh(self.eye, self.target, self.up)
        return proj @ view


class OrbitController:
    """Turns canvas mouse events into camera rotation and zoom."""

    def __init__(self, camera: Camera, width: float, height: float) -> None:
        self.camera = camera
        self.width = float(width)
        self.height = float(height)
        self.dragging = False
        self.last_mouse_pos: tuple[float, float] = (0.0, 0.0)

    def _relative(self, client_x: float, client_y: float) -> tuple[float, float]:
        return (float(client_x) - self.width, float(client_y) - self.height)

    def mouse_down(self, button: int, client_x: float, client_y: float) -> bool:
        """Start dragging on the left button; returns whether the event was taken."""
        if button != LEFT_BUTTON:
            return False
        self.dragging = True
        self.last_mouse_pos = self._relative(client_x, client_y)
        return True

    def mouse_move(self, client_x: float, client_y: float) -> None:
        """Rotate the camera by the movement since the last event while dragging."""
        if not self.dragging:
            return
        mx, my = self._relative(client_x, client_y)
        lx, ly = self.last_mouse_pos
        self.last_mouse_pos = (mx, my)

        cam = self.camera
        cam.yaw += (mx - lx) * ROTATE_SPEED
        cam.pitch = min(max(cam.pitch + (my - ly) * ROTATE_SPEED, -MAX_PITCH), MAX_PITCH)

    def mouse_up(self) -> None:
        """Stop dragging (also used when the pointer leaves the canvas)."""
        self.dragging = False

    def wheel(self, delta_y: float) -> None:
        """Zoom in or out, keeping the distance within its limits."""
        cam = self.camera
        cam.distance = min(max(cam.distance + delta_y * ZOOM_SPEED, MIN_DISTANCE), MAX_DISTANCE)