"""Keyboard and mouse state that drives the player's camera."""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satisfactorio.camera import Camera
    from satisfactorio.player import Player

MAX_PITCH = math.pi / 2 - 0.01


class KeyCode(str, Enum):
    """Physical keys the controller reacts to, named by their physical position."""

    KEY_W = "KeyW"
    KEY_Z = "KeyZ"
    KEY_S = "KeyS"
    KEY_A = "KeyA"
    KEY_Q = "KeyQ"
    KEY_D = "KeyD"
    SPACE = "Space"
    SHIFT_LEFT = "ShiftLeft"


# Both QWERTY (WASD) and AZERTY (ZQSD) layouts move the player.
_KEY_FLAGS = {
    KeyCode.KEY_W.value: "is_forward_pressed",
    KeyCode.KEY_Z.value: "is_forward_pressed",
    KeyCode.KEY_S.value: "is_backward_pressed",
    KeyCode.KEY_A.value: "is_left_pressed",
    KeyCode.KEY_Q.value: "is_left_pressed",
    KeyCode.KEY_D.value: "is_right_pressed",
    KeyCode.SPACE.value: "is_up_pressed",
    KeyCode.SHIFT_LEFT.value: "is_down_pressed",
}


class CameraController:
    """Tracks pressed movement keys and accumulated mouse motion."""

    def __init__(self, speed: float, mouse_sensitivity: float) -> None:
        self.speed = speed
        self.mouse_sensitivity = mouse_sensitivity
        self.is_forward_pressed = False
        self.is_backward_pressed = False
        self.is_left_pressed = False
        self.is_right_pressed = False
        self.is_up_pressed = False
        self.is_down_pressed = False
        self.mouse_delta_x = 0.0
        self.mouse_delta_y = 0.0

    def handle_key(self, code: KeyCode | str, is_pressed: bool) -> bool:
        """Record a key change; return whether the key is one the controller uses."""
        flag = _KEY_FLAGS.get(getattr(code, "value", code))
        if flag is None:
            return False
        setattr(self, flag, is_pressed)
        return True

    def process_mouse(self, dx: float, dy: float) -> None:
        self.mouse_delta_x += dx
        self.mouse_delta_y += dy

    def update_camera(self, camera: Camera, player: Player) -> None:
        """Move the camera to the player and apply the pending mouse rotation."""
        camera.eye = player.pos

        camera.yaw += self.mouse_delta_x * self.mouse_sensitivity
        camera.pitch -= self.mouse_delta_y * self.mouse_sensitivity
        self.mouse_delta_x = 0.0
        self.mouse_delta_y = 0.0

        camera.pitch = min(max(camera.pitch, -MAX_PITCH), MAX_PITCH)