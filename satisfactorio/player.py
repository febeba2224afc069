"""The player: position, movement and the chunks around it that get rendered."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from satisfactorio.chunk import CHUNK_SIZE

if TYPE_CHECKING:
    from satisfactorio.camera import Camera, CameraUniform
    from satisfactorio.controller import CameraController

log = logging.getLogger(__name__)

# Odd values keep the rendered area centred on the player's chunk.
DEBUG_HORIZONTAL_RENDER_DISTANCE = 7
DEBUG_VERTICAL_RENDER_DISTANCE = 1

_U16_MAX = 0xFFFF

Vec3 = tuple[float, float, float]
ChunkRange = tuple[int, int, int, int, int, int]


def _check_distance(name: str, value: int) -> int:
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} render distance {value} does not fit in 16 unsigned bits")
    return value


@dataclass(eq=False)
class Player:
    uuid: int = -1
    pos: Vec3 = (0.0, 0.0, 0.0)
    vel: Vec3 = (0.0, 0.0, 0.0)
    yaw: float = 0.0
    horizontal_render_distance: int = DEBUG_HORIZONTAL_RENDER_DISTANCE
    vertical_render_distance: int = DEBUG_VERTICAL_RENDER_DISTANCE

    def set_render_distance(self, horizontal: int, vertical: int) -> None:
        self.horizontal_render_distance = _check_distance("horizontal", horizontal)
        self.vertical_render_distance = _check_distance("vertical", vertical)

    def update(
        self,
        dt: float,
        camera: Camera,
        camera_controller: CameraController,
        camera_uniform: CameraUniform,
    ) -> None:
        """Move along the pressed directions, then sync the camera and its uniform."""
        forward = camera.forward()
        right = camera.right()
        up = np.array([0.0, 1.0, 0.0])
        direction = np.zeros(3)

        if camera_controller.is_forward_pressed:
            direction += forward
        if camera_controller.is_backward_pressed:
            direction -= forward
        if camera_controller.is_right_pressed:
            direction += right
        if camera_controller.is_left_pressed:
            direction -= right
        if camera_controller.is_up_pressed:
            direction += up
        if camera_controller.is_down_pressed:
            direction -= up

        length_sqr = float(np.dot(direction, direction))
        if length_sqr > 0.0:
            velocity = direction / math.sqrt(length_sqr) * (camera_controller.speed * dt)
        else:
            velocity = np.zeros(3)

        self.vel = tuple(float(v) for v in velocity)
        self.pos = tuple(p + v for p, v in zip(self.pos, self.vel))
        self.yaw = math.fmod(camera.yaw, 2.0 * math.pi)

        camera_controller.update_camera(camera, self)
        camera_uniform.update_view_proj(camera)

        log.debug("Player: x=%s, y=%s, z=%s, yaw=%.2f", *self.pos, self.yaw)

    def teleport(self, x: float, y: float, z: float) -> None:
        destination = (float(x), float(y), float(z))
        log.info("Player %d jumped from %s to %s", self.uuid, self.pos, destination)
        self.pos = destination

    def rendered_chunk_range(self) -> ChunkRange:
        """Return ``(min_cx, max_cx, min_cy, max_cy, min_cz, max_cz)``, bounds inclusive."""
        half_h = self.horizontal_render_distance // 2
        half_v = self.vertical_render_distance // 2

        cx, cy, cz = (coord // CHUNK_SIZE for coord in self.pos)

        return (
            math.floor(cx - half_h),
            math.floor(cx + half_h),
            math.floor(cy - half_v),
            math.floor(cy + half_v),
            math.floor(cz - half_h),
            math.floor(cz + half_h),
        )

    def rendered_chunk_number(self) -> int:
        return self._chunk_number(self.rendered_chunk_range())

    def rendered_chunk_data(self) -> tuple[ChunkRange, int]:
        chunk_range = self.rendered_chunk_range()
        return chunk_range, self._chunk_number(chunk_range)

    @staticmethod
    def _chunk_number(chunk_range: ChunkRange) -> int:
        min_cx, max_cx, min_cy, max_cy, min_cz, max_cz = chunk_range
        number = (max_cx - min_cx) * (max_cy - min_cy) * (max_cz - min_cz)
        return number if number >= 0 else 1