"""Perspective camera and the view-projection uniform sent to the GPU."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

Vec3 = tuple[float, float, float]

# Matrices are stored in ordinary row/column order: ``m[row, col]``.
OPENGL_TO_WGPU_MATRIX = np.array(
    [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 0.5, 0.5],
        [0.0, 0.0, 0.0, 1.0],
    ]
)

_UNIT_Y = np.array([0.0, 1.0, 0.0])


def _vec3(values: Sequence[float]) -> Vec3:
    result = tuple(float(v) for v in values)
    if len(result) != 3:
        raise ValueError("a 3D vector needs exactly three components")
    return result


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def perspective(fovy: float, aspect: float, znear: float, zfar: float) -> np.ndarray:
    """Right-handed perspective projection; ``fovy`` is in degrees, depth maps to [-1, 1]."""
    if not 0.0 < fovy < 180.0:
        raise ValueError("the vertical field of view must lie strictly between 0 and 180 degrees")
    if aspect == 0.0:
        raise ValueError("the aspect ratio cannot be zero")
    if znear <= 0.0 or zfar <= 0.0:
        raise ValueError("clip plane distances must be positive")
    if znear == zfar:
        raise ValueError("near and far clip planes cannot coincide")

    f = 1.0 / math.tan(math.radians(fovy) / 2.0)
    return np.array(
        [
            [f / aspect, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, (zfar + znear) / (znear - zfar), 2.0 * zfar * znear / (znear - zfar)],
            [0.0, 0.0, -1.0, 0.0],
        ]
    )


def look_at_rh(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    eye_v = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(target, dtype=float) - eye_v)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -float(np.dot(eye_v, s))],
            [u[0], u[1], u[2], -float(np.dot(eye_v, u))],
            [-f[0], -f[1], -f[2], float(np.dot(eye_v, f))],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


@dataclass(eq=False)
class Camera:
    """A first-person camera oriented by yaw (around Y) and pitch (around X), in radians."""

    eye: Vec3
    target: Vec3
    up: Vec3
    aspect: float
    fovy: float
    znear: float
    zfar: float
    yaw: float = 0.0
    pitch: float = 0.0

    def __post_init__(self) -> None:
        self.eye = _vec3(self.eye)
        self.target = _vec3(self.target)
        self.up = _vec3(self.up)

    def forward(self) -> np.ndarray:
        """Unit vector the camera looks along."""
        sy, cy = math.sin(self.yaw), math.cos(self.yaw)
        sp, cp = math.sin(self.pitch), math.cos(self.pitch)
        return _normalize(np.array([cy * cp, sp, sy * cp]))

    def right(self) -> np.ndarray:
        """Unit vector to the camera's right, always horizontal."""
        return _normalize(np.cross(self.forward(), _UNIT_Y))

    def look_target(self) -> np.ndarray:
        """The point one unit in front of the eye."""
        return np.asarray(self.eye, dtype=float) + self.forward()

    def view_projection_matrix(self) -> np.ndarray:
        view = look_at_rh(self.eye, self.look_target(), _UNIT_Y)
        proj = perspective(self.fovy, self.aspect, self.znear, self.zfar)
        return proj @ view


@dataclass(eq=False)
class CameraUniform:
    """The view-projection matrix as the shaders receive it."""

    view_proj: np.ndarray = field(default_factory=lambda: np.eye(4))

    def update_view_proj(self, camera: Camera) -> None:
        self.view_proj = camera.view_projection_matrix()

    def to_bytes(self) -> bytes:
        """Sixteen little-endian f32 values, column after column."""
        return np.ascontiguousarray(self.view_proj.T, dtype="<f4").tobytes()