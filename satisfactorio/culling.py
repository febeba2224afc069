"""Per-frame timing data and the culling that picks which chunks to draw."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

import numpy as np

from satisfactorio.chunk import CHUNK_SIZE
from satisfactorio.plane import Plane

if TYPE_CHECKING:
    from satisfactorio.camera import Camera
    from satisfactorio.chunk_mesh import ChunkMesh
    from satisfactorio.world_mesh import WorldMesh

log = logging.getLogger(__name__)


@dataclass
class FrameData:
    """Frame timing: last delta, frames per second and the counters behind it."""

    dt: float = 0.0
    fps: int = 0
    fps_timer: float = 0.0
    last_frame: float = field(default_factory=time.perf_counter)
    frame_count: int = 0


def is_chunk_behind_camera(
    min_corner: Sequence[float],
    max_corner: Sequence[float],
    cam_forward: Sequence[float],
    cam_eye: Sequence[float],
) -> bool:
    """Whether the whole box lies behind the plane through the eye facing forward."""
    lo = np.asarray(min_corner, dtype=float)
    hi = np.asarray(max_corner, dtype=float)
    forward = np.asarray(cam_forward, dtype=float)
    extent = (hi - lo) * 0.5
    center = lo + extent
    radius = float(np.dot(extent, np.abs(forward)))
    distance = float(np.dot(forward, center - np.asarray(cam_eye, dtype=float)))
    return distance + radius < 0.0


def extract_frustum_planes(matrix) -> list[Plane]:
    """The six normalized clip planes (left, right, bottom, top, near, far).

    ``matrix`` is a 4x4 view-projection matrix indexed ``[row, col]``.
    """
    m = np.asarray(matrix, dtype=float)
    w = m[3]
    planes = []
    for row in (m[0], m[1], m[2]):
        for sign in (1.0, -1.0):
            combined = w + sign * row
            planes.append(Plane(tuple(combined[:3]), combined[3]).normalize())
    return planes


def is_chunk_in_frustum(
    min_corner: Sequence[float], max_corner: Sequence[float], planes: Sequence[Plane]
) -> bool:
    """Whether the box is at least partly on the inner side of every plane."""
    for plane in planes:
        positive = tuple(
            hi if n >= 0.0 else lo for n, lo, hi in zip(plane.normal, min_corner, max_corner)
        )
        if plane.distance(positive) < 0.0:
            return False
    return True


def visible_chunks(
    world_mesh: WorldMesh, camera: Camera, view_proj
) -> list[tuple[tuple[int, int, int], ChunkMesh]]:
    """Meshes with uploaded vertices that are in front of the camera and inside its frustum."""
    cam_forward = camera.forward()
    cam_eye = np.asarray(camera.eye, dtype=float)
    planes = extract_frustum_planes(view_proj)

    visible = []
    for key, mesh in world_mesh.meshes.items():
        if mesh.buffer.vertex_buffer is None:
            log.error("chunk %s cannot be drawn: vertex buffer not set", key)
            continue
        if mesh.buffer.vertex_number is None:
            log.error("chunk %s cannot be drawn: vertex number not set", key)
            continue

        min_corner = np.asarray(key, dtype=float) * CHUNK_SIZE
        max_corner = min_corner + CHUNK_SIZE

        # The cheap half-space test first, then the full frustum test.
        if is_chunk_behind_camera(min_corner, max_corner, cam_forward, cam_eye):
            continue
        if not is_chunk_in_frustum(min_corner, max_corner, planes):
            continue
        visible.append((key, mesh))
    return visible