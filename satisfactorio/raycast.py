"""Voxel ray traversal from the camera into the world."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satisfactorio.camera import Camera
    from satisfactorio.world import World


class BlockFace(Enum):
    POSITIVE_X = "+x"
    NEGATIVE_X = "-x"
    POSITIVE_Y = "+y"
    NEGATIVE_Y = "-y"
    POSITIVE_Z = "+z"
    NEGATIVE_Z = "-z"


_AXIS_FACES = (
    (BlockFace.NEGATIVE_X, BlockFace.POSITIVE_X),
    (BlockFace.NEGATIVE_Y, BlockFace.POSITIVE_Y),
    (BlockFace.NEGATIVE_Z, BlockFace.POSITIVE_Z),
)


@dataclass(frozen=True)
class BlockHit:
    """The first solid block a ray met, and the face it entered through."""

    x: int
    y: int
    z: int
    face: BlockFace


def _entered_face(t_max: list[float], step: list[int]) -> BlockFace:
    if t_max[0] < t_max[1] and t_max[0] < t_max[2]:
        axis = 0
    elif t_max[1] < t_max[2]:
        axis = 1
    else:
        axis = 2
    negative, positive = _AXIS_FACES[axis]
    return negative if step[axis] > 0 else positive


def raycast(camera: Camera, world: World, max_distance: float) -> BlockHit | None:
    """Walk the grid along the camera's forward vector until a solid block is met.

    Returns ``None`` once the travelled distance exceeds ``max_distance``.
    """
    if not math.isfinite(max_distance):
        raise ValueError("max_distance must be finite")

    origin = [float(c) for c in camera.eye]
    direction = [float(d) for d in camera.forward()]

    step = [1 if d >= 0.0 else -1 for d in direction]
    cell = [math.floor(o) - (1 if d < 0.0 else 0) for o, d in zip(origin, direction)]
    delta = [1.0 / abs(d) if d != 0.0 else math.inf for d in direction]
    t_max = [
        (c + (1.0 if s > 0 else 0.0) - o) * inv if d != 0.0 else math.inf
        for c, s, o, inv, d in zip(cell, step, origin, delta, direction)
    ]

    distance = 0.0
    while True:
        if distance > max_distance:
            return None

        if not world.get_block_from_xyz(*cell).is_air():
            return BlockHit(cell[0], cell[1], cell[2], _entered_face(t_max, step))

        if t_max[0] < t_max[1]:
            axis = 0 if t_max[0] < t_max[2] else 2
        else:
            axis = 1 if t_max[1] < t_max[2] else 2
        cell[axis] += step[axis]
        t_max[axis] += delta[axis]
        distance = t_max[axis] - delta[axis]