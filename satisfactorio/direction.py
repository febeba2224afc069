"""Axis-aligned face directions of a voxel."""

from enum import IntEnum


class Direction(IntEnum):
    """One of the six faces of a voxel; every value fits in three bits."""

    ABOVE = 0  # +Y
    BELOW = 1  # -Y
    LEFT = 2  # -X
    RIGHT = 3  # +X
    FRONT = 4  # +Z
    BACK = 5  # -Z