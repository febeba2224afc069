"""Voxel world core: chunks, greedy meshing, camera and player, raycasting and culling."""

__version__ = "0.1.0"