"""Meshes of every chunk the player can see."""

from __future__ import annotations

from typing import TYPE_CHECKING

from satisfactorio.chunk_mesh import ChunkMesh

if TYPE_CHECKING:
    from satisfactorio.player import Player
    from satisfactorio.world import World

ChunkKey = tuple[int, int, int]


class WorldMesh:
    """Chunk meshes keyed by chunk coordinates."""

    def __init__(self) -> None:
        self.meshes: dict[ChunkKey, ChunkMesh] = {}

    def update(self, world: World, player: Player) -> None:
        """Rebuild the meshes of the chunks in the player's render range.

        Meshes of chunks that left the range are dropped. An existing mesh that is
        marked dirty is carried over as it is; every other chunk is meshed afresh.
        """
        meshes: dict[ChunkKey, ChunkMesh] = {}
        for chunk in world.player_rendered_chunks(player):
            key = (chunk.x, chunk.y, chunk.z)
            existing = self.meshes.get(key)
            if existing is not None and existing.is_dirty():
                meshes[key] = existing
                continue
            mesh = ChunkMesh()
            mesh.make_greedy(chunk, world, *key)
            meshes[key] = mesh
        self.meshes = meshes