"""The world: a sparse map of chunks keyed by chunk coordinates."""

from __future__ import annotations

from itertools import product
from typing import TYPE_CHECKING, Iterator

from satisfactorio.block import BlockInstance
from satisfactorio.chunk import CHUNK_SIZE, Chunk

if TYPE_CHECKING:
    from satisfactorio.player import Player

ChunkKey = tuple[int, int, int]


def _keys_in(chunk_range) -> Iterator[ChunkKey]:
    min_cx, max_cx, min_cy, max_cy, min_cz, max_cz = chunk_range
    return product(
        range(min_cx, max_cx + 1),
        range(min_cy, max_cy + 1),
        range(min_cz, max_cz + 1),
    )


class World:
    """Chunks keyed by ``(cx, cy, cz)``; missing chunks read as air."""

    def __init__(self) -> None:
        self._chunks: dict[ChunkKey, Chunk] = {}

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[ChunkKey]:
        return iter(self._chunks)

    def __contains__(self, key: object) -> bool:
        return key in self._chunks

    def get_chunk(self, cx: int, cy: int, cz: int) -> Chunk | None:
        return self._chunks.get((cx, cy, cz))

    def set_chunk(self, cx: int, cy: int, cz: int, chunk: Chunk) -> None:
        self._chunks[(cx, cy, cz)] = chunk

    def update(self, player: Player, world_mesh) -> None:
        """Generate missing chunks around the player and mark existing meshes dirty."""
        for key in _keys_in(player.rendered_chunk_range()):
            if key in self._chunks:
                mesh = world_mesh.meshes.get(key)
                if mesh is not None:
                    mesh.set_dirty()
            else:
                self._chunks[key] = Chunk.generate(*key)

    def player_rendered_chunks(self, player: Player) -> list[Chunk]:
        """Existing chunks within the player's render range, in x, y, z order."""
        return [
            self._chunks[key]
            for key in _keys_in(player.rendered_chunk_range())
            if key in self._chunks
        ]

    def get_block_from_xyz(self, x: int, y: int, z: int) -> BlockInstance:
        """Block at world coordinates; air where no chunk is loaded."""
        chunk = self.get_chunk(x // CHUNK_SIZE, y // CHUNK_SIZE, z // CHUNK_SIZE)
        if chunk is None:
            return BlockInstance.air()
        return chunk.get_block_from_xyz(x % CHUNK_SIZE, y % CHUNK_SIZE, z % CHUNK_SIZE)

    def get_local_block_from_xyz(
        self, lx: int, ly: int, lz: int, cx: int, cy: int, cz: int
    ) -> BlockInstance:
        """Block at local coordinates of chunk (cx, cy, cz); may reach into neighbours."""
        if not all(0 <= v < CHUNK_SIZE for v in (lx, ly, lz)):
            return self.get_block_from_xyz(
                lx + cx * CHUNK_SIZE,
                ly + cy * CHUNK_SIZE,
                lz + cz * CHUNK_SIZE,
            )
        chunk = self.get_chunk(cx, cy, cz)
        if chunk is None:
            return BlockInstance.air()
        return chunk.get_block_from_xyz(lx, ly, lz)