"""A chunk surrounded by a one-block border copied from its neighbours."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from satisfactorio.block import BlockInstance
from satisfactorio.chunk import CHUNK_SIZE, LAST_CHUNK_AXIS_INDEX, Chunk

if TYPE_CHECKING:
    from satisfactorio.world import World

PADDED_CHUNK_SIZE = CHUNK_SIZE + 2
PADDED_CHUNK_SIZE_DOUBLE = PADDED_CHUNK_SIZE * 2
PADDED_CHUNK_SIZE_SQR = PADDED_CHUNK_SIZE * PADDED_CHUNK_SIZE
PADDED_CHUNK_BLOCK_NUMBER = PADDED_CHUNK_SIZE * PADDED_CHUNK_SIZE * PADDED_CHUNK_SIZE
FIRST_PADDED_CHUNK_CENTER_INDEX = 1
LAST_PADDED_CHUNK_CENTER_INDEX = PADDED_CHUNK_SIZE - 2
FIRST_PADDED_CHUNK_AXIS_INDEX = 0
LAST_PADDED_CHUNK_AXIS_INDEX = PADDED_CHUNK_SIZE - 1

_CENTER = slice(FIRST_PADDED_CHUNK_CENTER_INDEX, LAST_PADDED_CHUNK_CENTER_INDEX + 1)
_FIRST = FIRST_PADDED_CHUNK_AXIS_INDEX
_LAST = LAST_PADDED_CHUNK_AXIS_INDEX


def _index(x: int, y: int, z: int) -> int:
    return x + y * PADDED_CHUNK_SIZE + z * PADDED_CHUNK_SIZE_SQR


class PaddedChunk:
    """Block ids of a chunk plus a border layer taken from the six face neighbours.

    Blocks are stored flat with x varying fastest, then y, then z. The chunk's own
    block (x, y, z) sits at padded position (x + 1, y + 1, z + 1). Border cells with
    no loaded neighbour, and the border's edges and corners, stay air.
    """

    __slots__ = ("block_ids",)

    def __init__(self) -> None:
        self.block_ids = np.zeros(PADDED_CHUNK_BLOCK_NUMBER, dtype=np.uint32)

    @property
    def grid(self) -> np.ndarray:
        """A view of the block ids indexed as ``[z, y, x]``."""
        return self.block_ids.reshape(PADDED_CHUNK_SIZE, PADDED_CHUNK_SIZE, PADDED_CHUNK_SIZE)

    @classmethod
    def empty(cls) -> PaddedChunk:
        """A padded chunk made of air only."""
        return cls()

    @classmethod
    def from_chunk(cls, chunk: Chunk, world: World) -> PaddedChunk:
        """Copy ``chunk`` into the centre and its loaded neighbours into the border."""
        padded = cls()
        padded.grid[_CENTER, _CENTER, _CENTER] = chunk.grid
        padded.fill_edges(
            world.get_chunk(chunk.x - 1, chunk.y, chunk.z),
            world.get_chunk(chunk.x + 1, chunk.y, chunk.z),
            world.get_chunk(chunk.x, chunk.y - 1, chunk.z),
            world.get_chunk(chunk.x, chunk.y + 1, chunk.z),
            world.get_chunk(chunk.x, chunk.y, chunk.z - 1),
            world.get_chunk(chunk.x, chunk.y, chunk.z + 1),
        )
        return padded

    def get_block_from_xyz(self, x: int, y: int, z: int) -> BlockInstance:
        return self.get_block_from_i(_index(x, y, z))

    def get_block_from_i(self, i: int) -> BlockInstance:
        self._check_index(i)
        return BlockInstance(int(self.block_ids[i]))

    def _set_block_from_xyz(self, x: int, y: int, z: int, block: BlockInstance) -> None:
        self._set_block_from_i(_index(x, y, z), block)

    def _set_block_from_i(self, i: int, block: BlockInstance) -> None:
        self._check_index(i)
        self.block_ids[i] = block.id

    @staticmethod
    def _check_index(i: int) -> None:
        if not 0 <= i < PADDED_CHUNK_BLOCK_NUMBER:
            raise IndexError(f"block index {i} outside padded chunk")

    def fill_neg_x(self, chunk: Chunk) -> None:
        """Fill the x = 0 border from the last x layer of the -X neighbour."""
        self.grid[_CENTER, _CENTER, _FIRST] = chunk.grid[:, :, LAST_CHUNK_AXIS_INDEX]

    def fill_pos_x(self, chunk: Chunk) -> None:
        """Fill the last x border from the first x layer of the +X neighbour."""
        self.grid[_CENTER, _CENTER, _LAST] = chunk.grid[:, :, 0]

    def fill_neg_y(self, chunk: Chunk) -> None:
        """Fill the y = 0 border from the last y layer of the -Y neighbour."""
        self.grid[_CENTER, _FIRST, _CENTER] = chunk.grid[:, LAST_CHUNK_AXIS_INDEX, :]

    def fill_pos_y(self, chunk: Chunk) -> None:
        """Fill the last y border from the first y layer of the +Y neighbour."""
        self.grid[_CENTER, _LAST, _CENTER] = chunk.grid[:, 0, :]

    def fill_neg_z(self, chunk: Chunk) -> None:
        """Fill the z = 0 border from the last z layer of the -Z neighbour."""
        self.grid[_FIRST, _CENTER, _CENTER] = chunk.grid[LAST_CHUNK_AXIS_INDEX, :, :]

    def fill_pos_z(self, chunk: Chunk) -> None:
        """Fill the last z border from the first z layer of the +Z neighbour."""
        self.grid[_LAST, _CENTER, _CENTER] = chunk.grid[0, :, :]

    def fill_edges(
        self,
        neg_x: Chunk | None,
        pos_x: Chunk | None,
        neg_y: Chunk | None,
        pos_y: Chunk | None,
        neg_z: Chunk | None,
        pos_z: Chunk | None,
    ) -> None:
        """Fill each border face whose neighbour is given; ``None`` leaves it untouched."""
        for neighbour, fill in (
            (neg_x, self.fill_neg_x),
            (pos_x, self.fill_pos_x),
            (neg_y, self.fill_neg_y),
            (pos_y, self.fill_pos_y),
            (neg_z, self.fill_neg_z),
            (pos_z, self.fill_pos_z),
        ):
            if neighbour is not None:
                fill(neighbour)