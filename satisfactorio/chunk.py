"""Cubic chunks of blocks."""

from __future__ import annotations

import numpy as np

from satisfactorio.block import BlockInstance

CHUNK_SIZE = 32
CHUNK_SIZE_SQR = CHUNK_SIZE * CHUNK_SIZE
CHUNK_BLOCK_NUMBER = CHUNK_SIZE * CHUNK_SIZE * CHUNK_SIZE
LAST_CHUNK_AXIS_INDEX = CHUNK_SIZE - 1

_U32_MAX = 0xFFFF_FFFF


def _index(x: int, y: int, z: int) -> int:
    return x + y * CHUNK_SIZE + z * CHUNK_SIZE_SQR


class Chunk:
    """A CHUNK_SIZE cube of block ids at chunk coordinates (x, y, z).

    Blocks are stored flat, with x varying fastest, then y, then z.
    """

    __slots__ = ("x", "y", "z", "block_ids")

    def __init__(self, x: int, y: int, z: int, block_ids=None) -> None:
        self.x = x
        self.y = y
        self.z = z
        if block_ids is None:
            self.block_ids = np.zeros(CHUNK_BLOCK_NUMBER, dtype=np.uint32)
            return
        ids = np.asarray(block_ids)
        if ids.shape != (CHUNK_BLOCK_NUMBER,):
            raise ValueError(f"a chunk holds exactly {CHUNK_BLOCK_NUMBER} blocks")
        if ids.size and (ids.min() < 0 or ids.max() > _U32_MAX):
            raise ValueError("block ids must fit in 32 unsigned bits")
        self.block_ids = ids.astype(np.uint32)

    def __repr__(self) -> str:
        return f"Chunk(x={self.x}, y={self.y}, z={self.z})"

    @property
    def grid(self) -> np.ndarray:
        """A view of the block ids indexed as ``[z, y, x]``."""
        return self.block_ids.reshape(CHUNK_SIZE, CHUNK_SIZE, CHUNK_SIZE)

    @classmethod
    def generate(cls, cx: int, cy: int, cz: int) -> Chunk:
        """Build a chunk with a flat layer of solid blocks at local y = 0."""
        chunk = cls(cx, cy, cz)
        chunk.grid[:, 0, :] = 1
        return chunk

    def get_block_from_xyz(self, x: int, y: int, z: int) -> BlockInstance:
        return self.get_block_from_i(_index(x, y, z))

    def get_block_from_i(self, i: int) -> BlockInstance:
        self._check_index(i)
        return BlockInstance(int(self.block_ids[i]))

    def set_block_from_xyz(self, x: int, y: int, z: int, block: BlockInstance) -> None:
        self.set_block_from_i(_index(x, y, z), block)

    def set_block_from_i(self, i: int, block: BlockInstance) -> None:
        self._check_index(i)
        self.block_ids[i] = block.id

    @staticmethod
    def _check_index(i: int) -> None:
        if not 0 <= i < CHUNK_BLOCK_NUMBER:
            raise IndexError(f"block index {i} outside chunk")