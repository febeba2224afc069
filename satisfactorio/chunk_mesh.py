"""Greedy meshing of a chunk into triangles, and the buffers that hold them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import numpy as np

from satisfactorio.chunk import CHUNK_SIZE, Chunk
from satisfactorio.direction import Direction
from satisfactorio.face_mask import FaceMask
from satisfactorio.padded_chunk import PaddedChunk
from satisfactorio.vertex import Vertex

if TYPE_CHECKING:
    from satisfactorio.world import World

_INNER = slice(1, CHUNK_SIZE + 1)

Quad = tuple[int, int, int, int, Direction]


@dataclass
class BufferData:
    """Raw vertex and index data ready for upload, with their element counts."""

    vertex_buffer: bytes | None = None
    index_buffer: bytes | None = None
    vertex_number: int | None = None
    index_number: int | None = None

    @classmethod
    def empty(cls) -> BufferData:
        return cls()


def _face_keys(
    previous: np.ndarray, current: np.ndarray, entering: Direction, leaving: Direction
) -> list[list[int | None]]:
    """Mask of one slice: a packed face key where solidity changes, ``None`` elsewhere.

    A face points ``entering`` when air is followed by a solid block (it carries the
    solid block's id) and ``leaving`` when a solid block is followed by air.
    """
    keys: list[list[int | None]] = [[None] * CHUNK_SIZE for _ in range(CHUNK_SIZE)]
    previous_solid = previous != 0
    current_solid = current != 0
    for a, b in zip(*np.nonzero(previous_solid != current_solid)):
        a, b = int(a), int(b)
        if current_solid[a, b]:
            key = FaceMask.from_parts(False, int(current[a, b]), entering).data
        else:
            key = FaceMask.from_parts(False, int(previous[a, b]), leaving).data
        keys[a][b] = key
    return keys


def _greedy_quads(keys: list[list[int | None]]) -> Iterator[Quad]:
    """Merge equal faces into rectangles, consuming the mask.

    Yields ``(a, b, size_a, size_b, face)``; a rectangle grows along ``a`` first,
    then along ``b`` as long as every covered row matches.
    """
    for a in range(CHUNK_SIZE):
        row = keys[a]
        b = 0
        while b < CHUNK_SIZE:
            key = row[b]
            if key is None:
                b += 1
                continue
            row[b] = None

            size_a = 1
            for ia in range(a + 1, CHUNK_SIZE):
                if keys[ia][b] != key:
                    break
                size_a += 1
                keys[ia][b] = None

            rows = keys[a : a + size_a]
            size_b = 1
            for ib in range(b + 1, CHUNK_SIZE):
                if any(r[ib] != key for r in rows):
                    break
                size_b += 1
                for r in rows:
                    r[ib] = None

            yield a, b, size_a, size_b, FaceMask(key).face
            b += size_b


class ChunkMesh:
    """Triangle list of one chunk; dirty until it has been built."""

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.buffer = BufferData.empty()
        self._dirty = True

    def set_dirty(self) -> None:
        self._dirty = True

    def is_dirty(self) -> bool:
        return self._dirty

    def vertex_bytes(self) -> bytes:
        """All vertices packed one after another in their GPU layout."""
        return b"".join(v.to_bytes() for v in self.vertices)

    def make_greedy(self, chunk: Chunk, world: World, cx: int, cy: int, cz: int) -> None:
        """Rebuild the mesh of ``chunk`` at chunk coordinates (cx, cy, cz)."""
        grid = PaddedChunk.from_chunk(chunk, world).grid  # [z, y, x]
        ox, oy, oz = cx * CHUNK_SIZE, cy * CHUNK_SIZE, cz * CHUNK_SIZE
        vertices: list[Vertex] = []

        for x in range(CHUNK_SIZE + 1):
            keys = _face_keys(
                grid[_INNER, _INNER, x].T,
                grid[_INNER, _INNER, x + 1].T,
                Direction.LEFT,
                Direction.RIGHT,
            )
            for y, z, size_y, size_z, face in _greedy_quads(keys):
                px = float(x + ox)
                y0, y1 = float(y + oy), float(y + size_y + oy)
                z0, z1 = float(z + oz), float(z + size_z + oz)
                v1 = Vertex((px, y0, z0))
                v2 = Vertex((px, y1, z1))
                v3 = Vertex((px, y1, z0))
                v4 = Vertex((px, y0, z1))
                if face == Direction.LEFT:
                    vertices.extend((v1, v2, v3, v1, v4, v2))
                else:
                    vertices.extend((v1, v3, v2, v1, v2, v4))

        for y in range(CHUNK_SIZE + 1):
            keys = _face_keys(
                grid[_INNER, y, _INNER].T,
                grid[_INNER, y + 1, _INNER].T,
                Direction.BELOW,
                Direction.ABOVE,
            )
            for x, z, size_x, size_z, face in _greedy_quads(keys):
                py = float(y + oy)
                x0, x1 = float(x + ox), float(x + size_x + ox)
                z0, z1 = float(z + oz), float(z + size_z + oz)
                v1 = Vertex((x0, py, z0))
                v2 = Vertex((x1, py, z1))
                v3 = Vertex((x1, py, z0))
                v4 = Vertex((x0, py, z1))
                if face == Direction.ABOVE:
                    vertices.extend((v1, v2, v3, v1, v4, v2))
                else:
                    vertices.extend((v1, v3, v2, v1, v2, v4))

        for z in range(CHUNK_SIZE + 1):
            keys = _face_keys(
                grid[z, _INNER, _INNER].T,
                grid[z + 1, _INNER, _INNER].T,
                Direction.BACK,
                Direction.FRONT,
            )
            for x, y, size_x, size_y, face in _greedy_quads(keys):
                pz = float(z + oz)
                x0, x1 = float(x + ox), float(x + size_x + ox)
                y0, y1 = float(y + oy), float(y + size_y + oy)
                v1 = Vertex((x0, y0, pz))
                v2 = Vertex((x1, y0, pz))
                v3 = Vertex((x1, y1, pz))
                v4 = Vertex((x0, y1, pz))
                if face == Direction.FRONT:
                    vertices.extend((v1, v2, v3, v1, v3, v4))
                else:
                    vertices.extend((v1, v3, v2, v1, v4, v3))

        self.vertices = vertices
        self.buffer = BufferData(
            vertex_buffer=self.vertex_bytes(),
            vertex_number=len(vertices),
        )
        self._dirty = False