"""Packed face descriptors used while greedy-meshing a chunk slice."""

from __future__ import annotations

from dataclasses import dataclass

from satisfactorio.direction import Direction

VISITED_SHIFT = 63
BLOCK_ID_SHIFT = 31
BLOCK_ID_MASK = 0xFFFF_FFFF
FACE_MASK = 0b111

_VISITED_BIT = 1 << VISITED_SHIFT
_EMPTY = 0x8000_0000_0000_0000


@dataclass
class FaceMask:
    """A 64-bit word: visited flag (bit 63), block id (bits 31-62), face (bits 0-2)."""

    data: int = _EMPTY

    @classmethod
    def empty(cls) -> FaceMask:
        """A mask with no face, already marked visited."""
        return cls(_EMPTY)

    @classmethod
    def from_parts(cls, visited: bool, block_id: int, face: Direction) -> FaceMask:
        mask = cls.empty()
        mask.visited = visited
        mask.block_id = block_id
        mask.face = face
        return mask

    def to_tuple(self) -> tuple[bool, int, Direction]:
        return (self.visited, self.block_id, self.face)

    @property
    def visited(self) -> bool:
        return (self.data >> VISITED_SHIFT) != 0

    @visited.setter
    def visited(self, value: bool) -> None:
        if value:
            self.data |= _VISITED_BIT
        else:
            self.data &= ~_VISITED_BIT

    @property
    def block_id(self) -> int:
        return (self.data >> BLOCK_ID_SHIFT) & BLOCK_ID_MASK

    @block_id.setter
    def block_id(self, value: int) -> None:
        if not 0 <= value <= BLOCK_ID_MASK:
            raise ValueError(f"block id {value} does not fit in 32 unsigned bits")
        self.data = (self.data & ~(BLOCK_ID_MASK << BLOCK_ID_SHIFT)) | (value << BLOCK_ID_SHIFT)

    @property
    def face(self) -> Direction:
        return Direction(self.data & FACE_MASK)

    @face.setter
    def face(self, value: Direction) -> None:
        self.data = (self.data & ~FACE_MASK) | int(Direction(value))