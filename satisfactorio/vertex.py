"""Vertices of the world mesh and their GPU byte layout."""

from __future__ import annotations

import struct
from dataclasses import dataclass

# The color to display the world in, RGB with components in [0, 1].
BASE_VERTEX_COLOR: tuple[float, float, float] = (0.5, 0.5, 0.5)

_LAYOUT = struct.Struct("<3f3fI")

VERTEX_SIZE = _LAYOUT.size
POSITION_OFFSET = 0
COLOR_OFFSET = struct.calcsize("<3f")

_U32_MAX = 0xFFFF_FFFF


def _triple(name: str, values) -> tuple[float, float, float]:
    result = tuple(float(v) for v in values)
    if len(result) != 3:
        raise ValueError(f"vertex {name} needs exactly three components")
    return result


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, RGB color and a packed texture word."""

    position: tuple[float, float, float]
    color: tuple[float, float, float] = BASE_VERTEX_COLOR
    uv: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _triple("position", self.position))
        object.__setattr__(self, "color", _triple("color", self.color))
        if not 0 <= self.uv <= _U32_MAX:
            raise ValueError(f"uv {self.uv} does not fit in 32 unsigned bits")

    def to_bytes(self) -> bytes:
        """Pack the vertex as three f32 position, three f32 color and one u32, little-endian."""
        return _LAYOUT.pack(*self.position, *self.color, self.uv)