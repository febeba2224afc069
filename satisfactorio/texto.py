"""Compact 64-bit description of a quad face for the GPU."""

from __future__ import annotations

from satisfactorio.direction import Direction

_DIRECTION_BITS = 0x7
_HEIGHT_BITS = 0xF8
_WIDTH_BITS = 0x1F00
_QUAD_CLEAR = 0x1FF8
_X_BITS = 0x0F80_0000
_Y_BITS = 0x007C_0000
_Z_BITS = 0x0003_E000
_VERTEX_CLEAR = 0x0FFF_E000
_TEXTURE_BITS = 0xFFFF
_U32 = 0xFFFF_FFFF


def _check(name: str, value: int, bits: int) -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} {value} does not fit in {bits} unsigned bits")
    return value


class RenderFaceTexto:
    """A face packed into two 32-bit words.

    ``geometry`` holds the chunk-local top-left vertex (5 bits per axis, bits 13-27),
    the quad width (bits 8-12), height (bits 3-7) and direction (bits 0-2).
    ``material`` holds a 16-bit texture id in its low bits.
    """

    __slots__ = ("geometry", "material")

    def __init__(
        self,
        x: int,
        y: int,
        z: int,
        width: int,
        height: int,
        direction: Direction,
        texture: int = 0,
    ) -> None:
        self.geometry = 0
        self.material = 0
        self.top_left_vertex = (x, y, z)
        self._set_quad(width, height)
        self.direction = direction
        self.texture = texture

    def __repr__(self) -> str:
        return f"RenderFaceTexto(geometry={self.geometry:#010x}, material={self.material:#010x})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RenderFaceTexto):
            return NotImplemented
        return (self.geometry, self.material) == (other.geometry, other.material)

    __hash__ = None  # mutable

    @property
    def direction(self) -> Direction:
        return Direction(self.geometry & _DIRECTION_BITS)

    @direction.setter
    def direction(self, value: Direction) -> None:
        self.geometry = (self.geometry & ~_DIRECTION_BITS & _U32) | int(Direction(value))

    @property
    def width(self) -> int:
        return (self.geometry & _WIDTH_BITS) >> 8

    @width.setter
    def width(self, value: int) -> None:
        self._set_quad(value, self.height)

    @property
    def height(self) -> int:
        return (self.geometry & _HEIGHT_BITS) >> 3

    @height.setter
    def height(self, value: int) -> None:
        self._set_quad(self.width, value)

    @property
    def quad_dimensions(self) -> tuple[int, int]:
        """The two quad fields, low field first: (height, width)."""
        return (self.height, self.width)

    @property
    def top_left_vertex(self) -> tuple[int, int, int]:
        return (
            (self.geometry & _X_BITS) >> 23,
            (self.geometry & _Y_BITS) >> 18,
            (self.geometry & _Z_BITS) >> 13,
        )

    @top_left_vertex.setter
    def top_left_vertex(self, value: tuple[int, int, int]) -> None:
        x, y, z = (_check(name, v, 8) for name, v in zip("xyz", value))
        self.geometry = (self.geometry & ~_VERTEX_CLEAR & _U32) | (x << 23 | y << 18 | z << 13)

    @property
    def texture(self) -> int:
        return self.material & _TEXTURE_BITS

    @texture.setter
    def texture(self, value: int) -> None:
        _check("texture", value, 16)
        self.material = (self.material & ~_TEXTURE_BITS & _U32) | value

    def _set_quad(self, width: int, height: int) -> None:
        _check("width", width, 8)
        _check("height", height, 8)
        self.geometry = ((self.geometry & ~_QUAD_CLEAR) | (width << 8 | height << 3)) & _U32