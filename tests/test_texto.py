import pytest

from satisfactorio.direction import Direction
from satisfactorio.texto import RenderFaceTexto


@pytest.mark.parametrize(
    "x, y, z, w, h, direction, texture",
    [
        (0, 0, 0, 0, 0, Direction.ABOVE, 0),
        (31, 31, 31, 31, 31, Direction.BACK, 0xFFFF),
        (1, 2, 3, 4, 5, Direction.LEFT, 42),
        (17, 0, 9, 1, 30, Direction.FRONT, 1000),
    ],
)
def test_round_trip(x, y, z, w, h, direction, texture):
    texto = RenderFaceTexto(x, y, z, w, h, direction, texture)
    assert texto.top_left_vertex == (x, y, z)
    assert (texto.width, texto.height) == (w, h)
    assert texto.direction is direction
    assert texto.texture == texture


def test_quad_dimensions_lists_height_first():
    texto = RenderFaceTexto(0, 0, 0, 7, 3, Direction.ABOVE)
    assert texto.quad_dimensions == (3, 7)


def test_geometry_uses_at_most_28_bits():
    texto = RenderFaceTexto(31, 31, 31, 31, 31, Direction.BACK, 0xFFFF)
    assert texto.geometry < (1 << 28)
    assert texto.material == 0xFFFF


def test_direction_in_low_bits():
    assert RenderFaceTexto(0, 0, 0, 0, 0, Direction.BACK).geometry == int(Direction.BACK)


def test_changing_one_field_keeps_others():
    texto = RenderFaceTexto(4, 5, 6, 7, 8, Direction.RIGHT, 9)
    texto.direction = Direction.BELOW
    texto.width = 12
    assert texto.top_left_vertex == (4, 5, 6)
    assert texto.height == 8
    assert texto.width == 12
    assert texto.texture == 9


def test_equality_by_packed_words():
    a = RenderFaceTexto(1, 2, 3, 4, 5, Direction.ABOVE, 6)
    b = RenderFaceTexto(1, 2, 3, 4, 5, Direction.ABOVE, 6)
    assert a == b
    b.texture = 7
    assert a != b


@pytest.mark.parametrize(
    "kwargs",
    [
        {"x": 256},
        {"y": -1},
        {"width": 256},
        {"height": -1},
        {"texture": 1 << 16},
    ],
)
def test_out_of_range_fields_rejected(kwargs):
    args = {"x": 0, "y": 0, "z": 0, "width": 0, "height": 0, "direction": Direction.ABOVE, "texture": 0}
    args.update(kwargs)
    with pytest.raises(ValueError):
        RenderFaceTexto(**args)