import math

import pytest

from satisfactorio.plane import Plane


def test_normalize_gives_unit_normal():
    plane = Plane((3.0, -4.0, 12.0), 7.0).normalize()
    assert math.isclose(math.hypot(*plane.normal), 1.0)


def test_normalize_simple_axis_plane():
    plane = Plane((0.0, 0.0, 2.0), 4.0).normalize()
    assert plane.normal == (0.0, 0.0, 1.0)
    assert plane.d == 2.0


def test_normalize_scales_distance_consistently():
    original = Plane((1.0, 2.0, 2.0), -5.0)
    length = math.hypot(*original.normal)
    point = (4.0, -1.0, 6.0)
    assert math.isclose(original.normalize().distance(point), original.distance(point) / length)


def test_distance_sign_follows_normal():
    plane = Plane((1.0, 0.0, 0.0), -1.0)
    assert plane.distance((3.0, 0.0, 0.0)) == 2.0
    assert plane.distance((1.0, 5.0, 5.0)) == 0.0
    assert plane.distance((0.0, 0.0, 0.0)) < 0.0


def test_zero_normal_cannot_be_normalized():
    with pytest.raises(ValueError):
        Plane((0.0, 0.0, 0.0), 1.0).normalize()


def test_normal_needs_three_components():
    with pytest.raises(ValueError):
        Plane((1.0, 0.0), 0.0)


def test_components_are_stored_as_floats():
    plane = Plane([1, 2, 3], 4)
    assert plane.normal == (1.0, 2.0, 3.0)
    assert isinstance(plane.d, float) and plane.d == 4.0