import math
import struct

import numpy as np
import pytest

from satisfactorio.camera import (
    Camera,
    CameraUniform,
    look_at_rh,
    perspective,
)


def make_camera(**overrides):
    params = dict(
        eye=(1.0, 2.0, 3.0),
        target=(0.0, 0.0, 0.0),
        up=(0.0, 1.0, 0.0),
        aspect=16 / 9,
        fovy=45.0,
        znear=0.1,
        zfar=100.0,
    )
    params.update(overrides)
    return Camera(**params)


def test_forward_at_rest_points_along_x():
    assert np.allclose(make_camera().forward(), [1.0, 0.0, 0.0])


@pytest.mark.parametrize("yaw,pitch", [(0.3, 0.2), (-2.0, 1.2), (5.0, -0.7), (math.pi, 0.0)])
def test_forward_is_unit_length(yaw, pitch):
    camera = make_camera(yaw=yaw, pitch=pitch)
    assert np.linalg.norm(camera.forward()) == pytest.approx(1.0)


@pytest.mark.parametrize("yaw,pitch", [(0.3, 0.2), (-2.0, 1.2), (5.0, -0.7)])
def test_right_is_horizontal_and_perpendicular(yaw, pitch):
    camera = make_camera(yaw=yaw, pitch=pitch)
    right = camera.right()
    assert np.dot(right, camera.forward()) == pytest.approx(0.0, abs=1e-12)
    assert right[1] == pytest.approx(0.0, abs=1e-12)
    assert np.linalg.norm(right) == pytest.approx(1.0)


def test_look_target_is_eye_plus_forward():
    camera = make_camera(yaw=0.8, pitch=-0.4)
    assert np.allclose(camera.look_target(), np.array(camera.eye) + camera.forward())


def test_look_at_maps_eye_to_origin():
    eye = (4.0, -1.0, 2.5)
    m = look_at_rh(eye, (0.0, 3.0, -7.0), (0.0, 1.0, 0.0))
    assert np.allclose(m @ np.array([*eye, 1.0]), [0.0, 0.0, 0.0, 1.0])


def test_look_at_puts_target_on_negative_z():
    eye = np.array([4.0, -1.0, 2.5])
    target = np.array([0.0, 3.0, -7.0])
    m = look_at_rh(eye, target, (0.0, 1.0, 0.0))
    distance = np.linalg.norm(target - eye)
    assert np.allclose((m @ np.append(target, 1.0))[:3], [0.0, 0.0, -distance])


def test_look_at_rotation_is_orthonormal():
    m = look_at_rh((1.0, 2.0, 3.0), (-5.0, 0.5, 9.0), (0.0, 1.0, 0.0))
    rotation = m[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.eye(3))


def test_look_at_rejects_coincident_points():
    with pytest.raises(ValueError):
        look_at_rh((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 0.0))


def test_perspective_maps_near_and_far_planes():
    znear, zfar = 0.5, 50.0
    proj = perspective(60.0, 1.5, znear, zfar)
    near_clip = proj @ np.array([0.0, 0.0, -znear, 1.0])
    far_clip = proj @ np.array([0.0, 0.0, -zfar, 1.0])
    assert near_clip[2] / near_clip[3] == pytest.approx(-1.0)
    assert far_clip[2] / far_clip[3] == pytest.approx(1.0)


@pytest.mark.parametrize(
    "fovy,aspect,znear,zfar",
    [(0.0, 1.0, 0.1, 10.0), (180.0, 1.0, 0.1, 10.0), (45.0, 0.0, 0.1, 10.0),
     (45.0, 1.0, 0.0, 10.0), (45.0, 1.0, 1.0, 1.0)],
)
def test_perspective_rejects_bad_parameters(fovy, aspect, znear, zfar):
    with pytest.raises(ValueError):
        perspective(fovy, aspect, znear, zfar)


def test_view_projection_centres_look_target():
    camera = make_camera(yaw=1.1, pitch=0.3)
    clip = camera.view_projection_matrix() @ np.append(camera.look_target(), 1.0)
    assert clip[0] / clip[3] == pytest.approx(0.0, abs=1e-9)
    assert clip[1] / clip[3] == pytest.approx(0.0, abs=1e-9)


def test_uniform_starts_as_identity():
    assert np.array_equal(CameraUniform().view_proj, np.eye(4))


def test_uniform_update_uses_camera_matrix():
    camera = make_camera(yaw=0.4)
    uniform = CameraUniform()
    uniform.update_view_proj(camera)
    assert np.allclose(uniform.view_proj, camera.view_projection_matrix())


def test_uniform_bytes_are_column_major_f32():
    uniform = CameraUniform()
    uniform.update_view_proj(make_camera(yaw=-0.9, pitch=0.2))
    data = uniform.to_bytes()
    assert len(data) == 64
    values = np.array(struct.unpack("<16f", data)).reshape(4, 4).T
    assert np.allclose(values, uniform.view_proj, rtol=1e-6, atol=1e-6)