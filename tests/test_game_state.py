from itertools import product

import numpy as np
import pytest

from satisfactorio.camera import Camera
from satisfactorio.controller import CameraController
from satisfactorio.game_state import GameState
from satisfactorio.player import Player
from satisfactorio.world import World
from satisfactorio.world_mesh import WorldMesh


def _state(horizontal=1, vertical=1):
    player = Player()
    player.set_render_distance(horizontal, vertical)
    camera = Camera(
        eye=(0.0, 0.0, 0.0),
        target=(1.0, 0.0, 0.0),
        up=(0.0, 1.0, 0.0),
        aspect=1.0,
        fovy=60.0,
        znear=0.1,
        zfar=100.0,
    )
    return GameState(World(), WorldMesh(), camera, CameraController(10.0, 0.01), player)


def test_init_generates_and_meshes_range():
    state = _state(3, 1)
    state.init()
    min_x, max_x, min_y, max_y, min_z, max_z = state.player.rendered_chunk_range()
    expected = set(
        product(range(min_x, max_x + 1), range(min_y, max_y + 1), range(min_z, max_z + 1))
    )
    assert set(state.world) == expected
    assert set(state.world_mesh.meshes) == expected


def test_init_single_chunk_mesh_is_clean():
    state = _state()
    state.init()
    mesh = state.world_mesh.meshes[(0, 0, 0)]
    assert not mesh.is_dirty()
    assert mesh.buffer.vertex_number == len(mesh.vertices)


def test_update_moves_player_forward():
    state = _state()
    state.camera_controller.is_forward_pressed = True
    state.update(0.5)
    assert state.player.pos == pytest.approx((5.0, 0.0, 0.0))
    assert state.camera.eye == state.player.pos


def test_update_without_keys_keeps_position():
    state = _state()
    state.player.teleport(1.0, 2.0, 3.0)
    state.update(1.0)
    assert state.player.pos == (1.0, 2.0, 3.0)
    assert state.player.vel == (0.0, 0.0, 0.0)


def test_update_refreshes_camera_uniform():
    state = _state()
    state.camera_controller.is_up_pressed = True
    state.update(0.1)
    np.testing.assert_allclose(
        state.camera_uniform.view_proj, state.camera.view_projection_matrix()
    )


def test_update_applies_mouse_motion():
    state = _state()
    state.camera_controller.process_mouse(10.0, 0.0)
    state.update(0.1)
    assert state.camera.yaw == pytest.approx(10.0 * state.camera_controller.mouse_sensitivity)
    assert state.camera_controller.mouse_delta_x == 0.0