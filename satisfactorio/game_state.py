"""Everything that makes up a running game."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from itertools import product

from satisfactorio.camera import Camera, CameraUniform
from satisfactorio.chunk import Chunk
from satisfactorio.controller import CameraController
from satisfactorio.player import Player
from satisfactorio.world import World
from satisfactorio.world_mesh import WorldMesh

log = logging.getLogger(__name__)


@dataclass(eq=False)
class GameState:
    world: World
    world_mesh: WorldMesh
    camera: Camera
    camera_controller: CameraController
    player: Player
    camera_uniform: CameraUniform = field(default_factory=CameraUniform)

    def init(self) -> None:
        """Generate every chunk in the player's render range, then mesh them."""
        world_start = time.perf_counter()

        min_x, max_x, min_y, max_y, min_z, max_z = self.player.rendered_chunk_range()
        for x, y, z in product(
            range(min_x, max_x + 1), range(min_y, max_y + 1), range(min_z, max_z + 1)
        ):
            self.world.set_chunk(x, y, z, Chunk.generate(x, y, z))

        log.info("Time to make the world: %.3fms.", (time.perf_counter() - world_start) * 1000.0)

        mesh_start = time.perf_counter()
        self.world_mesh.update(self.world, self.player)
        log.info("Time to make meshes: %.3fms.", (time.perf_counter() - mesh_start) * 1000.0)

    def update(self, dt: float) -> None:
        """Advance the player by ``dt`` seconds and refresh the camera uniform."""
        self.player.update(dt, self.camera, self.camera_controller, self.camera_uniform)