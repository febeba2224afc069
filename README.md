# satisfactorio

The simulation core of a voxel world. It keeps blocks in chunks, turns chunks into
triangle vertices, moves a first-person camera and player, casts rays into the world
and decides which chunk meshes the camera can see.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is in the package

- `satisfactorio.block` – `BlockInstance`, a block identified by a 32-bit unsigned id;
  `BlockInstance.air()` is id 0 and `is_air()` tests for it.
- `satisfactorio.chunk` – `Chunk`, a 32×32×32 cube of block ids at chunk coordinates
  `(x, y, z)`. Blocks are stored flat in x-fastest order (index `x + y*32 + z*32*32`);
  `get_block_from_xyz`, `get_block_from_i` and the matching setters raise `IndexError`
  outside the chunk. `Chunk.generate(cx, cy, cz)` builds a flat layer of solid blocks
  (id 1) at local `y = 0`. The `grid` property is a numpy view indexed `[z, y, x]`.
- `satisfactorio.world` – `World`, a sparse map of chunks keyed by `(cx, cy, cz)`.
  `get_block_from_xyz` reads world coordinates and returns air where no chunk is
  loaded; `get_local_block_from_xyz` reads chunk-local coordinates and reaches into
  neighbouring chunks when they fall outside the chunk. `update(player, world_mesh)`
  generates missing chunks in the player's render range and marks the meshes of
  existing ones dirty; `player_rendered_chunks(player)` lists the loaded chunks in
  that range.
- `satisfactorio.padded_chunk` – `PaddedChunk`, a chunk with a one-block border copied
  from its six face neighbours (`PaddedChunk.from_chunk(chunk, world)`, the
  `fill_neg_x` … `fill_pos_z` methods and `fill_edges`).
- `satisfactorio.chunk_mesh` – `ChunkMesh.make_greedy(chunk, world, cx, cy, cz)` merges
  equal faces into rectangles and stores six `Vertex` values (two triangles) per
  rectangle in `vertices`. `vertex_bytes()` packs them for upload, and `buffer` is a
  `BufferData` holding those bytes and the vertex count. A mesh is dirty until built;
  `set_dirty()` and `is_dirty()` manage the flag.
- `satisfactorio.world_mesh` – `WorldMesh.update(world, player)` meshes the loaded
  chunks in the player's render range and drops meshes of chunks outside it. An
  existing mesh that is marked dirty is kept as it is; every other chunk is meshed
  afresh.
- `satisfactorio.vertex` – `Vertex(position, color=(0.5, 0.5, 0.5), uv=0)`;
  `to_bytes()` packs three f32 position, three f32 color and one u32, little-endian
  (28 bytes).
- `satisfactorio.camera` – `Camera`, oriented by `yaw` and `pitch` in radians, with
  `forward()`, `right()`, `look_target()` and `view_projection_matrix()`;
  `CameraUniform` holds the 4×4 view-projection matrix (`update_view_proj(camera)`,
  `to_bytes()` as sixteen little-endian f32 in column order). `perspective(fovy,
  aspect, znear, zfar)` takes `fovy` in degrees; `look_at_rh(eye, target, up)` builds
  a right-handed view matrix. Matrices are numpy arrays indexed `[row, col]`.
- `satisfactorio.controller` – `CameraController(speed, mouse_sensitivity)`.
  `handle_key(code, is_pressed)` accepts a `KeyCode` or its name (`"KeyW"`, `"KeyZ"`,
  `"KeyS"`, `"KeyA"`, `"KeyQ"`, `"KeyD"`, `"Space"`, `"ShiftLeft"`, so both WASD and
  ZQSD move) and returns whether the key is used. `process_mouse(dx, dy)` accumulates
  motion; `update_camera(camera, player)` moves the camera to the player, applies the
  rotation and clamps the pitch just short of ±90°.
- `satisfactorio.player` – `Player`, with position, velocity and render distances
  (7 chunks horizontally, 1 vertically by default). `update(dt, camera,
  camera_controller, camera_uniform)` moves the player along the pressed directions
  at `speed * dt`, then syncs the camera and the uniform. `teleport(x, y, z)`,
  `set_render_distance(horizontal, vertical)`, `rendered_chunk_range()`,
  `rendered_chunk_number()` and `rendered_chunk_data()` are also provided.
- `satisfactorio.raycast` – `raycast(camera, world, max_distance)` walks the grid along
  the camera's forward vector and returns a `BlockHit` (`x`, `y`, `z` and the
  `BlockFace` entered) or `None` past `max_distance`.
- `satisfactorio.culling` – `visible_chunks(world_mesh, camera, view_proj)` returns the
  `(key, mesh)` pairs whose vertex buffer is set and whose chunk box is neither
  behind the camera nor outside the frustum. The building blocks are
  `is_chunk_behind_camera`, `extract_frustum_planes` (left, right, bottom, top, near,
  far as normalized `Plane` values) and `is_chunk_in_frustum`. `FrameData` holds
  per-frame timing counters.
- `satisfactorio.plane` – `Plane(normal, d)` with `normalize()` and `distance(p)`.
- `satisfactorio.direction` – `Direction`, the six voxel faces as 3-bit values.
- `satisfactorio.face_mask` – `FaceMask`, a 64-bit word with a visited flag, a block
  id and a face (`from_parts`, `to_tuple`, and properties for each field).
- `satisfactorio.texto` – `RenderFaceTexto`, a face packed into a `geometry` and a
  `material` word (top-left vertex, width, height, direction, texture id).
- `satisfactorio.game_state` – `GameState`, bundling world, meshes, camera,
  controller, player and camera uniform. `init()` generates every chunk in the
  player's render range and meshes them; `update(dt)` advances the player.

## Example

```python
from satisfactorio.world import World
from satisfactorio.world_mesh import WorldMesh
from satisfactorio.camera import Camera
from satisfactorio.controller import CameraController
from satisfactorio.player import Player
from satisfactorio.game_state import GameState
from satisfactorio.raycast import raycast
from satisfactorio.culling import visible_chunks

state = GameState(
    world=World(),
    world_mesh=WorldMesh(),
    camera=Camera(eye=(0.0, 5.0, 0.0), target=(0.0, 0.0, 0.0), up=(0.0, 1.0, 0.0),
                  aspect=16 / 9, fovy=70.0, znear=0.1, zfar=1000.0),
    camera_controller=CameraController(speed=10.0, mouse_sensitivity=0.002),
    player=Player(),
)
state.init()  # generates the chunks around the player and meshes them

state.camera_controller.handle_key("KeyW", True)
state.update(dt=1 / 60)

hit = raycast(state.camera, state.world, 8.0)
if hit is not None:
    print(hit.x, hit.y, hit.z, hit.face)

for key, mesh in visible_chunks(state.world_mesh, state.camera,
                                state.camera_uniform.view_proj):
    print(key, len(mesh.vertices))
```

## What the package does not do

There is no window, no input handling from a real keyboard or mouse, no GPU drawing,
no texture loading and no on-screen text. The package has no command to run. It
produces vertex bytes, matrices and visibility decisions; drawing them is left to
whatever renderer uploads `ChunkMesh.vertex_bytes()` and `CameraUniform.to_bytes()`.
Worlds are not saved to or loaded from disk.