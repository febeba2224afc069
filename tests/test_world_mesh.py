from satisfactorio.block import BlockInstance
from satisfactorio.chunk import Chunk
from satisfactorio.player import Player
from satisfactorio.world import World
from satisfactorio.world_mesh import WorldMesh


def _player():
    player = Player()
    player.set_render_distance(1, 1)
    return player


def _world_with(*chunks):
    world = World()
    for chunk in chunks:
        world.set_chunk(chunk.x, chunk.y, chunk.z, chunk)
    return world


def test_empty_world_gives_no_meshes():
    world_mesh = WorldMesh()
    world_mesh.update(World(), _player())
    assert world_mesh.meshes == {}


def test_rendered_chunk_is_meshed_and_clean():
    world = _world_with(Chunk.generate(0, 0, 0))
    world_mesh = WorldMesh()
    world_mesh.update(world, _player())
    assert set(world_mesh.meshes) == {(0, 0, 0)}
    mesh = world_mesh.meshes[(0, 0, 0)]
    assert not mesh.is_dirty()
    assert mesh.buffer.vertex_number == len(mesh.vertices)
    assert len(mesh.vertices) > 0


def test_chunks_out_of_range_are_dropped():
    world = _world_with(Chunk.generate(0, 0, 0), Chunk.generate(5, 0, 0))
    world_mesh = WorldMesh()
    world_mesh.update(world, _player())
    assert (5, 0, 0) not in world_mesh.meshes
    assert (0, 0, 0) in world_mesh.meshes


def test_single_block_chunk_has_six_faces():
    chunk = Chunk(0, 0, 0)
    chunk.set_block_from_xyz(3, 4, 5, BlockInstance(2))
    world_mesh = WorldMesh()
    world_mesh.update(_world_with(chunk), _player())
    assert len(world_mesh.meshes[(0, 0, 0)].vertices) == 36


def test_dirty_mesh_is_carried_over():
    world = _world_with(Chunk.generate(0, 0, 0))
    world_mesh = WorldMesh()
    player = _player()
    world_mesh.update(world, player)
    mesh = world_mesh.meshes[(0, 0, 0)]
    mesh.set_dirty()
    world_mesh.update(world, player)
    assert world_mesh.meshes[(0, 0, 0)] is mesh


def test_clean_mesh_is_rebuilt():
    world = _world_with(Chunk.generate(0, 0, 0))
    world_mesh = WorldMesh()
    player = _player()
    world_mesh.update(world, player)
    first = world_mesh.meshes[(0, 0, 0)]
    world_mesh.update(world, player)
    second = world_mesh.meshes[(0, 0, 0)]
    assert second is not first
    assert second.vertex_bytes() == first.vertex_bytes()


def test_world_update_marks_existing_mesh_dirty():
    world = _world_with(Chunk.generate(0, 0, 0))
    world_mesh = WorldMesh()
    player = _player()
    world_mesh.update(world, player)
    world.update(player, world_mesh)
    assert world_mesh.meshes[(0, 0, 0)].is_dirty()