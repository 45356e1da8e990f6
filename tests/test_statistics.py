import numpy as np

from dotartmesh.controller.mesher import assemble
from dotartmesh.controller.statistics import MeshStats, calculate_mesh_stats, estimate_file_size
from dotartmesh.model.mesh_data import CompositeMesh, MeshBuffer


def test_single_cube_stats(single, params):
    stats = calculate_mesh_stats(assemble(single, params))
    assert stats == MeshStats(vertex_count=24, face_count=12, cube_count=1, file_size_estimate=24 * 30 + 12 * 20)


def test_file_size_formula_on_known_buffer():
    buffer = MeshBuffer(
        positions=np.zeros((5, 3)),
        normals=np.zeros((5, 3)),
        indices=np.array([[0, 1, 2], [2, 3, 4]]),
    )
    stats = calculate_mesh_stats(CompositeMesh(pattern=[buffer]))
    assert stats.vertex_count == 5
    assert stats.face_count == 2
    assert stats.file_size_estimate == 5 * 30 + 2 * 20
    assert estimate_file_size(5, 2) == 190


def test_non_indexed_faces_counted_from_vertices():
    soup = MeshBuffer(positions=np.zeros((9, 3)), normals=np.zeros((9, 3)), indices=None)
    stats = calculate_mesh_stats(CompositeMesh(pattern=[soup]))
    assert stats.face_count == 3


def test_cube_count_is_object_count(letter_t, params):
    merged = assemble(letter_t, params.replace(optimize_mesh=False, merge_adjacent_faces=True, generate_base=True))
    separate = assemble(letter_t, params.replace(optimize_mesh=False, generate_base=True))

    assert calculate_mesh_stats(merged).cube_count == 2
    assert calculate_mesh_stats(separate).cube_count == letter_t.occupied_count + 1


def test_sums_over_all_sub_meshes(pair, params):
    stats = calculate_mesh_stats(assemble(pair, params.replace(generate_base=True)))
    assert stats.vertex_count == 40 + 8
    assert stats.face_count == 20 + 12
    assert stats.file_size_estimate == stats.vertex_count * 30 + stats.face_count * 20
