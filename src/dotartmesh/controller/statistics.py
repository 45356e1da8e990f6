"""
Mesh statistics for display and reporting.
"""
from __future__ import annotations

from dataclasses import dataclass

from dotartmesh import config
from dotartmesh.model.mesh_data import CompositeMesh


@dataclass(frozen=True)
class MeshStats:
    """Return object containing mesh metadata."""
    vertex_count: int
    face_count: int
    cube_count: int
    file_size_estimate: int


def estimate_file_size(vertex_count: int, face_count: int) -> int:
    """Rough size in bytes of the mesh written to a text format such as OBJ."""
    return vertex_count * config.BYTES_PER_VERTEX + face_count * config.BYTES_PER_FACE


def calculate_mesh_stats(mesh: CompositeMesh) -> MeshStats:
    """
    Sum vertex and triangle counts over all sub-meshes.

    `cube_count` is the number of sub-mesh objects carrying geometry, not the
    number of occupied cells: a merged or optimized pattern counts as one.
    """
    vertex_count = 0
    face_count = 0
    cube_count = 0

    for buffer in mesh.sub_meshes:
        if buffer.is_empty:
            continue
        cube_count += 1
        vertex_count += buffer.vertex_count
        face_count += buffer.triangle_count

    return MeshStats(
        vertex_count=vertex_count,
        face_count=face_count,
        cube_count=cube_count,
        file_size_estimate=estimate_file_size(vertex_count, face_count),
    )
