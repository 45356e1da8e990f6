"""
Cube Mesh Builders
==================
Translate a PatternGrid into MeshBuffers.

Why is this file needed?
------------------------
1. Placement: It maps grid cells to world space. Cell (x, y) is centered at
   ((x - W/2) * pitch, cube_height / 2, (y - H/2) * pitch), so every cube
   stands on Y = 0.
2. Strategies: It provides the three ways of turning cells into geometry
   (culled single buffer, independent cubes, merged cubes) and the base plate.

Cube vertices are never shared between faces: every face owns its 4 corners and
normals, so counts reflect per-face geometry.
"""
from __future__ import annotations

import logging
from typing import Iterable, TYPE_CHECKING

import numpy as np

from dotartmesh import config
from dotartmesh.controller.culling import exposed_faces
from dotartmesh.exceptions import MeshGenerationError
from dotartmesh.model.geometry_primitives import (
    Box, FaceDirection, FACE_CORNER_SIGNS, FACE_NORMALS, QUAD_TRIANGLES, corner_index,
)
from dotartmesh.model.mesh_data import MeshBuffer

if TYPE_CHECKING:
    import numpy.typing as npt
    from dotartmesh.model.parameters import ParameterSet
    from dotartmesh.model.pattern import PatternGrid

logger = logging.getLogger(__name__)


def cell_center(grid: PatternGrid, params: ParameterSet, x: int, y: int) -> tuple[float, float, float]:
    """World space center of the cube standing on cell (x, y)."""
    pitch = params.pitch
    return (
        (x - grid.width / 2) * pitch,
        params.cube_height / 2,
        (y - grid.height / 2) * pitch,
    )


def cell_box(grid: PatternGrid, params: ParameterSet, x: int, y: int) -> Box:
    half = params.cube_size / 2
    return Box(center=cell_center(grid, params, x, y), half_extents=(half, params.cube_height / 2, half))


def chamfer_scale(params: ParameterSet) -> float:
    """
    Uniform shrink applied to chamfered cubes.

    This only approximates a bevel: offsets from the cube center are scaled by
    1 - min(1, chamfer / size) * 0.1.
    """
    if not params.chamfer_edges:
        return 1.0
    factor = min(1.0, params.chamfer_size / params.cube_size)
    return 1.0 - factor * config.CHAMFER_SHRINK_WEIGHT


class _QuadCollector:
    """Accumulates quads and turns them into a single MeshBuffer."""

    def __init__(self) -> None:
        self.positions: list[npt.NDArray[np.float64]] = []
        self.normals: list[npt.NDArray[np.float64]] = []
        self.indices: list[npt.NDArray[np.int64]] = []
        self.offset = 0

    def add_face(self, box: Box, face: FaceDirection, scale: float = 1.0) -> None:
        self.positions.append(box.face_corners(face, scale))
        self.normals.append(np.tile(np.array(FACE_NORMALS[face], dtype=np.float64), (4, 1)))
        self.indices.append(QUAD_TRIANGLES + self.offset)
        self.offset += 4

    def build(self) -> MeshBuffer:
        if not self.positions:
            return MeshBuffer.empty()
        return MeshBuffer(
            positions=np.vstack(self.positions),
            normals=np.vstack(self.normals),
            indices=np.vstack(self.indices),
        )


def build_optimized_mesh(grid: PatternGrid, params: ParameterSet) -> MeshBuffer:
    """
    Build one buffer containing only the exposed faces of every occupied cell.

    Faces between two occupied neighbours are skipped. An empty grid yields an
    empty buffer.
    """
    collector = _QuadCollector()
    for x, y in grid.occupied_cells():
        box = cell_box(grid, params, x, y)
        for face in exposed_faces(grid, x, y).directions():
            collector.add_face(box, face)

    buffer = collector.build()
    logger.debug(f"Optimized mesh: {buffer.vertex_count} vertices, {buffer.triangle_count} triangles.")
    return buffer


def build_cube(box: Box, scale: float = 1.0) -> MeshBuffer:
    """A complete cube: 6 faces, 24 vertices, 12 triangles."""
    collector = _QuadCollector()
    for face in FaceDirection:
        collector.add_face(box, face, scale)
    return collector.build()


def build_cube_meshes(grid: PatternGrid, params: ParameterSet) -> list[MeshBuffer]:
    """
    Build one independent, unculled cube per occupied cell.

    Internal faces between neighbouring cubes are kept. The chamfer shrink is
    applied when `chamfer_edges` is set.
    """
    scale = chamfer_scale(params)
    cubes = [build_cube(cell_box(grid, params, x, y), scale) for x, y in grid.occupied_cells()]
    logger.debug(f"Built {len(cubes)} individual cubes (scale={scale:.4f}).")
    return cubes


def merge_buffers(buffers: Iterable[MeshBuffer]) -> MeshBuffer:
    """
    Concatenate buffers into one, shifting each buffer's indices by the number
    of vertices that precede it. No faces are removed.

    Raises:
        MeshGenerationError: If there is nothing to merge.
    """
    buffers = list(buffers)
    if not buffers:
        raise MeshGenerationError("No geometries found to merge")

    positions_list: list[npt.NDArray[np.float64]] = []
    normals_list: list[npt.NDArray[np.float64]] = []
    indices_list: list[npt.NDArray[np.int64]] = []
    offset = 0

    for buffer in buffers:
        positions_list.append(buffer.positions)
        normals_list.append(buffer.normals)
        indices_list.append(buffer.triangles() + offset)
        offset += buffer.vertex_count

    return MeshBuffer(
        positions=np.vstack(positions_list),
        normals=np.vstack(normals_list),
        indices=np.vstack(indices_list),
    )


def base_footprint(grid: PatternGrid, params: ParameterSet) -> tuple[float, float]:
    """
    (width, depth) of the base plate: the pattern extent plus one cube size
    of padding.
    """
    width = grid.width * params.pitch - params.spacing + params.cube_size
    depth = grid.height * params.pitch - params.spacing + params.cube_size
    return width, depth


def build_base_platform(grid: PatternGrid, params: ParameterSet) -> MeshBuffer:
    """
    Build the rectangular slab under the pattern.

    The slab is centered on the origin in X/Z with its top at Y = 0 and its
    bottom at Y = -base_thickness. The 8 corners are shared by the faces
    (12 triangles), and each corner normal points diagonally outward.

    Raises:
        MeshGenerationError: If the footprint is not positive, which happens
                             for an empty grid with spacing above cube size.
    """
    width, depth = base_footprint(grid, params)
    if width <= 0 or depth <= 0:
        raise MeshGenerationError(f"Base footprint must be positive, got {width:g} x {depth:g} mm")
    thickness = params.base_thickness
    box = Box(center=(0.0, -thickness / 2, 0.0), half_extents=(width / 2, thickness / 2, depth / 2))

    positions = box.corners()
    normals = np.empty((8, 3), dtype=np.float64)
    for i in range(8):
        direction = np.array([1 if i & 1 else -1, 1 if i & 2 else -1, 1 if i & 4 else -1], dtype=np.float64)
        normals[i] = direction / np.linalg.norm(direction)

    indices = []
    for face in FaceDirection:
        quad = np.array([corner_index(signs) for signs in FACE_CORNER_SIGNS[face]], dtype=np.int64)
        indices.append(quad[QUAD_TRIANGLES])

    logger.debug(f"Base platform {width:.2f} x {depth:.2f} x {thickness:.2f} mm.")
    return MeshBuffer(positions=positions, normals=normals, indices=np.vstack(indices))
