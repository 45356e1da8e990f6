"""
Mesh Generation Logic
=====================
This module is the public entry point that turns a PatternGrid and a
ParameterSet into a CompositeMesh.

Why is this file needed?
------------------------
1. Strategy: It picks exactly one way of building the pattern body
   (optimized > merged > individual cubes) and attaches the base plate.
2. Errors: It guarantees all-or-nothing results. Any failure below is
   reported as a single MeshGenerationError, never as a partial mesh.

The assembler keeps no state between calls, so independent calls may run on
separate threads.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dotartmesh.controller.builders import (
    build_base_platform, build_cube_meshes, build_optimized_mesh, merge_buffers,
)
from dotartmesh.exceptions import MeshGenerationError
from dotartmesh.model.mesh_data import CompositeMesh

if TYPE_CHECKING:
    from dotartmesh.model.parameters import ParameterSet
    from dotartmesh.model.pattern import PatternGrid

# Get logger
logger = logging.getLogger(__name__)


class MeshAssembler:
    def assemble(self, grid: PatternGrid, params: ParameterSet) -> CompositeMesh:
        """
        Generate the complete mesh for a pattern.

        Raises:
            ParameterValidationError: If the parameters are out of range.
            MeshGenerationError: If any building step fails, e.g. merging an
                                 empty pattern.
        """
        params.validate()

        try:
            if params.optimize_mesh:
                logger.info(f"Generating optimized mesh for {grid.width}x{grid.height} pattern.")
                pattern = [build_optimized_mesh(grid, params)]
            elif params.merge_adjacent_faces:
                logger.info(f"Generating merged cube mesh for {grid.width}x{grid.height} pattern.")
                pattern = [merge_buffers(build_cube_meshes(grid, params))]
            else:
                logger.info(f"Generating individual cubes for {grid.width}x{grid.height} pattern.")
                pattern = build_cube_meshes(grid, params)

            base = build_base_platform(grid, params) if params.generate_base else None

            for buffer in pattern:
                buffer.validate()
            if base is not None:
                base.validate()

        except MeshGenerationError as e:
            logger.error(f"Mesh generation failed: {e}")
            raise MeshGenerationError(f"Failed to generate mesh: {e}") from e
        except Exception as e:
            logger.exception("Mesh generation failed")
            raise MeshGenerationError(f"Failed to generate mesh: {e}") from e

        mesh = CompositeMesh(pattern=pattern, base=base)
        logger.debug(f"Generated {len(mesh.sub_meshes)} sub-meshes.")
        return mesh

    def assemble_preview(self, grid: PatternGrid, params: ParameterSet) -> CompositeMesh:
        """Reduced-complexity mesh for previews: always optimized and merged."""
        return self.assemble(grid, params.replace(optimize_mesh=True, merge_adjacent_faces=True))


def assemble(grid: PatternGrid, params: ParameterSet) -> CompositeMesh:
    """Convenience wrapper around MeshAssembler().assemble()."""
    return MeshAssembler().assemble(grid, params)
