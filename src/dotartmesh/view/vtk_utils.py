"""
VTK and Geometry Utilities
Helper functions for converting generated meshes into PyVista data sets.
"""
import numpy as np
import numpy.typing as npt
import pyvista as pv

import logging

from dotartmesh.model.mesh_data import CompositeMesh, MeshBuffer

logger = logging.getLogger(__name__)

PATTERN_COLOR = "#888888"
BASE_COLOR = "#cccccc"


class VtkUtils:
    @staticmethod
    def triangles_to_cells(triangles: npt.NDArray[np.int64]) -> npt.NDArray[np.int_]:
        """
        Convert (M, 3) triangle indices into the flat VTK cell array
        [3, i0, j0, k0, 3, i1, j1, k1, ...].
        """
        triangles = np.asarray(triangles, dtype=np.int_).reshape(-1, 3)
        counts = np.full((triangles.shape[0], 1), 3, dtype=np.int_)
        return np.hstack([counts, triangles]).ravel()

    @staticmethod
    def buffer_to_polydata(buffer: MeshBuffer) -> pv.PolyData:
        """
        Convert a MeshBuffer into a triangulated PolyData.
        The per-vertex normals are attached as the 'Normals' point array.
        """
        if buffer.is_empty:
            return pv.PolyData()

        pd = pv.PolyData(buffer.positions, VtkUtils.triangles_to_cells(buffer.triangles()))
        pd.point_data["Normals"] = buffer.normals
        return pd

    @staticmethod
    def composite_to_multiblock(mesh: CompositeMesh) -> pv.MultiBlock:
        """
        One block per sub-mesh: 'pattern_<i>' for the pattern bodies and 'base'
        for the base plate. Empty buffers are skipped.
        """
        blocks = pv.MultiBlock()
        for i, buffer in enumerate(mesh.pattern):
            if buffer.is_empty:
                continue
            blocks.append(VtkUtils.buffer_to_polydata(buffer), f"pattern_{i}")
        if mesh.base is not None:
            blocks.append(VtkUtils.buffer_to_polydata(mesh.base), "base")
        return blocks

    @staticmethod
    def show(mesh: CompositeMesh) -> None:
        """Open an interactive window with the mesh."""
        plotter = pv.Plotter()
        for buffer in mesh.pattern:
            if not buffer.is_empty:
                plotter.add_mesh(VtkUtils.buffer_to_polydata(buffer), color=PATTERN_COLOR, show_edges=False)
        if mesh.base is not None:
            plotter.add_mesh(VtkUtils.buffer_to_polydata(mesh.base), color=BASE_COLOR)
        logger.info("Opening preview window.")
        plotter.show()
