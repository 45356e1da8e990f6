from __future__ import annotations

import logging

import numpy as np
import pytest

from dotartmesh.model.mesh_data import MeshBuffer
from dotartmesh.model.parameters import ParameterSet
from dotartmesh.model.pattern import PatternGrid


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI configures handlers on the package logger; drop them between tests."""
    yield
    logger = logging.getLogger("dotartmesh")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def params() -> ParameterSet:
    """Library defaults without the base plate."""
    return ParameterSet(generate_base=False)


@pytest.fixture
def single() -> PatternGrid:
    return PatternGrid.from_rows(["#"])


@pytest.fixture
def pair() -> PatternGrid:
    return PatternGrid.from_rows(["##"])


@pytest.fixture
def empty_grid() -> PatternGrid:
    return PatternGrid.empty(3, 2)


@pytest.fixture
def letter_t() -> PatternGrid:
    return PatternGrid.from_rows([
        "#####",
        "..#..",
        "..#..",
    ])


def assert_outward_winding(buffer: MeshBuffer) -> None:
    """Every triangle's edge cross product must point along the stored normals."""
    tris = buffer.triangles()
    v0 = buffer.positions[tris[:, 0]]
    v1 = buffer.positions[tris[:, 1]]
    v2 = buffer.positions[tris[:, 2]]
    face_normals = np.cross(v1 - v0, v2 - v0)
    for corner in range(3):
        vertex_normals = buffer.normals[tris[:, corner]]
        dots = np.einsum("ij,ij->i", face_normals, vertex_normals)
        assert np.all(dots > 0.0)
