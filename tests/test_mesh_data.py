import numpy as np
import numpy.testing as npt
import pytest

from dotartmesh.model.geometry_primitives import Box, FaceDirection, corner_index
from dotartmesh.model.mesh_data import CompositeMesh, MeshBuffer


def _triangle() -> MeshBuffer:
    return MeshBuffer(
        positions=[[0, 0, 0], [1, 0, 0], [0, 1, 0]],
        normals=[[0, 0, 1]] * 3,
        indices=[[0, 1, 2]],
    )


def test_buffer_shapes_are_normalised():
    buffer = _triangle()
    assert buffer.positions.shape == (3, 3)
    assert buffer.positions.dtype == np.float64
    assert buffer.indices.shape == (1, 3)
    assert buffer.indices.dtype == np.int64


def test_empty_buffer():
    buffer = MeshBuffer.empty()
    assert buffer.is_empty
    assert buffer.triangle_count == 0
    assert buffer.bounds() is None
    buffer.validate()


def test_validate_rejects_out_of_range_index():
    buffer = _triangle()
    buffer.indices = np.array([[0, 1, 3]])
    with pytest.raises(ValueError, match="out of range"):
        buffer.validate()


def test_validate_rejects_missing_normals():
    buffer = MeshBuffer(positions=np.zeros((3, 3)), normals=np.zeros((2, 3)), indices=[[0, 1, 2]])
    with pytest.raises(ValueError, match="one normal per vertex"):
        buffer.validate()


def test_translated_is_a_copy():
    buffer = _triangle()
    moved = buffer.translated((1.0, 2.0, 3.0))
    npt.assert_allclose(moved.positions[0], [1.0, 2.0, 3.0])
    npt.assert_allclose(buffer.positions[0], [0.0, 0.0, 0.0])


def test_composite_bounds_cover_all_sub_meshes():
    mesh = CompositeMesh(pattern=[_triangle()], base=_triangle().translated((0.0, -5.0, 0.0)))
    lo, hi = mesh.bounds()
    npt.assert_allclose(lo, [0.0, -5.0, 0.0])
    npt.assert_allclose(hi, [1.0, 1.0, 0.0])
    assert len(list(mesh)) == 2


def test_box_face_corners():
    box = Box(center=(1.0, 2.0, 3.0), half_extents=(0.5, 1.0, 1.5))
    top = box.face_corners(FaceDirection.TOP)
    npt.assert_allclose(top[:, 1], 3.0)
    assert box.volume == pytest.approx(1.0 * 2.0 * 3.0)


def test_box_corners_follow_corner_index():
    box = Box(center=(0.0, 0.0, 0.0), half_extents=(1.0, 2.0, 3.0))
    corners = box.corners()
    assert corner_index((1, -1, 1)) == 5
    npt.assert_allclose(corners[5], [1.0, -2.0, 3.0])
