from dotartmesh.controller.culling import ExposedFaces, exposed_faces
from dotartmesh.model.geometry_primitives import FaceDirection
from dotartmesh.model.pattern import PatternGrid


def test_isolated_cell_exposes_all_faces(single):
    faces = exposed_faces(single, 0, 0)
    assert faces == ExposedFaces()
    assert faces.count == 6


def test_horizontal_pair_hides_shared_side(pair):
    left_cell = exposed_faces(pair, 0, 0)
    right_cell = exposed_faces(pair, 1, 0)

    assert left_cell.left and not left_cell.right
    assert right_cell.right and not right_cell.left
    assert left_cell.count == 5
    assert right_cell.count == 5


def test_vertical_neighbours_hide_front_and_back():
    grid = PatternGrid.from_rows(["#", "#", "#"])
    middle = exposed_faces(grid, 0, 1)
    assert not middle.front
    assert not middle.back
    assert middle.left and middle.right
    assert middle.count == 4


def test_top_and_bottom_always_exposed():
    grid = PatternGrid.from_rows(["###", "###", "###"])
    center = exposed_faces(grid, 1, 1)
    assert center.top and center.bottom
    assert list(center.directions()) == [FaceDirection.TOP, FaceDirection.BOTTOM]


def test_diagonal_neighbours_do_not_occlude():
    grid = PatternGrid.from_rows(["#.", ".#"])
    assert exposed_faces(grid, 0, 0).count == 6
    assert exposed_faces(grid, 1, 1).count == 6


def test_directions_follow_fixed_order(single):
    assert list(exposed_faces(single, 0, 0).directions()) == [
        FaceDirection.LEFT,
        FaceDirection.RIGHT,
        FaceDirection.FRONT,
        FaceDirection.BACK,
        FaceDirection.TOP,
        FaceDirection.BOTTOM,
    ]
