import logging

import numpy.testing as npt
import pytest

from dotartmesh.controller.mesher import MeshAssembler, assemble
from dotartmesh.controller.statistics import calculate_mesh_stats
from dotartmesh.exceptions import MeshGenerationError, ParameterValidationError
from dotartmesh.model.pattern import PatternGrid


class TestStrategySelection:
    def test_optimized(self, pair, params):
        mesh = assemble(pair, params)
        assert len(mesh.pattern) == 1
        assert mesh.pattern[0].triangle_count == 20
        assert mesh.base is None

    def test_optimize_takes_precedence_over_merge(self, pair, params):
        mesh = assemble(pair, params.replace(merge_adjacent_faces=True))
        assert mesh.pattern[0].triangle_count == 20

    def test_merged(self, pair, params):
        mesh = assemble(pair, params.replace(optimize_mesh=False, merge_adjacent_faces=True))
        assert len(mesh.pattern) == 1
        assert mesh.pattern[0].vertex_count == 48
        assert mesh.pattern[0].triangle_count == 24

    def test_individual_cubes(self, letter_t, params):
        mesh = assemble(letter_t, params.replace(optimize_mesh=False))
        assert len(mesh.pattern) == letter_t.occupied_count
        assert all(cube.vertex_count == 24 for cube in mesh.pattern)

    def test_base_is_separate_sub_mesh(self, pair, params):
        mesh = assemble(pair, params.replace(generate_base=True))
        assert mesh.base is not None
        assert len(mesh.sub_meshes) == 2
        assert mesh.base.vertex_count == 8


class TestEmptyPattern:
    def test_optimized_succeeds(self, empty_grid, params):
        mesh = assemble(empty_grid, params)
        stats = calculate_mesh_stats(mesh)
        assert stats.cube_count == 0
        assert stats.vertex_count == 0
        assert stats.face_count == 0

    def test_individual_cubes_succeed(self, empty_grid, params):
        mesh = assemble(empty_grid, params.replace(optimize_mesh=False))
        assert mesh.pattern == []
        assert calculate_mesh_stats(mesh).cube_count == 0

    def test_merge_fails(self, empty_grid, params):
        with pytest.raises(MeshGenerationError, match="No geometries found to merge"):
            assemble(empty_grid, params.replace(optimize_mesh=False, merge_adjacent_faces=True))

    def test_merge_failure_is_logged(self, empty_grid, params, caplog):
        with caplog.at_level(logging.ERROR, logger="dotartmesh"):
            with pytest.raises(MeshGenerationError):
                assemble(empty_grid, params.replace(optimize_mesh=False, merge_adjacent_faces=True))
        assert "Mesh generation failed" in caplog.text

    @pytest.mark.parametrize("optimize", [True, False])
    def test_base_still_generated(self, empty_grid, params, optimize):
        mesh = assemble(empty_grid, params.replace(generate_base=True, optimize_mesh=optimize))
        assert mesh.base.vertex_count == 8
        assert mesh.base.triangle_count == 12
        stats = calculate_mesh_stats(mesh)
        assert stats.cube_count == 1
        assert stats.vertex_count == 8


def test_invalid_parameters_are_rejected_before_generation(pair, params):
    with pytest.raises(ParameterValidationError, match="Cube size"):
        assemble(pair, params.replace(cube_size=0.0))


def test_non_numeric_parameters_are_rejected(pair, params):
    with pytest.raises(ParameterValidationError, match="must be a number"):
        assemble(pair, params.replace(cube_size="3"))


def test_negative_base_footprint_fails(params):
    grid = PatternGrid.empty(0, 0)
    with pytest.raises(MeshGenerationError, match="Failed to generate mesh: Base footprint"):
        assemble(grid, params.replace(generate_base=True, cube_size=2.0, spacing=3.0))


def test_unexpected_failure_is_wrapped(pair, params, monkeypatch):
    def broken(grid, params):
        raise RuntimeError("boom")

    monkeypatch.setattr("dotartmesh.controller.mesher.build_optimized_mesh", broken)
    with pytest.raises(MeshGenerationError, match="Failed to generate mesh: boom"):
        assemble(pair, params)


def test_repeated_calls_are_reproducible(letter_t, params):
    assembler = MeshAssembler()
    first = assembler.assemble(letter_t, params.replace(generate_base=True))
    second = assembler.assemble(letter_t, params.replace(generate_base=True))

    assert calculate_mesh_stats(first) == calculate_mesh_stats(second)
    for a, b in zip(first.sub_meshes, second.sub_meshes):
        npt.assert_allclose(a.positions, b.positions)
        npt.assert_array_equal(a.indices, b.indices)


def test_preview_forces_optimized_mesh(pair, params):
    mesh = MeshAssembler().assemble_preview(pair, params.replace(optimize_mesh=False))
    assert len(mesh.pattern) == 1
    assert mesh.pattern[0].triangle_count == 20


def test_centered_mesh(letter_t, params):
    mesh = assemble(letter_t, params.replace(generate_base=True)).centered()
    lo, hi = mesh.bounds()
    npt.assert_allclose((lo + hi) / 2, 0.0, atol=1e-9)


def test_centered_empty_mesh_is_unchanged(params):
    mesh = assemble(PatternGrid.empty(2, 2), params)
    assert mesh.centered().bounds() is None
