"""
Face occlusion for single-layer voxel grids.

A side face of an occupied cell is hidden when the neighbouring cell on that
side is occupied. The grid has a single layer, so top and bottom are always
exposed.
"""
from __future__ import annotations

from dataclasses import dataclass, astuple
from typing import Iterator

from dotartmesh.model.geometry_primitives import FaceDirection
from dotartmesh.model.pattern import PatternGrid


@dataclass(frozen=True)
class ExposedFaces:
    left: bool = True
    right: bool = True
    front: bool = True
    back: bool = True
    top: bool = True
    bottom: bool = True

    def is_exposed(self, face: FaceDirection) -> bool:
        return getattr(self, face.value)

    def directions(self) -> Iterator[FaceDirection]:
        """Exposed faces in the order left, right, front, back, top, bottom."""
        for face in FaceDirection:
            if self.is_exposed(face):
                yield face

    @property
    def count(self) -> int:
        return sum(astuple(self))


def exposed_faces(grid: PatternGrid, x: int, y: int) -> ExposedFaces:
    """
    Compute which faces of the cube at (x, y) are visible.

    Front is towards row y-1 (-Z), back towards row y+1 (+Z).
    Only meaningful for occupied cells.
    """
    return ExposedFaces(
        left=not grid.is_occupied(x - 1, y),
        right=not grid.is_occupied(x + 1, y),
        front=not grid.is_occupied(x, y - 1),
        back=not grid.is_occupied(x, y + 1),
        top=True,
        bottom=True,
    )
