"""
Geometric Primitives for the cube builders.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class FaceDirection(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    FRONT = "front"
    BACK = "back"
    TOP = "top"
    BOTTOM = "bottom"


# Outward unit normals. Y is up, the pattern lies in the XZ plane.
FACE_NORMALS: Dict[FaceDirection, tuple[float, float, float]] = {
    FaceDirection.LEFT: (-1.0, 0.0, 0.0),
    FaceDirection.RIGHT: (1.0, 0.0, 0.0),
    FaceDirection.FRONT: (0.0, 0.0, -1.0),
    FaceDirection.BACK: (0.0, 0.0, 1.0),
    FaceDirection.TOP: (0.0, 1.0, 0.0),
    FaceDirection.BOTTOM: (0.0, -1.0, 0.0),
}

# Quad corners as signs of the half extents. Corner order is counter-clockwise
# seen from outside, so triangles (0, 1, 2) and (0, 2, 3) face along the normal.
FACE_CORNER_SIGNS: Dict[FaceDirection, tuple[tuple[int, int, int], ...]] = {
    FaceDirection.LEFT: ((-1, -1, -1), (-1, -1, 1), (-1, 1, 1), (-1, 1, -1)),
    FaceDirection.RIGHT: ((1, -1, 1), (1, -1, -1), (1, 1, -1), (1, 1, 1)),
    FaceDirection.FRONT: ((1, -1, -1), (-1, -1, -1), (-1, 1, -1), (1, 1, -1)),
    FaceDirection.BACK: ((-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1)),
    FaceDirection.TOP: ((-1, 1, 1), (1, 1, 1), (1, 1, -1), (-1, 1, -1)),
    FaceDirection.BOTTOM: ((-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1)),
}

# Two triangles per quad, relative to the first corner
QUAD_TRIANGLES = np.array([[0, 1, 2], [0, 2, 3]], dtype=np.int64)


def corner_index(signs: tuple[int, int, int]) -> int:
    """Index 0..7 of a box corner, one bit per axis (x=1, y=2, z=4)."""
    sx, sy, sz = signs
    return (sx > 0) * 1 + (sy > 0) * 2 + (sz > 0) * 4


@dataclass(frozen=True)
class Box:
    """
    An axis aligned box given by its center and half extents.
    """
    center: tuple[float, float, float]
    half_extents: tuple[float, float, float]

    def face_corners(self, face: FaceDirection, scale: float = 1.0) -> npt.NDArray[np.float64]:
        """
        Return the (4, 3) corners of one face.

        Args:
            face: Which face to return.
            scale: Factor applied to the corner offsets from the center.
        """
        signs = np.array(FACE_CORNER_SIGNS[face], dtype=np.float64)
        offsets = signs * np.array(self.half_extents, dtype=np.float64) * scale
        return np.array(self.center, dtype=np.float64) + offsets

    def corners(self) -> npt.NDArray[np.float64]:
        """Return the 8 corners as (8, 3), ordered by `corner_index`."""
        out = np.empty((8, 3), dtype=np.float64)
        for i in range(8):
            signs = np.array([1 if i & 1 else -1, 1 if i & 2 else -1, 1 if i & 4 else -1], dtype=np.float64)
            out[i] = np.array(self.center) + signs * np.array(self.half_extents)
        return out

    @property
    def size(self) -> tuple[float, float, float]:
        hx, hy, hz = self.half_extents
        return 2.0 * hx, 2.0 * hy, 2.0 * hz

    @property
    def volume(self) -> float:
        sx, sy, sz = self.size
        return sx * sy * sz
