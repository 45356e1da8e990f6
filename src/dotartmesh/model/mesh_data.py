"""
Mesh Buffers
============
Plain vertex/normal/index containers produced by the builders.

Classes:
    MeshBuffer: One independent body (positions, per-vertex normals, triangles).
    CompositeMesh: The pattern body (or bodies) plus the optional base plate.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def _as_vertex_array(values) -> npt.NDArray[np.float64]:
    arr = np.asarray(values, dtype=np.float64).reshape(-1, 3)
    return arr


@dataclass(eq=False)
class MeshBuffer:
    """
    Triangle mesh data in the layout a renderer or exporter expects.

    Attributes:
        positions: (N, 3) vertex positions.
        normals: (N, 3) per-vertex normals, one per position.
        indices: (M, 3) triangle vertex indices, or None for a non-indexed buffer
                 where every three consecutive positions form a triangle.
    """
    positions: npt.NDArray[np.float64]
    normals: npt.NDArray[np.float64]
    indices: Optional[npt.NDArray[np.int64]] = None

    def __post_init__(self) -> None:
        self.positions = _as_vertex_array(self.positions)
        self.normals = _as_vertex_array(self.normals)
        if self.indices is not None:
            self.indices = np.asarray(self.indices, dtype=np.int64).reshape(-1, 3)

    @classmethod
    def empty(cls) -> MeshBuffer:
        return cls(
            positions=np.empty((0, 3), dtype=np.float64),
            normals=np.empty((0, 3), dtype=np.float64),
            indices=np.empty((0, 3), dtype=np.int64),
        )

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        if self.indices is not None:
            return int(self.indices.shape[0])
        return self.vertex_count // 3

    @property
    def is_empty(self) -> bool:
        return self.vertex_count == 0

    def triangles(self) -> npt.NDArray[np.int64]:
        """Triangle indices, generated on the fly for non-indexed buffers."""
        if self.indices is not None:
            return self.indices
        return np.arange(self.triangle_count * 3, dtype=np.int64).reshape(-1, 3)

    def translated(self, offset) -> MeshBuffer:
        """Return a copy moved by `offset` (x, y, z)."""
        return MeshBuffer(
            positions=self.positions + np.asarray(offset, dtype=np.float64),
            normals=self.normals.copy(),
            indices=None if self.indices is None else self.indices.copy(),
        )

    def bounds(self) -> Optional[tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]]:
        """(min, max) corners of the bounding box, None for an empty buffer."""
        if self.is_empty:
            return None
        return self.positions.min(axis=0), self.positions.max(axis=0)

    def validate(self) -> None:
        """
        Check the buffer invariants.

        Raises:
            ValueError: If normals and positions differ in length or an index
                        points outside the position array.
        """
        if self.normals.shape != self.positions.shape:
            raise ValueError(
                f"Expected one normal per vertex, got {len(self.normals)} normals for {len(self.positions)} vertices."
            )
        if self.indices is None:
            if self.vertex_count % 3:
                raise ValueError(f"Non-indexed buffer has {self.vertex_count} vertices, not a multiple of 3.")
            return
        if self.indices.size and (self.indices.min() < 0 or self.indices.max() >= self.vertex_count):
            raise ValueError(
                f"Triangle index out of range [0, {self.vertex_count}): "
                f"min={self.indices.min()}, max={self.indices.max()}."
            )


@dataclass(eq=False)
class CompositeMesh:
    """
    Result of one generation call.

    The pattern and the base are independent bodies; they are never unioned.
    `pattern` holds one buffer for the optimized and merged strategies and one
    buffer per cube when cubes are kept separate.
    """
    pattern: List[MeshBuffer] = field(default_factory=list)
    base: Optional[MeshBuffer] = None

    @property
    def sub_meshes(self) -> List[MeshBuffer]:
        meshes = list(self.pattern)
        if self.base is not None:
            meshes.append(self.base)
        return meshes

    def __iter__(self) -> Iterator[MeshBuffer]:
        return iter(self.sub_meshes)

    def bounds(self) -> Optional[tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]]:
        boxes = [b for b in (m.bounds() for m in self.sub_meshes) if b is not None]
        if not boxes:
            return None
        mins = np.min([b[0] for b in boxes], axis=0)
        maxs = np.max([b[1] for b in boxes], axis=0)
        return mins, maxs

    def centered(self) -> CompositeMesh:
        """Return a copy translated so the bounding box center sits at the origin."""
        box = self.bounds()
        if box is None:
            return CompositeMesh(pattern=list(self.pattern), base=self.base)
        offset = -(box[0] + box[1]) / 2.0
        return CompositeMesh(
            pattern=[m.translated(offset) for m in self.pattern],
            base=None if self.base is None else self.base.translated(offset),
        )
