"""
Dot Pattern Grid
================
The 2D occupancy grid that gets extruded into cubes.

A cell `data[y][x] == True` means the cell is occupied. Rows are indexed
`0..height`, columns `0..width`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

FILLED_CHARS = frozenset("#1xX")
EMPTY_CHARS = frozenset(".0 ")


@dataclass(frozen=True)
class PatternGrid:
    """
    Immutable boolean grid of shape (height, width).

    `data` accepts nested sequences of booleans or a numpy array. It is stored
    as a read-only numpy bool array so the grid cannot change during generation.
    """
    width: int
    height: int
    data: npt.NDArray[np.bool_] = field(repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Pattern dimensions must be non-negative, got {self.width}x{self.height}.")

        if isinstance(self.data, np.ndarray):
            arr = np.array(self.data, dtype=bool)
        else:
            rows = list(self.data)
            if len(rows) != self.height:
                raise ValueError(f"Expected {self.height} rows, got {len(rows)}.")
            for y, row in enumerate(rows):
                if len(row) != self.width:
                    raise ValueError(f"Row {y} has {len(row)} cells, expected {self.width}.")
            arr = np.array(rows, dtype=bool).reshape(self.height, self.width)

        if arr.shape != (self.height, self.width):
            raise ValueError(f"Expected shape ({self.height}, {self.width}), got {arr.shape}.")

        arr.setflags(write=False)
        object.__setattr__(self, "data", arr)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternGrid):
            return NotImplemented
        return self.width == other.width and self.height == other.height and np.array_equal(self.data, other.data)

    def __hash__(self) -> int:
        return hash((self.width, self.height, self.data.tobytes()))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> PatternGrid:
        """
        Build a grid from text rows, e.g. ["#.#", ".#."].

        '#', '1', 'x' mark occupied cells; '.', '0' and space mark empty ones.
        """
        rows = list(rows)
        width = len(rows[0]) if rows else 0
        data = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {width}.")
            cells = []
            for x, char in enumerate(row):
                if char in FILLED_CHARS:
                    cells.append(True)
                elif char in EMPTY_CHARS:
                    cells.append(False)
                else:
                    raise ValueError(f"Unexpected character {char!r} at row {y}, column {x}.")
            data.append(cells)
        return cls(width=width, height=len(rows), data=data)

    @classmethod
    def empty(cls, width: int, height: int) -> PatternGrid:
        return cls(width=width, height=height, data=np.zeros((height, width), dtype=bool))

    def is_occupied(self, x: int, y: int) -> bool:
        """Occupancy lookup; coordinates outside the grid count as empty."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return bool(self.data[y, x])
        return False

    def occupied_cells(self) -> Iterator[tuple[int, int]]:
        """Yield (x, y) of every occupied cell in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                if self.data[y, x]:
                    yield x, y

    @property
    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.data))

    def to_list(self) -> list[list[bool]]:
        return self.data.tolist()
