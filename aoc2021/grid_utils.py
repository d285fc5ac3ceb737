"""aoc2021.grid_utils
=====================

The digit grid shared by the grid-based days: loading it from text, walking
neighbourhoods, and producing tiled copies. The traversal algorithms that run
over it live in :mod:`aoc2021.propagation`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .errors import ParseError
from .inputs import strip_blank_edges
from .types import Coord, Rows

# ---------------------------------------------------------------------------
# Adjacency policies
# ---------------------------------------------------------------------------
ORTHOGONAL: Tuple[Coord, ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))
FULL: Tuple[Coord, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def directions(connectivity: int) -> Tuple[Coord, ...]:
    """Return the offset table for a 4- or 8-connected neighbourhood."""

    if connectivity == 4:
        return ORTHOGONAL
    if connectivity == 8:
        return FULL
    raise ValueError(f"connectivity must be 4 or 8, got {connectivity}")


def neighbors(coord: Coord, height: int, width: int, connectivity: int = 4) -> List[Coord]:
    """Return the in-bounds neighbours of ``coord``.

    Parameters
    ----------
    coord:
        ``(row, col)`` of the centre cell.
    height, width:
        Grid bounds. Cells on an edge or corner simply get fewer neighbours.
    connectivity:
        4 for orthogonal adjacency, 8 to include diagonals.

    Returns
    -------
    list[Coord]
        2/3 entries for a corner, 3/5 for a border cell, 4/8 for an interior
        cell, depending on ``connectivity``.
    """

    row, col = coord
    out: List[Coord] = []
    for dr, dc in directions(connectivity):
        nr, nc = row + dr, col + dc
        if 0 <= nr < height and 0 <= nc < width:
            out.append((nr, nc))
    return out


# ---------------------------------------------------------------------------
# Grid container
# ---------------------------------------------------------------------------
@dataclass
class DigitGrid:
    """Fixed-size grid of single-digit cell values.

    ``cells`` is a ``(height, width)`` integer array. When omitted a zero grid
    of the requested size is allocated. The grid may be mutated in place (the
    energy cascade does) but its shape never changes; :meth:`tile` builds a new
    grid instead.
    """

    height: int
    width: int
    cells: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        if self.height <= 0 or self.width <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.height}x{self.width}")
        if self.cells is None:
            self.cells = np.zeros((self.height, self.width), dtype=np.int64)
        else:
            self.cells = np.asarray(self.cells, dtype=np.int64)
        if self.cells.shape != (self.height, self.width):
            raise ValueError(f"cells shape {self.cells.shape} does not match {self.height}x{self.width}")

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    def __getitem__(self, coord: Coord) -> int:
        return int(self.cells[coord])

    def __setitem__(self, coord: Coord, value: int) -> None:
        self.cells[coord] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.cells, other.cells))

    def coords(self) -> Iterator[Coord]:
        """Yield every coordinate in row-major order."""

        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    def neighbors(self, coord: Coord, connectivity: int = 4) -> List[Coord]:
        return neighbors(coord, self.height, self.width, connectivity)

    def copy(self) -> "DigitGrid":
        return DigitGrid(self.height, self.width, self.cells.copy())

    def to_rows(self) -> Rows:
        return self.cells.tolist()

    def tile(self, factor: int) -> "DigitGrid":
        """Return a grid ``factor`` times larger in both directions.

        Tile ``(i, j)`` holds this grid's values raised by ``i + j``. Raised values
        above 9 wrap back to 1 (never to 0); tile ``(0, 0)`` is an exact copy.
        """

        if factor <= 0:
            raise ValueError(f"tile factor must be positive, got {factor}")
        offsets = np.add.outer(np.arange(factor), np.arange(factor))
        offsets = offsets.repeat(self.height, axis=0).repeat(self.width, axis=1)
        raised = np.tile(self.cells, (factor, factor)) + offsets
        wrapped = np.where(raised > 9, (raised - 1) % 9 + 1, raised)
        return DigitGrid(self.height * factor, self.width * factor, wrapped)


def load_grid(lines: Iterable[str]) -> DigitGrid:
    """Build a :class:`DigitGrid` from lines of decimal digits.

    Raises
    ------
    ParseError
        If the input is empty, a line contains a non-digit character, or the
        lines do not all have the same length.
    """

    rows: Rows = []
    width = None
    for number, line in enumerate(strip_blank_edges(lines), start=1):
        line = line.strip()
        if width is None:
            width = len(line)
        if len(line) != width:
            raise ParseError(f"expected {width} digits, got {len(line)}", number)
        row = []
        for char in line:
            if not ("0" <= char <= "9"):
                raise ParseError(f"{char!r} is not a digit", number)
            row.append(ord(char) - ord("0"))
        rows.append(row)
    if not rows or not width:
        raise ParseError("grid input is empty")
    return DigitGrid(len(rows), width, np.array(rows, dtype=np.int64))


__all__ = [
    "ORTHOGONAL",
    "FULL",
    "directions",
    "neighbors",
    "DigitGrid",
    "load_grid",
]
