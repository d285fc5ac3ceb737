"""aoc2021.propagation
======================

Traversal and propagation algorithms over :class:`~aoc2021.grid_utils.DigitGrid`:

* prefix relaxation of cumulative risk along monotone (right/down) paths,
* low-point detection and breadth-first basin sizing,
* the energy cascade where charged cells fire into their neighbourhood.

The functions only read the grid unless their docstring says otherwise.
"""

from __future__ import annotations

from collections import deque
from typing import List, Set

import numpy as np

from .constants import BARRIER_VALUE, FLASH_THRESHOLD
from .grid_utils import DigitGrid
from .types import Coord


# ---------------------------------------------------------------------------
# Prefix relaxation
# ---------------------------------------------------------------------------
def distance_matrix(grid: DigitGrid) -> np.ndarray:
    """Return the cumulative cost of the cheapest monotone path to every cell.

    Paths start at ``(0, 0)`` and only move right or down, so a single forward
    sweep is exact: each cell costs its own value plus the cheaper of the cell
    above and the cell to the left. The origin's entry is its own value.
    """

    values = grid.cells
    cost = np.zeros_like(values)
    for row in range(grid.height):
        for col in range(grid.width):
            if row == 0 and col == 0:
                best = 0
            elif row == 0:
                best = cost[0, col - 1]
            elif col == 0:
                best = cost[row - 1, 0]
            else:
                best = min(cost[row, col - 1], cost[row - 1, col])
            cost[row, col] = values[row, col] + best
    return cost


def lowest_total_risk(grid: DigitGrid) -> int:
    """Risk of the cheapest monotone path from top-left to bottom-right.

    The starting cell is never entered, so its value is not counted.
    """

    cost = distance_matrix(grid)
    return int(cost[-1, -1] - grid.cells[0, 0])


# ---------------------------------------------------------------------------
# Low points and basins
# ---------------------------------------------------------------------------
def is_low_point(grid: DigitGrid, coord: Coord) -> bool:
    """True when ``coord`` is strictly lower than all orthogonal neighbours."""

    value = grid[coord]
    return all(value < grid[other] for other in grid.neighbors(coord))


def low_points(grid: DigitGrid) -> List[Coord]:
    """Return every low point in row-major order."""

    return [coord for coord in grid.coords() if is_low_point(grid, coord)]


def basin_region(grid: DigitGrid, seed: Coord, barrier: int = BARRIER_VALUE) -> Set[Coord]:
    """Collect the cells connected to ``seed`` whose value is below ``barrier``.

    Breadth-first expansion over orthogonal neighbours. A barrier seed yields
    an empty region.
    """

    if grid[seed] >= barrier:
        return set()
    region = {seed}
    queue = deque([seed])
    while queue:
        current = queue.popleft()
        for other in grid.neighbors(current):
            if other not in region and grid[other] < barrier:
                region.add(other)
                queue.append(other)
    return region


def basin_size(grid: DigitGrid, seed: Coord, barrier: int = BARRIER_VALUE) -> int:
    """Number of cells in the basin containing ``seed``."""

    return len(basin_region(grid, seed, barrier))


def basin_sizes(grid: DigitGrid, barrier: int = BARRIER_VALUE) -> List[int]:
    """Basin size for every low point, largest first."""

    return sorted((basin_size(grid, coord, barrier) for coord in low_points(grid)), reverse=True)


# ---------------------------------------------------------------------------
# Energy cascade
# ---------------------------------------------------------------------------
def flash_step(grid: DigitGrid, threshold: int = FLASH_THRESHOLD) -> int:
    """Advance ``grid`` by one round in place and return the number of firings.

    Every cell gains one unit of energy. Cells above ``threshold`` then fire:
    they drop to zero and give one unit to each of their eight neighbours that
    has not fired yet this round. Firing repeats until nothing is charged. A
    cell fires at most once per round and is not recharged after firing.
    """

    cells = grid.cells
    cells += 1
    fired = np.zeros(grid.shape, dtype=bool)
    flashes = 0
    while True:
        charged = np.argwhere((cells > threshold) & ~fired)
        if not len(charged):
            break
        for row, col in charged:
            coord = (int(row), int(col))
            fired[coord] = True
            cells[coord] = 0
            flashes += 1
            for other in grid.neighbors(coord, connectivity=8):
                if not fired[other]:
                    cells[other] += 1
    return flashes


def count_flashes(grid: DigitGrid, rounds: int, threshold: int = FLASH_THRESHOLD) -> int:
    """Total firings over ``rounds`` rounds, run on a copy of ``grid``."""

    work = grid.copy()
    return sum(flash_step(work, threshold) for _ in range(rounds))


def first_synchronised_step(
    grid: DigitGrid,
    threshold: int = FLASH_THRESHOLD,
    max_rounds: int = 100_000,
) -> int:
    """First round (1-based) in which every cell fires, run on a copy."""

    work = grid.copy()
    total = grid.height * grid.width
    for step in range(1, max_rounds + 1):
        if flash_step(work, threshold) == total:
            return step
    raise ValueError(f"grid did not synchronise within {max_rounds} rounds")


__all__ = [
    "distance_matrix",
    "lowest_total_risk",
    "is_low_point",
    "low_points",
    "basin_region",
    "basin_size",
    "basin_sizes",
    "flash_step",
    "count_flashes",
    "first_synchronised_step",
]
