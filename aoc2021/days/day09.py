"""Day 9, Smoke Basin: low points and the basins around them."""

from __future__ import annotations

from typing import Sequence

from ..grid_utils import DigitGrid, load_grid
from ..propagation import basin_sizes, low_points
from ..types import Answers


def parse(lines: Sequence[str]) -> DigitGrid:
    return load_grid(lines)


def part_one(grid: DigitGrid) -> int:
    """Sum of risk levels (height + 1) over all low points."""

    return sum(grid[coord] + 1 for coord in low_points(grid))


def part_two(grid: DigitGrid) -> int:
    """Product of the three largest basin sizes."""

    sizes = basin_sizes(grid)
    if len(sizes) < 3:
        raise ValueError(f"expected at least three basins, found {len(sizes)}")
    return sizes[0] * sizes[1] * sizes[2]


def solve(lines: Sequence[str]) -> Answers:
    grid = parse(lines)
    return part_one(grid), part_two(grid)
