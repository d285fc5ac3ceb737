"""Day 15, Chiton: lowest-risk monotone path across the cave floor."""

from __future__ import annotations

from typing import Sequence

from ..constants import TILE_FACTOR
from ..grid_utils import DigitGrid, load_grid
from ..propagation import lowest_total_risk
from ..types import Answers


def parse(lines: Sequence[str]) -> DigitGrid:
    return load_grid(lines)


def part_one(grid: DigitGrid) -> int:
    return lowest_total_risk(grid)


def part_two(grid: DigitGrid, factor: int = TILE_FACTOR) -> int:
    return lowest_total_risk(grid.tile(factor))


def solve(lines: Sequence[str]) -> Answers:
    grid = parse(lines)
    return part_one(grid), part_two(grid)
