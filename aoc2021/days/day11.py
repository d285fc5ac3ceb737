"""Day 11, Dumbo Octopus: energy cascade on a digit grid."""

from __future__ import annotations

from typing import Sequence

from ..constants import FLASH_ROUNDS
from ..grid_utils import DigitGrid, load_grid
from ..propagation import count_flashes, first_synchronised_step
from ..types import Answers


def parse(lines: Sequence[str]) -> DigitGrid:
    return load_grid(lines)


def part_one(grid: DigitGrid, rounds: int = FLASH_ROUNDS) -> int:
    return count_flashes(grid, rounds)


def part_two(grid: DigitGrid) -> int:
    return first_synchronised_step(grid)


def solve(lines: Sequence[str]) -> Answers:
    grid = parse(lines)
    return part_one(grid), part_two(grid)
