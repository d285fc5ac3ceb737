"""aoc2021.days
================

Registry mapping day numbers to their solvers. Each day module exposes
``parse``, ``part_one``, ``part_two`` and ``solve(lines)``; the CLI only needs
``solve``.
"""

from __future__ import annotations

from typing import Dict

from ..types import Solver
from . import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
)

SOLVERS: Dict[int, Solver] = {
    1: day01.solve,
    2: day02.solve,
    3: day03.solve,
    4: day04.solve,
    5: day05.solve,
    6: day06.solve,
    7: day07.solve,
    8: day08.solve,
    9: day09.solve,
    10: day10.solve,
    11: day11.solve,
    12: day12.solve,
    13: day13.solve,
    14: day14.solve,
    15: day15.solve,
}


def get_solver(day: int) -> Solver:
    """Lookup ``day`` in :data:`SOLVERS` with a helpful error."""

    try:
        return SOLVERS[day]
    except KeyError as exc:
        raise KeyError(f"No solution for day {day}. Known days: {sorted(SOLVERS)}") from exc


__all__ = ["SOLVERS", "get_solver"]
