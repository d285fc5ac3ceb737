"""Day 7, The Treachery of Whales: cheapest alignment position."""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from ..errors import ParseError
from ..inputs import parse_int_list, strip_blank_edges
from ..types import Answers

CostFn = Callable[[np.ndarray], np.ndarray]


def parse(lines: Sequence[str]) -> np.ndarray:
    stripped = strip_blank_edges(lines)
    if len(stripped) != 1:
        raise ParseError(f"expected a single line of positions, got {len(stripped)} lines")
    return np.array(parse_int_list(stripped[0]), dtype=np.int64)


def linear(distance: np.ndarray) -> np.ndarray:
    return distance


def triangular(distance: np.ndarray) -> np.ndarray:
    return distance * (distance + 1) // 2


def cheapest_alignment(positions: np.ndarray, cost: CostFn) -> int:
    """Minimum total fuel over every target between the extreme positions."""

    targets = np.arange(positions.min(), positions.max() + 1)
    distances = np.abs(positions[None, :] - targets[:, None])
    return int(cost(distances).sum(axis=1).min())


def part_one(positions: np.ndarray) -> int:
    return cheapest_alignment(positions, linear)


def part_two(positions: np.ndarray) -> int:
    return cheapest_alignment(positions, triangular)


def solve(lines: Sequence[str]) -> Answers:
    positions = parse(lines)
    return part_one(positions), part_two(positions)
