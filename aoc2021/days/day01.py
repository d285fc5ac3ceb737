"""Day 1, Sonar Sweep: count depth increases."""

from __future__ import annotations

from typing import List, Sequence

from ..errors import parse_int
from ..inputs import strip_blank_edges
from ..types import Answers


def parse(lines: Sequence[str]) -> List[int]:
    return [parse_int(line.strip(), number) for number, line in enumerate(strip_blank_edges(lines), start=1)]


def count_increases(depths: Sequence[int]) -> int:
    """Number of readings larger than the one before."""

    return sum(1 for prev, cur in zip(depths, depths[1:]) if cur > prev)


def window_sums(depths: Sequence[int], size: int = 3) -> List[int]:
    return [sum(depths[i:i + size]) for i in range(len(depths) - size + 1)]


def part_one(depths: Sequence[int]) -> int:
    return count_increases(depths)


def part_two(depths: Sequence[int]) -> int:
    return count_increases(window_sums(depths))


def solve(lines: Sequence[str]) -> Answers:
    depths = parse(lines)
    return part_one(depths), part_two(depths)
