"""Day 12, Passage Pathing: count routes through the cave system."""

from __future__ import annotations

from typing import Sequence

from ..caves import CaveGraph, count_paths
from ..types import Answers


def parse(lines: Sequence[str]) -> CaveGraph:
    return CaveGraph.from_lines(lines)


def part_one(graph: CaveGraph) -> int:
    return count_paths(graph, allow_twice=False)


def part_two(graph: CaveGraph) -> int:
    return count_paths(graph, allow_twice=True)


def solve(lines: Sequence[str]) -> Answers:
    graph = parse(lines)
    return part_one(graph), part_two(graph)
