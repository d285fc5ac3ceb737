"""Day 6, Lanternfish: population growth tracked by timer buckets."""

from __future__ import annotations

from collections import deque
from typing import List, Sequence

from ..constants import LANTERNFISH_DAYS
from ..errors import ParseError
from ..inputs import parse_int_list, strip_blank_edges
from ..types import Answers

RESET_TIMER = 6
NEWBORN_TIMER = 8


def parse(lines: Sequence[str]) -> List[int]:
    stripped = strip_blank_edges(lines)
    if len(stripped) != 1:
        raise ParseError(f"expected a single line of timers, got {len(stripped)} lines")
    timers = parse_int_list(stripped[0])
    for timer in timers:
        if not 0 <= timer <= NEWBORN_TIMER:
            raise ParseError(f"timer {timer} outside 0..{NEWBORN_TIMER}", 1)
    return timers


def population(timers: Sequence[int], days: int) -> int:
    """Number of fish after ``days`` days."""

    buckets = deque([0] * (NEWBORN_TIMER + 1))
    for timer in timers:
        buckets[timer] += 1
    for _ in range(days):
        spawning = buckets[0]
        buckets.rotate(-1)
        buckets[RESET_TIMER] += spawning
    return sum(buckets)


def part_one(timers: Sequence[int]) -> int:
    return population(timers, LANTERNFISH_DAYS[0])


def part_two(timers: Sequence[int]) -> int:
    return population(timers, LANTERNFISH_DAYS[1])


def solve(lines: Sequence[str]) -> Answers:
    timers = parse(lines)
    return part_one(timers), part_two(timers)
