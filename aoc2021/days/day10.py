"""Day 10, Syntax Scoring: corrupted and incomplete bracket chunks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..errors import ParseError
from ..inputs import strip_blank_edges
from ..types import Answers

PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
CORRUPTION_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
COMPLETION_POINTS = {")": 1, "]": 2, "}": 3, ">": 4}


@dataclass(frozen=True)
class LineStatus:
    """Outcome of checking one line.

    ``corrupt`` holds the first illegal closing character, if any; otherwise
    ``missing`` holds the closers needed to complete the line (empty when the
    line is already balanced).
    """

    corrupt: Optional[str] = None
    missing: str = ""

    @property
    def incomplete(self) -> bool:
        return self.corrupt is None and bool(self.missing)


def check_line(line: str, line_number: Optional[int] = None) -> LineStatus:
    stack: List[str] = []
    for char in line:
        if char in PAIRS:
            stack.append(PAIRS[char])
        elif char in CORRUPTION_POINTS:
            if not stack or stack.pop() != char:
                return LineStatus(corrupt=char)
        else:
            raise ParseError(f"{char!r} is not a bracket", line_number)
    return LineStatus(missing="".join(reversed(stack)))


def parse(lines: Sequence[str]) -> List[LineStatus]:
    return [check_line(line.strip(), number) for number, line in enumerate(strip_blank_edges(lines), start=1)]


def completion_score(missing: str) -> int:
    score = 0
    for char in missing:
        score = score * 5 + COMPLETION_POINTS[char]
    return score


def part_one(statuses: Sequence[LineStatus]) -> int:
    return sum(CORRUPTION_POINTS[status.corrupt] for status in statuses if status.corrupt)


def part_two(statuses: Sequence[LineStatus]) -> int:
    """Middle completion score; the number of incomplete lines is odd."""

    scores = sorted(completion_score(status.missing) for status in statuses if status.incomplete)
    if not scores:
        raise ValueError("no incomplete lines to score")
    return scores[len(scores) // 2]


def solve(lines: Sequence[str]) -> Answers:
    statuses = parse(lines)
    return part_one(statuses), part_two(statuses)
