"""Day 5, Hydrothermal Venture: overlapping vent lines."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

from ..errors import ParseError, parse_int
from ..inputs import strip_blank_edges
from ..types import Answers, Coord


@dataclass(frozen=True)
class Segment:
    start: Coord
    end: Coord

    @property
    def axis_aligned(self) -> bool:
        return self.start[0] == self.end[0] or self.start[1] == self.end[1]

    @property
    def diagonal(self) -> bool:
        dx = abs(self.start[0] - self.end[0])
        dy = abs(self.start[1] - self.end[1])
        return dx == dy and dx > 0

    def points(self) -> Iterator[Coord]:
        """Every integer point on the segment, endpoints included."""

        (x, y), (ex, ey) = self.start, self.end
        dx = (ex > x) - (ex < x)
        dy = (ey > y) - (ey < y)
        yield x, y
        while (x, y) != (ex, ey):
            x += dx
            y += dy
            yield x, y


def _parse_point(token: str, line_number: int) -> Coord:
    parts = token.split(",")
    if len(parts) != 2:
        raise ParseError(f"expected 'x,y', got {token!r}", line_number)
    return parse_int(parts[0], line_number), parse_int(parts[1], line_number)


def parse_segment(line: str, line_number: int) -> Segment:
    """Parse ``"x1,y1 -> x2,y2"``."""

    tokens = line.split()
    if len(tokens) != 3 or tokens[1] != "->":
        raise ParseError(f"expected 'x1,y1 -> x2,y2', got {line!r}", line_number)
    segment = Segment(_parse_point(tokens[0], line_number), _parse_point(tokens[2], line_number))
    if not (segment.axis_aligned or segment.diagonal):
        raise ParseError("segment is neither axis-aligned nor at 45 degrees", line_number)
    return segment


def parse(lines: Sequence[str]) -> List[Segment]:
    return [parse_segment(line, number) for number, line in enumerate(strip_blank_edges(lines), start=1)]


def count_overlaps(segments: Iterable[Segment]) -> int:
    """Number of points covered by at least two segments."""

    covered = Counter(point for segment in segments for point in segment.points())
    return sum(1 for count in covered.values() if count >= 2)


def part_one(segments: Sequence[Segment]) -> int:
    return count_overlaps(segment for segment in segments if segment.axis_aligned)


def part_two(segments: Sequence[Segment]) -> int:
    return count_overlaps(segments)


def solve(lines: Sequence[str]) -> Answers:
    segments = parse(lines)
    return part_one(segments), part_two(segments)
