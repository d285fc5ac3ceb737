"""Day 8: Seven Segment Search.

Every entry lists the ten scrambled digit patterns of one display followed by
the four patterns currently shown. Patterns are handled as frozensets of
segment letters so the wire order inside a pattern never matters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Sequence, Tuple

from ..errors import ParseError
from ..inputs import strip_blank_edges
from ..types import Answers

Pattern = FrozenSet[str]

SEGMENTS = frozenset("abcdefg")
# Segment counts that identify a digit on their own: 1, 7, 4 and 8.
UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}


@dataclass(frozen=True)
class Entry:
    patterns: Tuple[Pattern, ...]
    outputs: Tuple[Pattern, ...]


def _parse_patterns(text: str, expected: int, line_number: int) -> Tuple[Pattern, ...]:
    tokens = text.split()
    if len(tokens) != expected:
        raise ParseError(f"expected {expected} patterns, got {len(tokens)}", line_number)
    patterns = []
    for token in tokens:
        pattern = frozenset(token)
        if not pattern <= SEGMENTS or len(pattern) != len(token):
            raise ParseError(f"{token!r} is not a segment pattern", line_number)
        patterns.append(pattern)
    return tuple(patterns)


def parse_entry(line: str, line_number: int) -> Entry:
    halves = line.split("|")
    if len(halves) != 2:
        raise ParseError("expected '<10 patterns> | <4 outputs>'", line_number)
    return Entry(
        _parse_patterns(halves[0], 10, line_number),
        _parse_patterns(halves[1], 4, line_number),
    )


def parse(lines: Sequence[str]) -> List[Entry]:
    return [parse_entry(line, number) for number, line in enumerate(strip_blank_edges(lines), start=1)]


def decode(patterns: Sequence[Pattern]) -> Dict[Pattern, int]:
    """Map each of the ten patterns to the digit it displays.

    1, 4, 7 and 8 are identified by length. Among the six-segment digits, 9
    covers 4, 0 covers 1 but not 4, and 6 is left over. Among the five-segment
    digits, 3 covers 1, 5 lies inside 6, and 2 is left over.
    """

    by_length: Dict[int, List[Pattern]] = {}
    for pattern in patterns:
        by_length.setdefault(len(pattern), []).append(pattern)
    try:
        (one,), (seven,), (four,), (eight,) = (by_length[n] for n in (2, 3, 4, 7))
        sixes, fives = by_length[6], by_length[5]
        nine = next(p for p in sixes if four <= p)
        zero = next(p for p in sixes if one <= p and p != nine)
        six = next(p for p in sixes if p not in (nine, zero))
        three = next(p for p in fives if one <= p)
        five = next(p for p in fives if p <= six)
        two = next(p for p in fives if p not in (three, five))
    except (KeyError, ValueError, StopIteration) as exc:
        raise ValueError(f"patterns do not describe a seven-segment display: {exc!r}") from exc
    return {zero: 0, one: 1, two: 2, three: 3, four: 4, five: 5, six: 6, seven: 7, eight: 8, nine: 9}


def output_value(entry: Entry) -> int:
    mapping = decode(entry.patterns)
    value = 0
    for pattern in entry.outputs:
        value = value * 10 + mapping[pattern]
    return value


def part_one(entries: Sequence[Entry]) -> int:
    return sum(1 for entry in entries for pattern in entry.outputs if len(pattern) in UNIQUE_LENGTHS)


def part_two(entries: Sequence[Entry]) -> int:
    return sum(output_value(entry) for entry in entries)


def solve(lines: Sequence[str]) -> Answers:
    entries = parse(lines)
    return part_one(entries), part_two(entries)
