"""Day 13: Transparent Origami.

Input is a list of ``x,y`` dots, a blank line, then ``fold along x=N`` or
``fold along y=N`` instructions. Folding reflects every dot beyond the fold
line onto the kept half; overlapping dots merge.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Sequence, Set, Tuple

from ..errors import ParseError, parse_int
from ..inputs import split_sections
from ..types import Answers, Coord

FOLD_PREFIX = "fold along "


@dataclass(frozen=True)
class Fold:
    axis: str
    line: int

    def apply(self, point: Coord) -> Coord:
        """Reflect ``point`` onto the kept half.

        Raises ``ValueError`` when the reflection would land past the top or
        left edge, which happens if the fold line lies before the middle of the
        dots beyond it.
        """

        x, y = point
        if self.axis == "x" and x > self.line:
            x = 2 * self.line - x
        elif self.axis == "y" and y > self.line:
            y = 2 * self.line - y
        if x < 0 or y < 0:
            raise ValueError(f"fold along {self.axis}={self.line} moves {point} off the sheet")
        return x, y


def parse_fold(text: str, line_number: int) -> Fold:
    if not text.startswith(FOLD_PREFIX):
        raise ParseError(f"expected 'fold along <axis>=<n>', got {text!r}", line_number)
    axis, sep, value = text[len(FOLD_PREFIX):].partition("=")
    if not sep or axis not in ("x", "y"):
        raise ParseError(f"expected 'fold along <axis>=<n>', got {text!r}", line_number)
    return Fold(axis, parse_int(value, line_number))


def parse(lines: Sequence[str]) -> Tuple[FrozenSet[Coord], List[Fold]]:
    sections = split_sections(lines)
    if len(sections) != 2:
        raise ParseError(f"expected dots and folds separated by a blank line, got {len(sections)} sections")
    (first_dot, dot_lines), (first_fold, fold_lines) = sections
    dots: Set[Coord] = set()
    for number, line in enumerate(dot_lines, start=first_dot):
        parts = line.strip().split(",")
        if len(parts) != 2:
            raise ParseError(f"expected 'x,y', got {line!r}", number)
        dots.add((parse_int(parts[0], number), parse_int(parts[1], number)))
    folds = [parse_fold(line.strip(), first_fold + offset) for offset, line in enumerate(fold_lines)]
    return frozenset(dots), folds


def fold(dots: Iterable[Coord], instruction: Fold) -> FrozenSet[Coord]:
    return frozenset(instruction.apply(point) for point in dots)


def render(dots: Iterable[Coord]) -> str:
    """Draw ``dots`` as rows of ``#`` on a blank background."""

    dots = set(dots)
    if not dots:
        return ""
    width = max(x for x, _ in dots) + 1
    height = max(y for _, y in dots) + 1
    return "\n".join(
        "".join("#" if (x, y) in dots else " " for x in range(width)).rstrip()
        for y in range(height)
    )


def part_one(dots: FrozenSet[Coord], folds: Sequence[Fold]) -> int:
    if not folds:
        raise ValueError("no fold instructions")
    return len(fold(dots, folds[0]))


def part_two(dots: FrozenSet[Coord], folds: Sequence[Fold]) -> str:
    for instruction in folds:
        dots = fold(dots, instruction)
    return render(dots)


def solve(lines: Sequence[str]) -> Answers:
    dots, folds = parse(lines)
    return part_one(dots, folds), part_two(dots, folds)
