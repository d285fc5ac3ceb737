"""Day 4, Giant Squid: play bingo against every board at once."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..errors import ParseError, parse_int
from ..inputs import parse_int_list, split_sections
from ..types import Answers


@dataclass
class Board:
    """Square bingo board with a parallel mask of marked cells."""

    numbers: np.ndarray
    marked: Optional[np.ndarray] = field(default=None)

    def __post_init__(self) -> None:
        if self.marked is None:
            self.marked = np.zeros(self.numbers.shape, dtype=bool)

    def mark(self, number: int) -> None:
        self.marked |= self.numbers == number

    def complete(self) -> bool:
        return bool(self.marked.all(axis=0).any() or self.marked.all(axis=1).any())

    def unmarked_sum(self) -> int:
        return int(self.numbers[~self.marked].sum())


def parse_board(lines: Sequence[str], first_line: int, size: Optional[int] = None) -> Board:
    """Parse a square board; ``size`` defaults to the board's own row count."""

    size = size or len(lines)
    if len(lines) != size:
        raise ParseError(f"expected {size} board rows, got {len(lines)}", first_line)
    rows = []
    for offset, line in enumerate(lines):
        tokens = line.split()
        if len(tokens) != size:
            raise ParseError(f"expected {size} numbers, got {len(tokens)}", first_line + offset)
        rows.append([parse_int(token, first_line + offset) for token in tokens])
    return Board(np.array(rows, dtype=np.int64))


def parse(lines: Sequence[str]) -> Tuple[List[int], List[Board]]:
    sections = split_sections(lines)
    if not sections or len(sections[0][1]) != 1:
        raise ParseError("expected a single line of drawn numbers", sections[0][0] if sections else None)
    draw_line, (draw_text,) = sections[0]
    draws = parse_int_list(draw_text, line_number=draw_line)
    boards: List[Board] = []
    size = None
    for first_line, section in sections[1:]:
        board = parse_board(section, first_line, size)
        size = board.numbers.shape[0]
        boards.append(board)
    if not boards:
        raise ParseError("no boards found")
    return draws, boards


def play(draws: Sequence[int], boards: Sequence[Board]) -> List[int]:
    """Scores of the boards in the order they win.

    A board stops taking part once it has won; its score is the winning number
    times the sum of its unmarked cells. Marks are kept on fresh copies, so
    ``boards`` can be played again.
    """

    scores: List[int] = []
    remaining = [Board(board.numbers) for board in boards]
    for number in draws:
        still_playing = []
        for board in remaining:
            board.mark(number)
            if board.complete():
                scores.append(number * board.unmarked_sum())
            else:
                still_playing.append(board)
        remaining = still_playing
        if not remaining:
            break
    if not scores:
        raise ValueError("no board wins with the drawn numbers")
    return scores


def part_one(draws: Sequence[int], boards: Sequence[Board]) -> int:
    return play(draws, boards)[0]


def part_two(draws: Sequence[int], boards: Sequence[Board]) -> int:
    return play(draws, boards)[-1]


def solve(lines: Sequence[str]) -> Answers:
    draws, boards = parse(lines)
    scores = play(draws, boards)
    return scores[0], scores[-1]
