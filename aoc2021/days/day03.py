"""Day 3: Binary Diagnostic.

Reports are fixed-width binary strings whose width is taken from the input.
Part one builds gamma/epsilon from the most/least common bit in each column;
part two repeatedly filters the reports by bit criteria to find the oxygen
generator and CO2 scrubber ratings.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..errors import ParseError
from ..inputs import strip_blank_edges
from ..types import Answers


def parse(lines: Sequence[str]) -> np.ndarray:
    """Return an ``(n_reports, width)`` array of 0/1 values."""

    rows = []
    width = None
    for number, line in enumerate(strip_blank_edges(lines), start=1):
        line = line.strip()
        if width is None:
            width = len(line)
        if len(line) != width:
            raise ParseError(f"expected {width} bits, got {len(line)}", number)
        if not line or any(char not in "01" for char in line):
            raise ParseError(f"{line!r} is not a binary number", number)
        rows.append([int(char) for char in line])
    if not rows:
        raise ParseError("diagnostic report is empty")
    return np.array(rows, dtype=np.int64)


def to_int(bits: Sequence[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | int(bit)
    return value


def common_bits(report: np.ndarray) -> np.ndarray:
    """Most common bit per column; ties resolve to 1."""

    ones = report.sum(axis=0)
    return (2 * ones >= len(report)).astype(np.int64)


def part_one(report: np.ndarray) -> int:
    gamma_bits = common_bits(report)
    gamma = to_int(gamma_bits)
    epsilon = to_int(1 - gamma_bits)
    return gamma * epsilon


def rating(report: np.ndarray, keep_common: bool) -> int:
    """Filter ``report`` column by column until a single row remains."""

    rows = report
    for column in range(report.shape[1]):
        if len(rows) == 1:
            break
        ones = rows[:, column].sum()
        most = 1 if 2 * ones >= len(rows) else 0
        wanted = most if keep_common else 1 - most
        filtered = rows[rows[:, column] == wanted]
        # every remaining row shares this bit; nothing to discard
        if len(filtered):
            rows = filtered
    return to_int(rows[0])


def part_two(report: np.ndarray) -> int:
    return rating(report, keep_common=True) * rating(report, keep_common=False)


def solve(lines: Sequence[str]) -> Answers:
    report = parse(lines)
    return part_one(report), part_two(report)
