"""aoc2021.inputs
==================

Helpers for reading puzzle input and splitting it into the shapes the daily
parsers expect.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .errors import ParseError, parse_int


def read_lines(path: str) -> List[str]:
    """Read ``path`` in full and return its lines without line terminators.

    ``OSError`` propagates untouched when the file is missing or unreadable.
    """

    return Path(path).read_text().splitlines()


def strip_blank_edges(lines: Iterable[str]) -> List[str]:
    """Return ``lines`` right-stripped, minus leading and trailing blank lines."""

    stripped = [line.rstrip() for line in lines]
    while stripped and not stripped[-1]:
        stripped.pop()
    while stripped and not stripped[0]:
        stripped.pop(0)
    return stripped


def split_sections(lines: Sequence[str]) -> List[Tuple[int, List[str]]]:
    """Split ``lines`` into groups separated by one or more blank lines.

    Each group comes with the 1-based line number of its first line, counted
    in the original input, so parse errors can point at the right place.
    """

    sections: List[Tuple[int, List[str]]] = []
    start = 0
    current: List[str] = []
    for number, line in enumerate(lines, start=1):
        line = line.rstrip()
        if line.strip():
            if not current:
                start = number
            current.append(line)
        elif current:
            sections.append((start, current))
            current = []
    if current:
        sections.append((start, current))
    return sections


def parse_int_list(text: str, sep: str = ",", line_number: int = 1) -> List[int]:
    """Parse a separator-delimited list of integers."""

    text = text.strip()
    if not text:
        raise ParseError("expected a list of numbers, got an empty line", line_number)
    return [parse_int(token.strip(), line_number) for token in text.split(sep)]


def parse_pair(text: str, sep: str, line_number: int) -> Tuple[str, str]:
    """Split ``text`` on ``sep`` into exactly two non-empty halves."""

    parts = text.split(sep)
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        raise ParseError(f"expected 'a{sep}b', got {text!r}", line_number)
    return parts[0].strip(), parts[1].strip()


__all__ = ["read_lines", "strip_blank_edges", "split_sections", "parse_int_list", "parse_pair"]
