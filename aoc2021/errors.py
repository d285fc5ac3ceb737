"""aoc2021.errors
==================

Exception types raised while reading puzzle input.
"""

from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Raised when an input line does not match the expected format.

    Parameters
    ----------
    message:
        Human readable description of what was wrong.
    line_number:
        1-based position of the offending line, when known.
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.message = message
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


def parse_int(token: str, line_number: Optional[int] = None) -> int:
    """Convert ``token`` to ``int`` or raise :class:`ParseError`."""

    try:
        return int(token)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"{token!r} is not a number", line_number) from exc


__all__ = ["ParseError", "parse_int"]
