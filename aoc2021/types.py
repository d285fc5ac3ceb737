"""aoc2021.types
=================

Type aliases shared across the package. Centralising them keeps the engine
modules and the day modules agreeing on what a coordinate or an answer looks
like without importing each other.

Definitions only: importing this module never triggers runtime side effects.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple, Union

# ---------------------------------------------------------------------------
# Grid representations
# ---------------------------------------------------------------------------
Coord = Tuple[int, int]
Rows = List[List[int]]

# ---------------------------------------------------------------------------
# Day solver plumbing
# ---------------------------------------------------------------------------
# Most parts yield an integer; day 13 renders its second answer as text.
Answer = Union[int, str]
Answers = Tuple[Answer, ...]
Solver = Callable[[Sequence[str]], Answers]


__all__ = [
    "Coord",
    "Rows",
    "Answer",
    "Answers",
    "Solver",
]
