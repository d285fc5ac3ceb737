"""aoc2021.cli
===============

Command-line entry point: run one day's solution against an input file and
print its answers, part one first, one per line.
"""

from __future__ import annotations

import argparse
import time
from typing import List, Optional

from .constants import FAIL_LOG, INPUT_FILE
from .days import SOLVERS, get_solver
from .inputs import read_lines
from .logging_utils import log_failure, report
from .types import Answers


def run_day(day: int, input_path: str = INPUT_FILE) -> Answers:
    """Read ``input_path`` in full and return the answers for ``day``.

    ``OSError`` and :class:`~aoc2021.errors.ParseError` propagate to the
    caller; nothing is printed here.
    """

    solver = get_solver(day)
    return solver(read_lines(input_path))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("aoc2021", description="Run a daily puzzle solution")
    parser.add_argument("day", type=int, choices=sorted(SOLVERS), help="Puzzle day to solve")
    parser.add_argument("--input", default=INPUT_FILE, help="Puzzle input file")
    parser.add_argument("--fail-log", default=FAIL_LOG, help="JSON-lines file recording failed runs")
    parser.add_argument("--verbose", action="store_true", help="Report timing on stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse CLI arguments, solve the requested day, and print the answers.

    Returns the process exit status: 0 on success, 1 when the input cannot be
    read or parsed (no answers are printed in that case).
    """

    args = build_parser().parse_args(argv)
    start = time.perf_counter()
    try:
        answers = run_day(args.day, args.input)
    except (OSError, ValueError) as exc:
        report("ERROR", f"day {args.day} failed on {args.input}: {exc}")
        log_failure(args.day, args.input, exc, path=args.fail_log)
        return 1
    for answer in answers:
        print(answer)
    if args.verbose:
        report("DAY", f"day {args.day} solved in {time.perf_counter() - start:.3f}s")
    return 0


def main_entry() -> None:
    raise SystemExit(main())


__all__ = ["main", "main_entry", "run_day", "build_parser"]
