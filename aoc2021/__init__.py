"""Public package interface for aoc2021."""

from .cli import main, run_day
from .days import SOLVERS, get_solver

__all__ = ["main", "run_day", "SOLVERS", "get_solver"]
