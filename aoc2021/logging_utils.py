"""aoc2021.logging_utils
=========================

Simple logging utilities: bracket-tagged console messages and a JSON-lines
record of failed runs for later inspection.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .constants import FAIL_LOG


def _now_iso() -> str:
    """Return the current UTC timestamp in ISO-8601 format."""

    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def report(tag: str, message: str) -> None:
    """Print ``message`` to stderr prefixed with ``[tag]``."""

    print(f"[{tag}] {message}", file=sys.stderr)


def log_failure(day: int, input_path: str, exc: BaseException, path: Optional[str] = None) -> None:
    """Append a JSON line describing a failed run to :data:`FAIL_LOG`."""

    entry = {
        "day": day,
        "input": str(input_path),
        "error_type": type(exc).__name__,
        "message": str(exc),
        "timestamp": _now_iso(),
    }
    with Path(path or FAIL_LOG).open("a") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["report", "log_failure"]
