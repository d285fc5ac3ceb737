"""aoc2021.constants
====================

Global constants shared by the daily solutions. Keeping them here avoids import
cycles between the engine modules and the day modules, and gives the CLI one
place to look up defaults it can override.
"""

from __future__ import annotations

INPUT_FILE = "input"
FAIL_LOG = "failed_runs.jsonl"

# Grid engine
BARRIER_VALUE = 9
FLASH_THRESHOLD = 9
TILE_FACTOR = 5

# Round counts
LANTERNFISH_DAYS = (80, 256)
POLYMER_STEPS = (10, 40)
FLASH_ROUNDS = 100

__all__ = [
    "INPUT_FILE",
    "FAIL_LOG",
    "BARRIER_VALUE",
    "FLASH_THRESHOLD",
    "TILE_FACTOR",
    "LANTERNFISH_DAYS",
    "POLYMER_STEPS",
    "FLASH_ROUNDS",
]
