"""Day 2, Dive!: follow submarine steering commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..errors import ParseError, parse_int
from ..inputs import strip_blank_edges
from ..types import Answers

DIRECTIONS = ("forward", "down", "up")


@dataclass(frozen=True)
class Command:
    direction: str
    distance: int


def parse_command(line: str, line_number: int) -> Command:
    """Parse ``"<direction> <distance>"``."""

    tokens = line.split()
    if len(tokens) != 2:
        raise ParseError(f"expected '<direction> <distance>', got {line!r}", line_number)
    direction, distance = tokens
    if direction not in DIRECTIONS:
        raise ParseError(f"{direction!r} is not a valid command", line_number)
    return Command(direction, parse_int(distance, line_number))


def parse(lines: Sequence[str]) -> List[Command]:
    return [parse_command(line, number) for number, line in enumerate(strip_blank_edges(lines), start=1)]


def track(commands: Sequence[Command]) -> int:
    """Product of horizontal position and depth, moving directly."""

    position = depth = 0
    for command in commands:
        if command.direction == "forward":
            position += command.distance
        elif command.direction == "down":
            depth += command.distance
        else:
            depth -= command.distance
    return position * depth


def aim(commands: Sequence[Command]) -> int:
    """Product of horizontal position and depth, where up/down adjust aim."""

    position = depth = heading = 0
    for command in commands:
        if command.direction == "forward":
            position += command.distance
            depth += heading * command.distance
        elif command.direction == "down":
            heading += command.distance
        else:
            heading -= command.distance
    return position * depth


def part_one(commands: Sequence[Command]) -> int:
    return track(commands)


def part_two(commands: Sequence[Command]) -> int:
    return aim(commands)


def solve(lines: Sequence[str]) -> Answers:
    commands = parse(lines)
    return part_one(commands), part_two(commands)
