"""Day 14: Extended Polymerization.

Explicit string expansion doubles the polymer every step, so the counting
solution tracks how many times each adjacent pair occurs instead. The string
form (:func:`step`) is kept for inspecting the first few steps.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence, Tuple

from ..constants import POLYMER_STEPS
from ..errors import ParseError
from ..inputs import split_sections
from ..types import Answers

Rules = Dict[str, str]


def parse_rule(line: str, line_number: int) -> Tuple[str, str]:
    """Parse ``"AB -> C"``."""

    tokens = line.split()
    if len(tokens) != 3 or tokens[1] != "->" or len(tokens[0]) != 2 or len(tokens[2]) != 1:
        raise ParseError(f"expected 'AB -> C', got {line!r}", line_number)
    return tokens[0], tokens[2]


def parse(lines: Sequence[str]) -> Tuple[str, Rules]:
    sections = split_sections(lines)
    if len(sections) != 2 or len(sections[0][1]) != 1:
        raise ParseError("expected a template line, a blank line, then insertion rules")
    (template_line, (template,)), (first_rule, rule_lines) = sections
    template = template.strip()
    if len(template) < 2:
        raise ParseError("template needs at least two elements", template_line)
    rules: Rules = {}
    for number, line in enumerate(rule_lines, start=first_rule):
        pair, insert = parse_rule(line, number)
        rules[pair] = insert
    return template, rules


def step(polymer: str, rules: Rules) -> str:
    """Apply one round of pair insertion to ``polymer``."""

    out = []
    for left, right in zip(polymer, polymer[1:]):
        out.append(left)
        out.append(rules.get(left + right, ""))
    out.append(polymer[-1])
    return "".join(out)


def element_counts(template: str, rules: Rules, steps: int) -> Counter:
    """Element frequencies after ``steps`` rounds, via pair counting."""

    pairs = Counter(a + b for a, b in zip(template, template[1:]))
    for _ in range(steps):
        grown: Counter = Counter()
        for pair, count in pairs.items():
            insert = rules.get(pair)
            if insert is None:
                grown[pair] += count
            else:
                grown[pair[0] + insert] += count
                grown[insert + pair[1]] += count
        pairs = grown
    counts: Counter = Counter()
    for pair, count in pairs.items():
        counts[pair[0]] += count
    # the last element never starts a pair and never changes
    counts[template[-1]] += 1
    return counts


def spread(template: str, rules: Rules, steps: int) -> int:
    """Most common element count minus least common element count."""

    counts = element_counts(template, rules, steps).values()
    return max(counts) - min(counts)


def part_one(template: str, rules: Rules) -> int:
    return spread(template, rules, POLYMER_STEPS[0])


def part_two(template: str, rules: Rules) -> int:
    return spread(template, rules, POLYMER_STEPS[1])


def solve(lines: Sequence[str]) -> Answers:
    template, rules = parse(lines)
    return part_one(template, rules), part_two(template, rules)
