"""aoc2021.caves
================

Cave graph and path enumeration. Nodes are classified once at load time:
``start`` and ``end`` are special, names written entirely in upper case are big
caves that may be revisited freely, and everything else is a small cave whose
revisits are limited by the active rule.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

from .errors import ParseError
from .inputs import parse_pair, strip_blank_edges

START = "start"
END = "end"


class NodeKind(Enum):
    START = "start"
    END = "end"
    BIG = "big"
    SMALL = "small"


def classify(name: str) -> NodeKind:
    """Return the :class:`NodeKind` for a cave name."""

    if name == START:
        return NodeKind.START
    if name == END:
        return NodeKind.END
    if name.isupper():
        return NodeKind.BIG
    return NodeKind.SMALL


@dataclass
class CaveGraph:
    """Undirected cave graph stored as an adjacency map."""

    adjacency: Dict[str, Set[str]] = field(default_factory=lambda: defaultdict(set))

    def add_edge(self, left: str, right: str) -> None:
        self.adjacency[left].add(right)
        self.adjacency[right].add(left)

    @property
    def nodes(self) -> List[str]:
        return sorted(self.adjacency)

    def adjacent(self, name: str) -> List[str]:
        """Neighbours of ``name`` in a stable order."""

        return sorted(self.adjacency.get(name, ()))

    def kind(self, name: str) -> NodeKind:
        return classify(name)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "CaveGraph":
        """Parse ``a-b`` edge lines.

        Raises
        ------
        ParseError
            If a line is not two non-empty names joined by ``-``, two big caves
            are joined directly (path counts would be unbounded), or the graph
            lacks a ``start`` node.
        """

        graph = cls()
        for number, line in enumerate(strip_blank_edges(lines), start=1):
            left, right = parse_pair(line.strip(), "-", number)
            if classify(left) is NodeKind.BIG and classify(right) is NodeKind.BIG:
                raise ParseError(f"big caves {left!r} and {right!r} are adjacent", number)
            graph.add_edge(left, right)
        if START not in graph.adjacency:
            raise ParseError("cave graph has no 'start' node")
        return graph


# A candidate path: nodes visited so far, the small caves among them, and
# whether a small cave has already been visited twice.
_Candidate = Tuple[Tuple[str, ...], FrozenSet[str], bool]


def find_paths(graph: CaveGraph, allow_twice: bool = False) -> List[Tuple[str, ...]]:
    """Enumerate the distinct paths from ``start`` to ``end``.

    The frontier is expanded breadth-first. Returning to ``start`` is never
    allowed, reaching ``end`` completes a path, and big caves can always be
    entered. With ``allow_twice=False`` each small cave is visited at most once
    per path; with ``allow_twice=True`` a single small cave per path may be
    visited a second time.
    """

    completed: List[Tuple[str, ...]] = []
    frontier: List[_Candidate] = [((START,), frozenset(), False)]
    while frontier:
        next_frontier: List[_Candidate] = []
        for path, smalls, twice in frontier:
            for name in graph.adjacent(path[-1]):
                kind = graph.kind(name)
                if kind is NodeKind.START:
                    continue
                if kind is NodeKind.END:
                    completed.append(path + (name,))
                elif kind is NodeKind.BIG:
                    next_frontier.append((path + (name,), smalls, twice))
                elif name not in smalls:
                    next_frontier.append((path + (name,), smalls | {name}, twice))
                elif allow_twice and not twice:
                    next_frontier.append((path + (name,), smalls, True))
        frontier = next_frontier
    return completed


def count_paths(graph: CaveGraph, allow_twice: bool = False) -> int:
    """Number of paths :func:`find_paths` would return."""

    return len(find_paths(graph, allow_twice))


__all__ = ["START", "END", "NodeKind", "classify", "CaveGraph", "find_paths", "count_paths"]
