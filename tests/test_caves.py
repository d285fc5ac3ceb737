from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc2021.caves import CaveGraph, NodeKind, classify, count_paths, find_paths
from aoc2021.errors import ParseError

SMALL = ["start-A", "start-b", "A-c", "A-b", "b-d", "A-end", "b-end"]
MEDIUM = [
    "dc-end", "HN-start", "start-kj", "dc-start", "dc-HN",
    "LN-dc", "HN-end", "kj-sa", "kj-HN", "kj-dc",
]
LARGE = [
    "fs-end", "he-DX", "fs-he", "start-DX", "pj-DX", "end-zg",
    "zg-sl", "zg-pj", "pj-he", "RW-he", "fs-DX", "pj-RW",
    "zg-RW", "start-pj", "he-WI", "zg-he", "pj-fs", "start-RW",
]


def test_classify_nodes():
    assert classify("start") is NodeKind.START
    assert classify("end") is NodeKind.END
    assert classify("HN") is NodeKind.BIG
    assert classify("kj") is NodeKind.SMALL


def test_graph_adjacency():
    graph = CaveGraph.from_lines(SMALL)
    assert graph.adjacent("start") == ["A", "b"]
    assert "end" in graph.adjacent("A")
    assert graph.nodes == ["A", "b", "c", "d", "end", "start"]


@pytest.mark.parametrize(
    "lines, once, twice",
    [(SMALL, 10, 36), (MEDIUM, 19, 103), (LARGE, 226, 3509)],
)
def test_count_paths_examples(lines, once, twice):
    graph = CaveGraph.from_lines(lines)
    assert count_paths(graph) == once
    assert count_paths(graph, allow_twice=True) == twice


def test_revisit_rules_on_minimal_graph():
    graph = CaveGraph.from_lines(["start-A", "start-b", "A-b", "A-end", "b-end"])
    once = find_paths(graph)
    twice = find_paths(graph, allow_twice=True)
    assert len(once) == 5
    assert len(twice) == 9
    assert set(once) <= set(twice)
    assert ("start", "b", "A", "b", "end") in twice
    assert ("start", "b", "A", "b", "end") not in once


def test_paths_never_return_to_start():
    graph = CaveGraph.from_lines(SMALL)
    for path in find_paths(graph, allow_twice=True):
        assert path[0] == "start" and path[-1] == "end"
        assert path.count("start") == 1
        smalls = [node for node in path if classify(node) is NodeKind.SMALL]
        repeated = [node for node in set(smalls) if smalls.count(node) > 1]
        assert len(repeated) <= 1
        assert all(smalls.count(node) <= 2 for node in smalls)


@pytest.mark.parametrize("lines", [["start-"], ["startA"], ["A-B", "start-A"], ["a-b"]])
def test_bad_graph_input(lines):
    with pytest.raises(ParseError):
        CaveGraph.from_lines(lines)
