from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc2021.cli import main, run_day
from aoc2021.errors import ParseError
from aoc2021.logging_utils import log_failure

HEIGHTMAP = "2199943210\n3987894921\n9856789892\n8767896789\n9899965678\n"


def write_input(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "input"
    path.write_text(text)
    return path


def test_main_prints_both_answers(tmp_path: Path, capsys):
    path = write_input(tmp_path, HEIGHTMAP)
    status = main(["9", "--input", str(path), "--fail-log", str(tmp_path / "fail.jsonl")])
    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["15", "1134"]
    assert not (tmp_path / "fail.jsonl").exists()


def test_main_verbose_reports_on_stderr(tmp_path: Path, capsys):
    path = write_input(tmp_path, "3,4,3,1,2\n")
    assert main(["6", "--input", str(path), "--verbose"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["5934", "26984457539"]
    assert captured.err.startswith("[DAY] day 6 solved")


def test_main_parse_failure_prints_no_answer(tmp_path: Path, capsys):
    path = write_input(tmp_path, "2199943210\n39878x4921\n")
    fail_log = tmp_path / "fail.jsonl"
    status = main(["9", "--input", str(path), "--fail-log", str(fail_log)])
    assert status == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[ERROR]" in captured.err
    entry = json.loads(fail_log.read_text().splitlines()[0])
    assert entry["day"] == 9
    assert entry["error_type"] == "ParseError"
    assert "line 2" in entry["message"]


def test_main_missing_file(tmp_path: Path, capsys):
    fail_log = tmp_path / "fail.jsonl"
    status = main(["1", "--input", str(tmp_path / "nope"), "--fail-log", str(fail_log)])
    assert status == 1
    assert capsys.readouterr().out == ""
    entry = json.loads(fail_log.read_text())
    assert entry["error_type"] == "FileNotFoundError"


def test_main_rejects_unknown_day():
    with pytest.raises(SystemExit):
        main(["42"])


def test_run_day_propagates_errors(tmp_path: Path):
    path = write_input(tmp_path, "forward 5\nsideways 2\n")
    with pytest.raises(ParseError):
        run_day(2, str(path))
    with pytest.raises(OSError):
        run_day(2, str(tmp_path / "missing"))


def test_log_failure_appends(tmp_path: Path):
    fail_log = tmp_path / "fail.jsonl"
    log_failure(3, "a", ParseError("bad"), path=str(fail_log))
    log_failure(4, "b", OSError("gone"), path=str(fail_log))
    entries = [json.loads(line) for line in fail_log.read_text().splitlines()]
    assert [entry["day"] for entry in entries] == [3, 4]
    assert entries[0]["message"] == "bad"
    assert entries[1]["timestamp"].endswith("+00:00")
