"""Unit tests for the JSON lines logger."""

import json
from pathlib import Path

from logger.logger import JSONLogger
from simulator.symbols import ControlState
from simulator.trace import TraceRecord


def read_lines(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_creates_output_directory(tmp_path):
    out = tmp_path / "nested" / "logs"
    JSONLogger(str(out))
    assert out.is_dir()


def test_log_appends_to_main_log(tmp_path):
    logger = JSONLogger(str(tmp_path), "adder_")
    logger.log({"a": "1"})
    logger.log({"a": "10"})
    logger.log({"a": "11"})

    assert Path(logger.current_log).name == f"adder_{logger.today}.jsonl"
    assert read_lines(logger.current_log) == [{"a": "1"}, {"a": "10"}, {"a": "11"}]


def test_log_trace_writes_records_with_run_id(tmp_path):
    logger = JSONLogger(str(tmp_path))
    records = [
        TraceRecord(0, ("_", "1"), 0, ControlState.FIND_PLUS, False),
        TraceRecord(1, ("_", "1"), 1, ControlState.HALT, True),
    ]
    path = logger.log_trace(records, run_id="abc")

    lines = read_lines(path)
    assert Path(path).name == f"trace_{logger.today}.jsonl"
    assert [line["state"] for line in lines] == ["FindPlus", "Halt"]
    assert all(line["run_id"] == "abc" for line in lines)


def test_results_and_failures_go_to_separate_files(tmp_path):
    logger = JSONLogger(str(tmp_path))
    results_path = logger.log_results([{"correct": True}])
    failures_path = logger.log_failures([{"correct": False}])

    assert results_path != failures_path
    assert read_lines(results_path) == [{"correct": True}]
    assert read_lines(failures_path) == [{"correct": False}]
