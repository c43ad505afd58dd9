"""Tests for the ``listdelta`` command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from listdelta.cli import app
from listdelta.config import OPLOG_SCHEMA_ID

runner = CliRunner()


def _oplog(tmp_path: Path, operations, initial=None) -> Path:
    path = tmp_path / "ops.json"
    payload = {"schema": OPLOG_SCHEMA_ID, "operations": operations}
    if initial is not None:
        payload["initial"] = initial
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture()
def batch_log(tmp_path: Path) -> Path:
    return _oplog(
        tmp_path,
        [
            {
                "op": "batch",
                "operations": [
                    {"op": "insert", "from_index": 0, "elements": ["B"]},
                    {"op": "remove", "start": 1, "stop": 2},
                ],
            },
            {"op": "reset", "array": ["Z"]},
        ],
        initial=["X", "Y"],
    )


def test_verbose_flag_is_accepted(batch_log: Path) -> None:
    result = runner.invoke(app, ["--verbose", "coalesce", str(batch_log)])

    assert result.exit_code == 0, result.output


def test_coalesce_prints_change_sets(batch_log: Path) -> None:
    result = runner.invoke(app, ["coalesce", str(batch_log)])

    assert result.exit_code == 0, result.output
    assert "0 batch: Inserts([0]), Deletes([0])" in result.output
    assert "1 reset: reload all rows" in result.output


def test_check_verifies_log(batch_log: Path) -> None:
    result = runner.invoke(app, ["check", str(batch_log)])

    assert result.exit_code == 0, result.output
    assert "Verified 2 operations" in result.output


def test_nested_batch_exits_with_error(tmp_path: Path) -> None:
    path = _oplog(tmp_path, [{"op": "batch", "operations": [{"op": "batch", "operations": []}]}])

    result = runner.invoke(app, ["coalesce", str(path)])

    assert result.exit_code == 1
    assert "nested" in result.output


def test_invalid_log_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "ops.json"
    path.write_text(json.dumps({"schema": "nope", "operations": []}), encoding="utf-8")

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_check_reports_out_of_bounds_operation(tmp_path: Path) -> None:
    path = _oplog(tmp_path, [{"op": "remove", "start": 0, "stop": 3}], initial=["a"])

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 1
    assert "Error: operation 0:" in result.output


def test_check_accepts_integral_float_indices(tmp_path: Path) -> None:
    path = _oplog(tmp_path, [{"op": "remove", "start": 0.0, "stop": 1.0}], initial=["a", "b"])

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 0, result.output
    assert "final length 1" in result.output


def test_reversed_remove_exits_with_error(tmp_path: Path) -> None:
    path = _oplog(tmp_path, [{"op": "remove", "start": 2, "stop": 1}], initial=["a", "b"])

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 1
    assert "before its start" in result.output
