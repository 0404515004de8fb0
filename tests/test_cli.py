import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from fcfs_scheduler.batch import JobBatch
from fcfs_scheduler.cli import _interactive_menu, main


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def _workload(tmp_path: Path, entries) -> Path:
    p = tmp_path / "w.json"
    p.write_text(json.dumps(entries))
    return p


def test_run_prints_averages_and_writes_output(tmp_path: Path):
    wl = _workload(tmp_path, [
        {"id": "P1", "arrival_time": 0, "burst_time": 5},
        {"id": "P2", "arrival_time": 1, "burst_time": 3},
        {"id": "P3", "arrival_time": 2, "burst_time": 8},
    ])
    out = tmp_path / "out.json"
    console = _console()

    assert main(["run", "-w", str(wl), "-o", str(out)], console=console) == 0

    text = console.file.getvalue()
    assert "3.33" in text
    assert "8.67" in text
    assert json.loads(out.read_text())["jobs"][2]["end_time"] == 16


def test_run_reports_empty_batch(tmp_path: Path):
    console = _console()
    assert main(["run", "-w", str(_workload(tmp_path, []))], console=console) == 1
    assert "No jobs to schedule" in console.file.getvalue()


def test_validate_reports_bad_entry(tmp_path: Path):
    wl = _workload(tmp_path, [{"id": "A", "arrival_time": 0, "burst_time": 0}])
    console = _console()
    assert main(["validate", "-w", str(wl)], console=console) == 1
    assert "Burst time must be positive" in console.file.getvalue()


def test_menu_add_run_and_locked_add():
    answers = iter(["1", "A", "0", "2", "2", "1", "B", "1", "1", "q"])
    console = _console()
    batch = JobBatch(realistic=True)

    _interactive_menu(batch, console, read=lambda prompt: next(answers))

    assert len(batch) == 1
    assert "cannot add jobs once simulation has started" in console.file.getvalue()


def test_menu_rejects_non_numeric_input():
    answers = iter(["1", "A", "soon", "q"])
    console = _console()
    batch = JobBatch()

    _interactive_menu(batch, console, read=lambda prompt: next(answers))

    assert len(batch) == 0
    assert "Please enter valid numbers" in console.file.getvalue()


def test_env_settings_feed_parser_defaults(monkeypatch):
    from fcfs_scheduler.cli import build_parser

    monkeypatch.setenv("FCFS_STEP_DELAY", "0")
    monkeypatch.setenv("FCFS_REALISTIC_MODE", "false")
    parser = build_parser()

    assert parser.parse_args(["run", "-w", "x.json"]).step_delay == 0.0
    assert parser.parse_args(["menu"]).dynamic is True


def test_run_prints_bracketed_job_ids(tmp_path: Path):
    wl = _workload(tmp_path, [
        {"id": "[/bold]", "arrival_time": 0, "burst_time": 2},
        {"id": "[red]", "arrival_time": 1, "burst_time": 1},
    ])
    console = _console()

    assert main(["run", "-w", str(wl)], console=console) == 0
    text = console.file.getvalue()
    assert "[/bold]" in text
    assert "[red]" in text


def test_menu_survives_bracketed_job_id():
    answers = iter(["1", "[/x]", "0", "2", "2", "q"])
    console = _console()
    batch = JobBatch()

    _interactive_menu(batch, console, read=lambda prompt: next(answers))

    assert batch.result is not None
    assert "[/x]" in console.file.getvalue()


def test_run_reports_undecodable_workload(tmp_path: Path):
    wl = tmp_path / "w.csv"
    wl.write_bytes(b"\xff\xfe\x00junk\n")
    console = _console()

    assert main(["run", "-w", str(wl)], console=console) == 1
    assert "not UTF-8" in console.file.getvalue()


def test_unknown_log_level_is_a_usage_error(tmp_path: Path):
    wl = _workload(tmp_path, [{"id": "A", "arrival_time": 0, "burst_time": 1}])
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "loud", "run", "-w", str(wl)], console=_console())
    assert exc_info.value.code == 2


def test_log_level_is_case_insensitive(tmp_path: Path):
    wl = _workload(tmp_path, [{"id": "A", "arrival_time": 0, "burst_time": 1}])
    assert main(["--log-level", "debug", "validate", "-w", str(wl)], console=_console()) == 0
