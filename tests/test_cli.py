from __future__ import annotations

import io
from pathlib import Path

import pytest

from numshift.cli import main as cli
from numshift.core.errors import DirectoryScanError


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    for var in ("NUMSHIFT_CONSOLE__PAUSE_ON_EXIT", "NUMSHIFT_CONSOLE__LOG_FILE", "NUMSHIFT_SCAN__INT_BITS"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


def run_with_input(monkeypatch, text: str, argv: list[str] | None = None) -> int:
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return cli.main(argv or [])


def names_in(directory: Path) -> set[str]:
    return {p.name for p in directory.iterdir()}


def test_full_run_renames(workdir: Path, monkeypatch, capsys):
    for name in ["5.txt", "7.txt", "readme.md"]:
        (workdir / name).write_text(name)

    code = run_with_input(monkeypatch, "2\n0\n")

    assert code == 0
    assert names_in(workdir) == {"9.txt", "7.txt", "readme.md"}
    out = capsys.readouterr().out
    assert "This program renames files in the current directory." in out
    assert "Enter an integer 'a' (the number to add for renaming): " in out
    assert "Enter an integer 'b' (the minimum original number to rename): " in out
    assert f"Searching for files in: {workdir}" in out
    assert "Sorting files from highest original number to lowest" in out
    assert out.index("Renamed '7.txt' to '9.txt'") < out.index("Renamed '5.txt' to '7.txt'")
    assert "Renaming process complete." in out


def test_no_matching_files_exits_zero(workdir: Path, monkeypatch, capsys):
    (workdir / "notes.txt").write_text("x")

    code = run_with_input(monkeypatch, "1 0\n")

    assert code == 0
    assert "No files matching 'NUMBER.EXTENSION' found" in capsys.readouterr().out
    assert names_in(workdir) == {"notes.txt"}


def test_invalid_offset_exits_one_without_changes(workdir: Path, monkeypatch, capsys):
    (workdir / "5.txt").write_text("x")

    code = run_with_input(monkeypatch, "abc\n0\n")

    assert code == 1
    assert names_in(workdir) == {"5.txt"}
    assert "Invalid input for 'a'" in capsys.readouterr().err


def test_invalid_minimum_exits_one(workdir: Path, monkeypatch, capsys):
    (workdir / "5.txt").write_text("x")

    code = run_with_input(monkeypatch, "1\nzz\n")

    assert code == 1
    assert names_in(workdir) == {"5.txt"}
    assert "Invalid input for 'b'" in capsys.readouterr().err


def test_directory_failure_exits_one(workdir: Path, monkeypatch, capsys):
    (workdir / "5.txt").write_text("x")

    def fail(directory, logger, settings=None):
        raise DirectoryScanError(str(directory), "Permission denied")

    monkeypatch.setattr(cli, "scan_directory", fail)
    code = run_with_input(monkeypatch, "1 0\n")

    assert code == 1
    assert names_in(workdir) == {"5.txt"}
    assert "Permission denied" in capsys.readouterr().err


def test_rename_failures_do_not_change_exit_code(workdir: Path, monkeypatch, capsys):
    for name in ["3.txt", "5.txt"]:
        (workdir / name).write_text(name)

    code = run_with_input(monkeypatch, "-2 4\n")

    assert code == 0
    assert names_in(workdir) == {"3.txt", "5.txt"}
    captured = capsys.readouterr()
    assert "Error renaming '5.txt' to '3.txt'" in captured.err
    assert "Failed: 1" in captured.out


def test_log_file_option(workdir: Path, monkeypatch):
    (workdir / "1.txt").write_text("x")
    log_file = workdir / "logs" / "run.log"

    code = run_with_input(monkeypatch, "1 0\n", ["--log-file", str(log_file)])

    assert code == 0
    content = log_file.read_text()
    assert "Renamed '1.txt' to '2.txt'" in content
    assert "Renaming process complete." in content


def test_pause_ignored_without_terminal(workdir: Path, monkeypatch):
    (workdir / "1.txt").write_text("x")

    code = run_with_input(monkeypatch, "1 0\n", ["--pause-on-exit"])

    assert code == 0
    assert names_in(workdir) == {"2.txt"}
