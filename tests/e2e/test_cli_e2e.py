from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the demo entry point in a separate process and validates exit
codes, stream output and the log file written before exit.
"""

import os
import re
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"


def run_cli(args: List[str], cwd: Optional[Path] = None) -> "subprocess.CompletedProcess[str]":
    """
    Execute `python -m monitorlog` with 'src' injected into PYTHONPATH.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env.pop("NO_COLOR", None)

    cmd = [sys.executable, "-m", "monitorlog"] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_sample_walkthrough(tmp_path: Path) -> None:
    result = run_cli(["--label", "MyClass"], cwd=tmp_path)

    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 4
    # Piped stdout is not a terminal: no colour
    assert "\x1b" not in result.stdout
    assert re.match(r"^\[\d{2}:\d{2}:\d{2}\] MyClass Debug This is a debug message$", lines[0])
    assert lines[3].endswith("MyClass Error This is an error message")


def test_level_filter_and_file_output(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "example.log"
    result = run_cli([
        "--label", "Filtered",
        "--level", "warn",
        "--log-file", str(log_file),
        "-m", "debug:hidden",
        "-m", "info:hidden",
        "-m", "warn:This warning will appear",
        "-m", "error:This error will appear",
    ])

    assert result.returncode == 0
    assert "hidden" not in result.stdout
    assert len(result.stdout.splitlines()) == 2

    file_lines = log_file.read_text(encoding="utf-8").splitlines()
    assert file_lines == result.stdout.splitlines()


def test_invalid_level_exits_with_error() -> None:
    result = run_cli(["--level", "loud"])
    assert result.returncode == 2
    assert "log_level" in result.stderr


def test_debug_flag_prints_diagnostics(tmp_path: Path) -> None:
    result = run_cli(["--debug", "--log-file", str(tmp_path / "d.log"), "-m", "hi"])

    assert result.returncode == 0
    assert "monitorlog" in result.stderr
    assert "DEBUG" in result.stderr
