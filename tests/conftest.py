from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for a frozen clock, an in-memory console and a
   temporary log file location.
"""

import io
import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from monitorlog.infra.console import ConsoleSink  # noqa: E402

FIXED_MOMENT = datetime(2024, 3, 9, 7, 5, 3)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
class MemoryConsole(ConsoleSink):
    """ConsoleSink writing to in-memory buffers."""

    def __init__(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        super().__init__(stream=self.out, error_stream=self.err)

    @property
    def lines(self):
        return self.out.getvalue().splitlines()

    @property
    def notices(self):
        return self.err.getvalue().splitlines()


@pytest.fixture
def console() -> MemoryConsole:
    return MemoryConsole()


@pytest.fixture
def fixed_clock():
    """Clock always returning 07:05:03 local time."""
    return lambda: FIXED_MOMENT


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Log file location whose parent directories do not exist yet."""
    return tmp_path / "nested" / "logs" / "monitor.log"
