from __future__ import annotations

"""
Diagnostics Configuration Models.

Settings for the package's own stdlib logging output (option warnings,
sink worker lifecycle, append failures). Unrelated to the lines a Monitor
produces.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

PACKAGE_LOGGER_NAME = "monitorlog"


@dataclass(frozen=True)
class DiagnosticsConfig:
    """
    Immutable specification of the diagnostics logger.

    Attributes:
        level: Minimum severity level to capture.
        console: Emit diagnostics on stderr.
        log_file: Optional path for persistent diagnostics.
        console_fmt: Structural format for terminal output.
        file_fmt: Structural format for file entries.
        datefmt: Timestamp format for file entries.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    console_fmt: str = "%(levelname)s | %(name)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
