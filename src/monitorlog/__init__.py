from __future__ import annotations

"""
monitorlog: per-instance leveled logging with aligned columns.

    from monitorlog import Monitor

    log = Monitor("Worker", enable_file_logging=True, log_level="info")
    log.info("started")
"""

import logging

from monitorlog.core.formatter import strip_ansi
from monitorlog.core.monitor import Monitor
from monitorlog.domain.levels import LogLevel
from monitorlog.domain.options import MonitorOptions

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Monitor",
    "MonitorOptions",
    "LogLevel",
    "strip_ansi",
    "__version__",
]
