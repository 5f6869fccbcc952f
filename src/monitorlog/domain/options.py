from __future__ import annotations

"""
Monitor Configuration Models.

Defines the immutable option set consumed by a Monitor instance and the
defaults applied when an option is omitted.
"""

from dataclasses import dataclass
from typing import Optional

from monitorlog.domain.levels import LogLevel

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_LOG_FILE_PATH = "./logs/monitor.log"
DEFAULT_MAX_LABEL_LENGTH = 20
DEFAULT_LOG_LEVEL = LogLevel.DEBUG


# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MonitorOptions:
    """
    Immutable specification of a Monitor instance.

    Attributes:
        enable_file_logging: Duplicate plain output to log_file_path.
        log_file_path: Destination of appended plain lines.
        log_level: Messages ranked below this level are dropped.
        disable_console: Suppress decorated output on stdout.
        max_label_length: Hard cut applied to the label (0 hides it).
        bracket_timestamp: Render the time column as [HH:MM:SS].
        color: Force colour on/off; None detects a capable terminal.
        accent_label: Pin a random label colour once per instance.
    """
    enable_file_logging: bool = False
    log_file_path: str = DEFAULT_LOG_FILE_PATH
    log_level: LogLevel = DEFAULT_LOG_LEVEL
    disable_console: bool = False
    max_label_length: int = DEFAULT_MAX_LABEL_LENGTH

    bracket_timestamp: bool = True
    color: Optional[bool] = None
    accent_label: bool = False
