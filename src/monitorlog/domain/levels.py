from __future__ import annotations

"""
Severity Level Definitions.

Declares the closed set of message levels understood by a Monitor together
with their numeric ranks and display names. Ranks form a strict total
order: debug < info < warn < error.
"""

from enum import Enum
from typing import Dict, Optional


class LogLevel(str, Enum):
    """Message severity accepted by the Monitor entry points."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return LEVEL_RANKS[self]

    @property
    def display_name(self) -> str:
        return LEVEL_NAMES[self]


LEVEL_RANKS: Dict[LogLevel, int] = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
}

LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "Debug",
    LogLevel.INFO: "Info",
    LogLevel.WARN: "Warn",
    LogLevel.ERROR: "Error",
}

# Longest display name ("Debug" / "Error")
LEVEL_COLUMN_WIDTH: int = max(len(name) for name in LEVEL_NAMES.values())

# Accepted spellings besides the canonical enum values
_LEVEL_ALIASES: Dict[str, LogLevel] = {
    "warning": LogLevel.WARN,
    "err": LogLevel.ERROR,
}


def parse_level(value: object) -> Optional[LogLevel]:
    """
    Resolve a level from an enum member or a case-insensitive name.

    Args:
        value: LogLevel instance or string such as "WARN" / "warning".

    Returns:
        Optional[LogLevel]: The matching level, or None if unrecognized.
    """
    if isinstance(value, LogLevel):
        return value
    if not isinstance(value, str):
        return None

    key = value.strip().lower()
    try:
        return LogLevel(key)
    except ValueError:
        return _LEVEL_ALIASES.get(key)
