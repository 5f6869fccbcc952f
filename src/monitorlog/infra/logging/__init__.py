from __future__ import annotations

from .config import PACKAGE_LOGGER_NAME, DiagnosticsConfig
from .core import configure_diagnostics, get_logger, reset_diagnostics

__all__ = [
    "DiagnosticsConfig",
    "PACKAGE_LOGGER_NAME",
    "configure_diagnostics",
    "get_logger",
    "reset_diagnostics",
]
