from __future__ import annotations

"""
Diagnostics Logging Lifecycle.

Idempotent configuration of the "monitorlog" package logger. The root
logger is never touched: a host application that configures logging on its
own keeps full control, and configure_diagnostics is only an opt-in
convenience (used by the demo CLI).
"""

import logging
import sys
from typing import List

from monitorlog.infra.logging.config import _LEVEL_MAP, PACKAGE_LOGGER_NAME, DiagnosticsConfig
from monitorlog.infra.logging.handlers import (
    _create_console_handler,
    _create_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_monitorlog_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_diagnostics(cfg: DiagnosticsConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach console/file handlers to the package logger.

    Repeated calls are no-ops unless `force` is set, in which case the
    handlers installed previously by this function are replaced.

    Args:
        cfg: Diagnostics configuration.
        force: Re-initialize handlers even if already configured.

    Returns:
        logging.Logger: The package logger.
    """
    pkg = logging.getLogger(PACKAGE_LOGGER_NAME)

    try:
        if getattr(pkg, _CONFIGURED_FLAG_ATTR, False) and not force:
            return pkg

        level_int = _parse_level(cfg.level)
        pkg.setLevel(level_int)
        _remove_our_handlers(pkg)

        handlers_list: List[logging.Handler] = []
        if cfg.console:
            handlers_list.append(_create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))
        if cfg.log_file:
            fh = _create_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            )
            if fh:
                handlers_list.append(fh)

        for h in handlers_list:
            pkg.addHandler(h)

        # Our handlers render the records; avoid duplicates through the root
        pkg.propagate = not handlers_list
        setattr(pkg, _CONFIGURED_FLAG_ATTR, True)
        return pkg

    # Fallback to emergency console logging if the infrastructure fails
    except Exception:
        _remove_our_handlers(pkg)
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
        pkg.addHandler(_tag_handler(sh))
        pkg.warning("Diagnostics setup failed. Switched to emergency console.")
        return pkg


def reset_diagnostics() -> None:
    """Detach every handler installed by configure_diagnostics."""
    pkg = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_our_handlers(pkg)
    pkg.propagate = True
    pkg.setLevel(logging.NOTSET)
    if hasattr(pkg, _CONFIGURED_FLAG_ATTR):
        delattr(pkg, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(pkg: logging.Logger) -> None:
    for h in list(pkg.handlers):
        if _is_our_handler(h):
            pkg.removeHandler(h)
            h.close()
