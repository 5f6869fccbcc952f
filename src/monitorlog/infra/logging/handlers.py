from __future__ import annotations

"""
Diagnostics Handler Factories.

Creates the handlers attached by configure_diagnostics and tags them so
that reconfiguration only ever removes handlers this package installed.
"""

import logging
import sys
from typing import Optional

from monitorlog.infra.fs import ensure_parent_dir

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_monitorlog_handler"


def _tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_console_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    return _tag_handler(sh)


def _create_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
) -> Optional[logging.FileHandler]:
    """
    Initialize a FileHandler, creating the parent directory first.

    Returns:
        Optional[logging.FileHandler]: Configured handler or None if I/O fails.
    """
    try:
        ensure_parent_dir(log_file)
        fh = logging.FileHandler(log_file, encoding="utf-8", delay=True)
        fh.setLevel(level_int)
        fh.setFormatter(formatter)
        _tag_handler(fh)
        return fh
    except OSError as e:
        sys.stderr.write(f"WARNING: Diagnostics persistence failure at '{log_file}': {e}\n")
        return None
