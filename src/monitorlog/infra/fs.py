from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the composite "create parent directories, then append" primitive
used by the append sink. Every operation here is idempotent and reports
failure through an AppendResult instead of raising.
"""

import logging
import os

from monitorlog.domain.results import AppendResult, append_failed, append_ok

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DIRECTORY MANAGEMENT
# -----------------------------------------------------------------------------

def ensure_parent_dir(file_path: str) -> None:
    """
    Create the parent directory hierarchy of a target file if absent.

    Args:
        file_path: Path of the file about to be written.

    Raises:
        OSError: If the hierarchy cannot be created.
    """
    parent = os.path.dirname(os.path.abspath(file_path))
    if parent and not os.path.isdir(parent):
        os.makedirs(parent, exist_ok=True)


# -----------------------------------------------------------------------------
# APPEND API
# -----------------------------------------------------------------------------

def append_line(file_path: str, line: str) -> AppendResult:
    """
    Append one newline-terminated line of UTF-8 text to a file.

    Missing parent directories and the file itself are created on demand.
    The line is emitted with a single write call so it is never split
    between two writers.

    Args:
        file_path: Destination log file.
        line: Text without trailing newline.

    Returns:
        AppendResult: Outcome of the append; never raises for I/O errors.
    """
    try:
        ensure_parent_dir(file_path)
        with open(file_path, "a", encoding="utf-8") as out:
            out.write(f"{line}\n")
        return append_ok(file_path)
    except (OSError, UnicodeError) as e:
        logger.debug(f"Append to '{file_path}' failed: {e}")
        return append_failed(file_path, e)
