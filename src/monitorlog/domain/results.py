from __future__ import annotations

"""
Append Outcome Models.

The append sink never raises into the logging call path; each physical
write is instead summarized by one of these result objects.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AppendResult:
    """
    Outcome of a single line append.

    Attributes:
        ok: True if the line was fully written.
        path: Target file of the append.
        error: Descriptive error message in case of failure.
    """
    ok: bool
    path: str
    error: Optional[str] = None


def append_ok(path: str) -> AppendResult:
    return AppendResult(ok=True, path=path)


def append_failed(path: str, error: BaseException) -> AppendResult:
    """Build a failed result carrying a readable error description."""
    detail = str(error) or type(error).__name__
    return AppendResult(ok=False, path=path, error=detail)
