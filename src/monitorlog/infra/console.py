from __future__ import annotations

"""
Interactive Console Sink.

Thin wrapper over the process standard streams. Streams are resolved at
write time so redirection of sys.stdout / sys.stderr (test capture, CLI
piping) is always honoured.
"""

import os
import sys
from typing import Optional, TextIO

from colorama import just_fix_windows_console

# Enables ANSI processing on legacy Windows consoles; no-op elsewhere
just_fix_windows_console()


def supports_color(stream: Optional[TextIO] = None) -> bool:
    """
    Decide whether ANSI decorations should be emitted on a stream.

    Honours the NO_COLOR convention and requires an interactive terminal.
    """
    if os.environ.get("NO_COLOR"):
        return False
    target = stream if stream is not None else sys.stdout
    isatty = getattr(target, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # Closed stream
        return False


class ConsoleSink:
    """Writes one line per call to stdout and diagnostics to stderr."""

    def __init__(self, stream: Optional[TextIO] = None, error_stream: Optional[TextIO] = None):
        self._stream = stream
        self._error_stream = error_stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def error_stream(self) -> TextIO:
        return self._error_stream if self._error_stream is not None else sys.stderr

    def write_line(self, line: str) -> None:
        out = self.stream
        out.write(f"{line}\n")
        out.flush()

    def notice(self, text: str) -> None:
        """Best-effort secondary diagnostic line."""
        err = self.error_stream
        err.write(f"{text}\n")
        err.flush()
