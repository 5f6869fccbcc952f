from __future__ import annotations

"""
Monitor Orchestrator.

Public entry point of the package. A Monitor owns its resolved options, its
column layout and (when file logging is enabled) its own sequential append
sink. Every log call follows the same dispatch:

1. drop the record if its level ranks below the configured threshold;
2. read the clock once and render HH:MM:SS;
3. render decorated and plain lines from the same tuple;
4. write the decorated line to the console (plain when colour is off);
5. enqueue the plain line on the append sink.

Log calls never raise and never wait for file I/O.
"""

import logging
from datetime import datetime
from typing import Any, Callable, List, Optional

from monitorlog.core.formatter import (
    ColumnLayout,
    build_layout,
    format_timestamp,
    render_pair,
)
from monitorlog.core.validator import validate_options
from monitorlog.domain.levels import LogLevel
from monitorlog.domain.options import MonitorOptions
from monitorlog.domain.results import AppendResult
from monitorlog.infra.console import ConsoleSink, supports_color
from monitorlog.infra.sink import SequentialAppendSink

logger = logging.getLogger(__name__)

NOTICE_PREFIX = "[Monitor]"


class Monitor:
    """
    Per-instance leveled logger with aligned columns.

    Args:
        label: Optional instance identifier rendered as its own column.
        options: MonitorOptions or dict of option values.
        strict: Raise on invalid options instead of falling back.
        console: Console sink override (defaults to process stdout/stderr).
        clock: Wall-clock source returning local datetimes.
        **overrides: Individual options applied on top of `options`.
    """

    def __init__(
            self,
            label: Optional[str] = None,
            options: Any = None,
            *,
            strict: bool = False,
            console: Optional[ConsoleSink] = None,
            clock: Optional[Callable[[], datetime]] = None,
            **overrides: Any,
    ):
        self._options, self._warnings = validate_options(options, strict=strict, **overrides)
        opts = self._options

        self._layout: ColumnLayout = build_layout(
            label,
            opts.max_label_length,
            bracket_timestamp=opts.bracket_timestamp,
            accent_label=opts.accent_label,
        )
        self._threshold = opts.log_level.rank
        self._clock = clock or datetime.now

        self._console = console or ConsoleSink()
        self._console_enabled = not opts.disable_console
        self._use_color = opts.color if opts.color is not None else supports_color(self._console.stream)

        self._sink: Optional[SequentialAppendSink] = None
        if opts.enable_file_logging:
            self._sink = SequentialAppendSink(
                opts.log_file_path,
                on_failure=self._on_append_failure,
                name=f"monitorlog-sink[{self._layout.label or '-'}]",
            )

    # -------------------------------------------------------------------------
    # PROPERTIES
    # -------------------------------------------------------------------------

    @property
    def label(self) -> Optional[str]:
        return self._layout.label

    @property
    def label_column_width(self) -> int:
        return self._layout.label_width

    @property
    def log_level(self) -> LogLevel:
        return self._options.log_level

    @property
    def options(self) -> MonitorOptions:
        return self._options

    @property
    def layout(self) -> ColumnLayout:
        return self._layout

    @property
    def warnings(self) -> List[str]:
        """Option coercion warnings collected at construction."""
        return list(self._warnings)

    @property
    def append_sink(self) -> Optional[SequentialAppendSink]:
        return self._sink

    # -------------------------------------------------------------------------
    # LOGGING API
    # -------------------------------------------------------------------------

    def debug(self, message: str) -> None:
        self._log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        self._log(LogLevel.WARN, message)

    def warning(self, message: str) -> None:
        self._log(LogLevel.WARN, message)

    def error(self, message: str) -> None:
        self._log(LogLevel.ERROR, message)

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def flush(self, timeout: Optional[float] = None) -> bool:
        """
        Wait until every file-bound line of this instance has been handled.

        Returns:
            bool: True if nothing is left pending.
        """
        if self._sink is None:
            return True
        return self._sink.flush(timeout)

    def close(self, timeout: Optional[float] = None) -> None:
        """Flush and stop the append sink. Console output keeps working."""
        if self._sink is not None:
            self._sink.close(timeout)

    def __enter__(self) -> "Monitor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        file_path = self._sink.path if self._sink is not None else None
        return (
            f"Monitor(label={self._layout.label!r}, level={self._options.log_level.value!r}, "
            f"file={file_path!r})"
        )

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _log(self, level: LogLevel, message: str) -> None:
        if level.rank < self._threshold:
            return

        timestamp = format_timestamp(self._clock())
        decorated, plain = render_pair(level, str(message), timestamp, self._layout)

        if self._console_enabled:
            self._console.write_line(decorated if self._use_color else plain)

        if self._sink is not None:
            try:
                if not self._sink.append(plain):
                    logger.debug("Append sink closed; file line dropped.")
            except Exception as e:
                self._notify(f"{NOTICE_PREFIX} Failed to queue log line: {e}")

    def _on_append_failure(self, result: AppendResult) -> None:
        logger.debug(f"Append failure on '{result.path}': {result.error}")
        self._notify(f"{NOTICE_PREFIX} Failed to write to log file: {result.error}")

    def _notify(self, text: str) -> None:
        if not self._console_enabled:
            return
        try:
            self._console.notice(text)
        except Exception as e:
            logger.debug(f"Console notice failed: {e}")
