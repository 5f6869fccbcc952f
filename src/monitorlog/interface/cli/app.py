from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Builds a Monitor from command-line options and emits either the supplied
records or a short sample walk-through (one line per level), then closes
the Monitor so every file-bound line is written before the process exits.
"""

import sys
from typing import List, Optional, Tuple

from monitorlog.core.monitor import Monitor
from monitorlog.domain.levels import LogLevel
from monitorlog.infra.logging import DiagnosticsConfig, configure_diagnostics, get_logger
from monitorlog.interface.cli import args as cli_args

logger = get_logger(__name__)

SAMPLE_RECORDS: List[Tuple[LogLevel, str]] = [
    (LogLevel.DEBUG, "This is a debug message"),
    (LogLevel.INFO, "This is an info message"),
    (LogLevel.WARN, "This is a warning message"),
    (LogLevel.ERROR, "This is an error message"),
]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the demo workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 2 for invalid options).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        configure_diagnostics(DiagnosticsConfig(level="DEBUG"))

    overrides = cli_args.args_to_overrides(args)
    try:
        monitor = Monitor(args.label, strict=True, **overrides)
    except (TypeError, ValueError) as e:
        print(f"monitorlog-demo: {e}", file=sys.stderr)
        return 2

    logger.debug(f"Demo monitor ready: {monitor!r}")

    records = cli_args.parse_messages(args.messages) or SAMPLE_RECORDS
    with monitor:
        for level, text in records:
            getattr(monitor, level.value)(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
