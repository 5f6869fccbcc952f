from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the demo tool and translates the raw
argparse namespace into Monitor option overrides and log records.
"""

import argparse
from typing import Any, Dict, List, Optional, Tuple

from monitorlog.domain.levels import LogLevel, parse_level

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the monitorlog demo CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="monitorlog-demo",
        description="Emit sample Monitor lines, or the given messages, with aligned columns.",
    )

    p.add_argument("--label", default=None, help="Instance label shown as its own column.")
    p.add_argument(
        "--level",
        dest="log_level",
        default=None,
        help="Suppression threshold: debug, info, warn or error.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file_path",
        default=None,
        help="Also append plain lines to this file.",
    )
    p.add_argument(
        "--max-label-length",
        dest="max_label_length",
        type=int,
        default=None,
        help="Truncate the label to this many characters.",
    )

    # --- Console behaviour ---
    p.add_argument("--no-color", action="store_true", help="Never emit ANSI colours.")
    p.add_argument("--no-console", action="store_true", help="Do not write to stdout.")
    p.add_argument("--no-brackets", action="store_true", help="Render HH:MM:SS without brackets.")
    p.add_argument("--accent", action="store_true", help="Pick a random label colour for this run.")

    # --- Payload ---
    p.add_argument(
        "-m", "--message",
        dest="messages",
        action="append",
        default=None,
        help="Record to emit as LEVEL:TEXT (repeatable). Without it a sample set is shown.",
    )

    p.add_argument("--debug", action="store_true", help="Print monitorlog diagnostics on stderr.")
    return p


# -----------------------------------------------------------------------------
# NAMESPACE MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Map parsed arguments onto Monitor option keywords.

    Only explicitly provided values are returned so defaults stay with the
    option model.
    """
    overrides: Dict[str, Any] = {}

    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.log_file_path:
        overrides["enable_file_logging"] = True
        overrides["log_file_path"] = args.log_file_path
    if args.max_label_length is not None:
        overrides["max_label_length"] = args.max_label_length
    if args.no_color:
        overrides["color"] = False
    if args.no_console:
        overrides["disable_console"] = True
    if args.no_brackets:
        overrides["bracket_timestamp"] = False
    if args.accent:
        overrides["accent_label"] = True

    return overrides


def parse_messages(raw: Optional[List[str]]) -> List[Tuple[LogLevel, str]]:
    """
    Split LEVEL:TEXT arguments. Text without a known level prefix is info.
    """
    records: List[Tuple[LogLevel, str]] = []
    for item in raw or []:
        head, sep, tail = item.partition(":")
        level = parse_level(head) if sep else None
        if level is None:
            records.append((LogLevel.INFO, item))
        else:
            records.append((level, tail.lstrip()))
    return records
