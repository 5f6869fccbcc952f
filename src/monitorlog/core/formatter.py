from __future__ import annotations

"""
Line Formatting Engine.

Pure functions that render one Monitor record into a single line of text.
Two modes share a single code path so their content and alignment always
agree:

- decorated: every column wrapped in its own ANSI decoration and followed
  by a full reset, for interactive display;
- plain: identical text without a single escape sequence, for files.

Column layout (single space separated):
    [HH:MM:SS] <label padded to its width> <level padded to 5> <message>
"""

import random
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Sequence, Tuple

from colorama import Fore, Style

from monitorlog.domain.levels import LEVEL_COLUMN_WIDTH, LogLevel

# Any CSI sequence (colours, cursor movement, erase)
ANSI_PATTERN = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")

RESET = Style.RESET_ALL
TIMESTAMP_FORMAT = "%H:%M:%S"


# -----------------------------------------------------------------------------
# DECORATION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LevelPalette:
    """
    Decoration identities applied to each column for one level.

    An empty string leaves the column undecorated.
    """
    timestamp: str
    label: str
    level: str
    message: str


DEFAULT_PALETTES: Dict[LogLevel, LevelPalette] = {
    LogLevel.DEBUG: LevelPalette(
        timestamp=Style.DIM,
        label=Fore.CYAN,
        level=Fore.CYAN + Style.BRIGHT,
        message=Fore.CYAN,
    ),
    LogLevel.INFO: LevelPalette(
        timestamp=Style.DIM,
        label=Style.BRIGHT,
        level=Style.BRIGHT,
        message="",
    ),
    LogLevel.WARN: LevelPalette(
        timestamp=Style.DIM,
        label=Fore.YELLOW,
        level=Fore.YELLOW + Style.BRIGHT,
        message=Fore.YELLOW,
    ),
    LogLevel.ERROR: LevelPalette(
        timestamp=Style.DIM,
        label=Fore.RED,
        level=Fore.RED + Style.BRIGHT,
        message=Fore.RED,
    ),
}

ACCENT_COLORS: Tuple[str, ...] = (
    Fore.MAGENTA,
    Fore.BLUE,
    Fore.GREEN,
    Fore.LIGHTMAGENTA_EX,
    Fore.LIGHTBLUE_EX,
    Fore.LIGHTGREEN_EX,
    Fore.LIGHTCYAN_EX,
)


@dataclass(frozen=True)
class ColumnLayout:
    """
    Per-instance formatting metadata, computed once at construction.

    Attributes:
        label: Normalized (trimmed, truncated) label, or None.
        label_width: Padding target of the label column (0 without label).
        bracket_timestamp: Render the time column as [HH:MM:SS].
        label_accent: Pinned label decoration overriding the level palette.
    """
    label: Optional[str] = None
    label_width: int = 0
    bracket_timestamp: bool = True
    label_accent: Optional[str] = None

    @property
    def has_label(self) -> bool:
        return self.label is not None


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_label(label: Optional[str], max_length: int) -> Optional[str]:
    """
    Trim a label and cut it to max_length characters.

    Blank labels and a zero cap both yield None (no label column).
    """
    if label is None:
        return None
    text = str(label).strip()
    if not text or max_length <= 0:
        return None
    return text[:max_length]


def build_layout(
        label: Optional[str],
        max_label_length: int,
        *,
        bracket_timestamp: bool = True,
        accent_label: bool = False,
        rng: Optional[random.Random] = None,
        accents: Sequence[str] = ACCENT_COLORS,
) -> ColumnLayout:
    """
    Derive the immutable column layout of one Monitor instance.

    Args:
        label: Raw label as passed by the caller.
        max_label_length: Truncation cap.
        bracket_timestamp: Bracket style of the time column.
        accent_label: Draw a random label colour for this instance.
        rng: Random source for the accent draw.
        accents: Candidate accent decorations.

    Returns:
        ColumnLayout: Layout reused by every call of the instance.
    """
    clean = normalize_label(label, max_label_length)
    width = len(clean) if clean is not None else 0

    accent: Optional[str] = None
    if accent_label and clean is not None and accents:
        accent = (rng or random).choice(list(accents))

    return ColumnLayout(
        label=clean,
        label_width=width,
        bracket_timestamp=bracket_timestamp,
        label_accent=accent,
    )


def format_timestamp(moment: datetime) -> str:
    """Render a local wall-clock time as zero-padded 24h HH:MM:SS."""
    return moment.strftime(TIMESTAMP_FORMAT)


def strip_ansi(text: str) -> str:
    """Remove every ANSI escape sequence, leaving only visible text."""
    return ANSI_PATTERN.sub("", text)


def format_line(
        level: LogLevel,
        message: str,
        timestamp: str,
        layout: ColumnLayout,
        *,
        decorated: bool,
        palettes: Optional[Dict[LogLevel, LevelPalette]] = None,
) -> str:
    """
    Render a single record.

    Args:
        level: Severity of the record.
        message: Free text, appended verbatim.
        timestamp: Pre-rendered HH:MM:SS string shared by both modes.
        layout: Instance column layout.
        decorated: Wrap columns in ANSI decorations.
        palettes: Optional override of the per-level decorations.

    Returns:
        str: The formatted line without a trailing newline.
    """
    palette = (palettes or DEFAULT_PALETTES)[level]

    time_text = f"[{timestamp}]" if layout.bracket_timestamp else timestamp
    columns = [(time_text, palette.timestamp)]

    if layout.has_label:
        # Pad the visible text before decorating so markers take no width
        label_text = layout.label.ljust(layout.label_width)  # type: ignore[union-attr]
        label_deco = layout.label_accent if layout.label_accent is not None else palette.label
        columns.append((label_text, label_deco))

    columns.append((level.display_name.ljust(LEVEL_COLUMN_WIDTH), palette.level))
    columns.append((message, palette.message))

    if not decorated:
        return strip_ansi(" ".join(text for text, _ in columns))

    return " ".join(_decorate(text, deco) for text, deco in columns)


def render_pair(
        level: LogLevel,
        message: str,
        timestamp: str,
        layout: ColumnLayout,
        palettes: Optional[Dict[LogLevel, LevelPalette]] = None,
) -> Tuple[str, str]:
    """Return (decorated, plain) renderings of the same record."""
    decorated = format_line(level, message, timestamp, layout, decorated=True, palettes=palettes)
    plain = format_line(level, message, timestamp, layout, decorated=False, palettes=palettes)
    return decorated, plain


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _decorate(text: str, deco: str) -> str:
    if not deco:
        return text
    return f"{deco}{text}{RESET}"
