from __future__ import annotations

"""
Unit tests for the Line Formatting Engine.

Verifies:
1. Column layout and padding of plain lines.
2. Plain output never carries escape sequences and equals the stripped
   decorated output.
3. Label normalization and truncation.
4. Determinism, including the pinned per-instance accent.
"""

import random
import re
from datetime import datetime

import pytest
from colorama import Fore, Style

from monitorlog.core.formatter import (
    ACCENT_COLORS,
    RESET,
    ColumnLayout,
    LevelPalette,
    build_layout,
    format_line,
    format_timestamp,
    normalize_label,
    render_pair,
    strip_ansi,
)
from monitorlog.domain.levels import LogLevel

ALL_LEVELS = list(LogLevel)
TS = "07:05:03"

# -----------------------------------------------------------------------------
# PLAIN LAYOUT
# -----------------------------------------------------------------------------

def test_plain_line_with_label() -> None:
    layout = build_layout("Svc", 20)
    line = format_line(LogLevel.INFO, "hello", TS, layout, decorated=False)
    assert line == "[07:05:03] Svc Info  hello"


def test_plain_line_without_label() -> None:
    layout = build_layout(None, 20)
    line = format_line(LogLevel.INFO, "Test", TS, layout, decorated=False)
    assert re.match(r"^\[\d{2}:\d{2}:\d{2}\] Info  Test$", line)


def test_plain_line_without_brackets() -> None:
    layout = build_layout(None, 20, bracket_timestamp=False)
    line = format_line(LogLevel.WARN, "careful", TS, layout, decorated=False)
    assert line == "07:05:03 Warn  careful"


@pytest.mark.parametrize("level,name", [
    (LogLevel.DEBUG, "Debug"),
    (LogLevel.INFO, "Info "),
    (LogLevel.WARN, "Warn "),
    (LogLevel.ERROR, "Error"),
])
def test_level_column_is_padded_to_five(level: LogLevel, name: str) -> None:
    layout = build_layout("A", 20)
    line = format_line(level, "m", TS, layout, decorated=False)
    assert line == f"[07:05:03] A {name} m"


def test_message_is_verbatim() -> None:
    layout = build_layout("Svc", 20)
    message = "  spaced  [brackets] 100% {braces}  "
    line = format_line(LogLevel.ERROR, message, TS, layout, decorated=False)
    assert line.endswith(f"Error {message}")


# -----------------------------------------------------------------------------
# DECORATION
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("level", ALL_LEVELS)
@pytest.mark.parametrize("label", [None, "Svc", "VeryLongClassName"])
def test_plain_equals_stripped_decorated(level: LogLevel, label) -> None:
    layout = build_layout(label, 10, accent_label=True, rng=random.Random(7))
    decorated, plain = render_pair(level, "payload", TS, layout)

    assert "\x1b" not in plain
    assert "\x1b" in decorated
    assert strip_ansi(decorated) == plain


def test_every_decorated_column_is_reset() -> None:
    layout = build_layout("Svc", 20)
    decorated = format_line(LogLevel.ERROR, "boom", TS, layout, decorated=True)

    assert decorated == (
        f"{Style.DIM}[07:05:03]{RESET} "
        f"{Fore.RED}Svc{RESET} "
        f"{Fore.RED}{Style.BRIGHT}Error{RESET} "
        f"{Fore.RED}boom{RESET}"
    )


def test_undecorated_info_message_follows_reset() -> None:
    layout = build_layout(None, 20)
    decorated = format_line(LogLevel.INFO, "plain text", TS, layout, decorated=True)
    assert decorated.endswith(f"{RESET} plain text")


def test_label_padding_ignores_escape_sequences() -> None:
    layout = ColumnLayout(label="Ab", label_width=6)
    decorated = format_line(LogLevel.WARN, "x", TS, layout, decorated=True)
    plain = format_line(LogLevel.WARN, "x", TS, layout, decorated=False)

    assert plain == "[07:05:03] Ab     Warn  x"
    assert f"{Fore.YELLOW}Ab    {RESET}" in decorated


def test_plain_mode_strips_escapes_embedded_in_message() -> None:
    layout = build_layout(None, 20)
    plain = format_line(LogLevel.INFO, f"{Fore.GREEN}ok{RESET}", TS, layout, decorated=False)
    assert plain == "[07:05:03] Info  ok"


def test_custom_palette_is_applied() -> None:
    palette = LevelPalette(timestamp="", label="", level=Fore.MAGENTA, message="")
    palettes = {level: palette for level in LogLevel}
    layout = build_layout(None, 20)

    decorated = format_line(LogLevel.DEBUG, "m", TS, layout, decorated=True, palettes=palettes)
    assert decorated == f"[07:05:03] {Fore.MAGENTA}Debug{RESET} m"


# -----------------------------------------------------------------------------
# LABEL NORMALIZATION
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_blank_labels_yield_no_column(raw) -> None:
    layout = build_layout(raw, 20)
    assert layout.label is None
    assert layout.label_width == 0
    assert not layout.has_label


def test_label_is_trimmed() -> None:
    assert normalize_label("  Svc  ", 20) == "Svc"


def test_long_label_is_cut_to_max_length() -> None:
    layout = build_layout("VeryLongClassName", 10)
    assert layout.label == "VeryLongCl"
    assert layout.label_width == 10

    line = format_line(LogLevel.INFO, "Test", TS, layout, decorated=False)
    assert "VeryLongCl " in line
    assert "VeryLongClassName" not in line


def test_short_label_keeps_its_own_width() -> None:
    layout = build_layout("Short", 10)
    assert layout.label == "Short"
    assert layout.label_width == 5


def test_zero_max_length_hides_label() -> None:
    assert normalize_label("Svc", 0) is None
    assert build_layout("Svc", 0).label_width == 0


def test_truncation_counts_characters_not_bytes() -> None:
    assert normalize_label("ñandú-service", 5) == "ñandú"


# -----------------------------------------------------------------------------
# DETERMINISM & ACCENT
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("decorated", [True, False])
def test_formatting_is_idempotent(decorated: bool) -> None:
    layout = build_layout("Svc", 20, accent_label=True, rng=random.Random(1))
    first = format_line(LogLevel.WARN, "same", TS, layout, decorated=decorated)
    second = format_line(LogLevel.WARN, "same", TS, layout, decorated=decorated)
    assert first == second


def test_accent_is_pinned_in_layout() -> None:
    layout = build_layout("Svc", 20, accent_label=True, rng=random.Random(42))

    assert layout.label_accent in ACCENT_COLORS
    for level in ALL_LEVELS:
        decorated = format_line(level, "m", TS, layout, decorated=True)
        assert f"{layout.label_accent}Svc{RESET}" in decorated


def test_accent_requires_a_label() -> None:
    layout = build_layout(None, 20, accent_label=True)
    assert layout.label_accent is None


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("moment,expected", [
    (datetime(2024, 1, 1, 0, 0, 0), "00:00:00"),
    (datetime(2024, 1, 1, 9, 5, 7), "09:05:07"),
    (datetime(2024, 1, 1, 23, 59, 59), "23:59:59"),
])
def test_format_timestamp(moment: datetime, expected: str) -> None:
    assert format_timestamp(moment) == expected


def test_strip_ansi_removes_all_csi_sequences() -> None:
    text = "\x1b[1;31mred\x1b[0m \x1b[2Kline\x1b[10Cend\x1b[38;5;208m!"
    assert strip_ansi(text) == "red lineend!"
