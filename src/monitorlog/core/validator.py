from __future__ import annotations

"""
Option Validation Service.

Turns untrusted option input (keyword overrides, dictionaries coming from a
CLI or a config file) into a strictly typed MonitorOptions instance. In the
default lenient mode nothing here is fatal: bad values are coerced or
replaced by defaults and reported as warnings.
"""

import logging
from dataclasses import asdict, fields
from typing import Any, Dict, List, Optional, Tuple

from monitorlog.domain.levels import LogLevel, parse_level
from monitorlog.domain.options import MonitorOptions

logger = logging.getLogger(__name__)

_BOOL_FIELDS = ("enable_file_logging", "disable_console", "bracket_timestamp", "accent_label")
_KNOWN_FIELDS = frozenset(f.name for f in fields(MonitorOptions))


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_options(
        options: Any = None,
        *,
        strict: bool = False,
        **overrides: Any,
) -> Tuple[MonitorOptions, List[str]]:
    """
    Validate and normalize Monitor options.

    Args:
        options: MonitorOptions, a dictionary of option values, or None.
        strict: If True, raise on invalid values instead of coercing them.
        **overrides: Individual option values applied on top of `options`.

    Returns:
        Tuple[MonitorOptions, List[str]]: Normalized options and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on an unknown option or out-of-range value.
    """
    warnings: List[str] = []
    defaults = MonitorOptions()

    if options is None:
        raw: Dict[str, Any] = {}
    elif isinstance(options, MonitorOptions):
        raw = asdict(options)
    elif isinstance(options, dict):
        raw = dict(options)
    else:
        msg = f"Invalid options type: expected MonitorOptions or dict, received {type(options).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        raw = {}

    raw.update(overrides)

    merged: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in _KNOWN_FIELDS:
            msg = f"Unknown option '{key}'."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Ignored.")
            continue
        merged[key] = value

    clean: Dict[str, Any] = {}
    for field in _BOOL_FIELDS:
        clean[field] = _as_bool(merged.get(field), getattr(defaults, field), field, warnings, strict)

    clean["log_file_path"] = _as_path(
        merged.get("log_file_path"), defaults.log_file_path, warnings, strict
    )
    clean["log_level"] = _as_level(merged.get("log_level"), defaults.log_level, warnings, strict)
    clean["max_label_length"] = _as_length(
        merged.get("max_label_length"), defaults.max_label_length, warnings, strict
    )
    clean["color"] = _as_optional_bool(merged.get("color"), warnings, strict)

    for w in warnings:
        logger.warning(f"Option constraint: {w}")

    return MonitorOptions(**clean), warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_optional_bool(value: Any, warnings: List[str], strict: bool) -> Optional[bool]:
    """Tri-state flag: None keeps auto-detection."""
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in ("", "auto"):
        return None
    return _as_bool(value, None, "color", warnings, strict)  # type: ignore[arg-type]


def _as_path(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if hasattr(value, "__fspath__"):
        value = str(value.__fspath__())
    if isinstance(value, str):
        v = value.strip()
        if v:
            return v
        warnings.append("Field 'log_file_path' is empty. Using fallback.")
        return fallback

    msg = f"Invalid field 'log_file_path': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_level(value: Any, fallback: LogLevel, warnings: List[str], strict: bool) -> LogLevel:
    if value is None:
        return fallback
    level = parse_level(value)
    if level is not None:
        return level

    msg = f"Invalid field 'log_level': unknown level {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback.value}'.")
    return fallback


def _as_length(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    """
    Normalize the label truncation cap.

    Negative values are clamped to 0, which hides the label column.
    """
    if value is None:
        return fallback

    if isinstance(value, bool) or not isinstance(value, int):
        if strict:
            raise TypeError(
                f"Invalid field 'max_label_length': expected int, received {type(value).__name__}."
            )
        try:
            coerced = int(str(value).strip())
        except ValueError:
            warnings.append(f"Invalid field 'max_label_length': {value!r} is not an integer. Using fallback.")
            return fallback
        warnings.append(f"Field 'max_label_length' converted from {value!r} to {coerced}.")
        value = coerced

    if value < 0:
        if strict:
            raise ValueError(f"Invalid field 'max_label_length': {value} is negative.")
        warnings.append(f"Field 'max_label_length' clamped from {value} to 0.")
        return 0
    return value
