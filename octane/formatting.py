"""Human-readable formatting helpers and the banner."""

from __future__ import annotations

from typing import Any, Iterable

_BANNER_LINES = (
    "",
    r"  ____  _        _   _             ",
    r" / __ \| |      | | (_)            ",
    r"| |  | | |  ___ | |_ _ _ __   __ _ ",
    r"| |  | | | / _ \| __| | '_ \ / _` |",
    r"| |__| | || (_) | |_| | | | | (_| |",
    r" \____/|_| \___/ \__|_|_| |_|\__, |",
    r"                               __/ |",
    r"                              |___/ ",
)


def format_duration(seconds: int) -> str:
    """Describe a number of seconds in whole seconds, minutes or hours."""
    if seconds < 60:
        return f"{seconds} seconds"
    if seconds < 3600:
        return f"{seconds // 60} minutes"
    return f"{seconds // 3600} hours"


def format_score(score: float) -> str:
    """Format a score with two decimals and a percent sign."""
    return f"{score:.2f}%"


def format_list(items: Iterable[str]) -> str:
    """Join items with a comma and a space."""
    return ", ".join(items)


def _plain(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_plain(item) for item in value) + "]"
    if isinstance(value, dict):
        pairs = " ".join(f"{_plain(k)}:{_plain(v)}" for k, v in sorted(value.items()))
        return f"map[{pairs}]"
    return str(value)


def format_key_value(key: str, value: Any) -> str:
    """Format a key and value as ``key: value``."""
    return f"{key}: {_plain(value)}"


def ascii_art(text: str) -> str:
    """Return the banner followed by the given text."""
    return "\n".join(_BANNER_LINES) + "\n" + text