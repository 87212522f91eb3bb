"""Text parsing and formatting helpers for console input and reports."""

import re
from datetime import timedelta

# A double-quoted run (quotes dropped) or a run of non-space characters
_TOKEN_RE = re.compile(r'"([^"]*)"|(\S+)')


def split_command(line: str) -> list[str]:
    """
    Split a console line into arguments.

    Double quotes group words containing spaces; the quotes themselves are
    dropped.

    Examples:
        'add-room "Hall A" 100'  →  ["add-room", "Hall A", "100"]
        'book abc 1 2 3'         →  ["book", "abc", "1", "2", "3"]

    Args:
        line: Raw console line

    Returns:
        List of arguments; empty for a blank line
    """
    return [bare or quoted for quoted, bare in _TOKEN_RE.findall(line)]


def parse_duration(text: str) -> timedelta:
    """
    Parse an ``HH:MM`` (or ``HH:MM:SS``) duration.

    Args:
        text: Duration string, e.g. "2:15"

    Returns:
        The duration

    Raises:
        ValueError: If the text is not a valid duration
    """
    m = re.fullmatch(r"\s*(\d{1,3}):([0-5]\d)(?::([0-5]\d))?\s*", text)
    if not m:
        raise ValueError(f"Invalid duration: {text!r}")
    hours, minutes, seconds = m.group(1), m.group(2), m.group(3) or "0"
    return timedelta(hours=int(hours), minutes=int(minutes), seconds=int(seconds))


def format_duration(duration: timedelta) -> str:
    """Format a duration as ``"<H>h <M>m"``."""
    total_minutes = int(duration.total_seconds()) // 60
    return f"{total_minutes // 60}h {total_minutes % 60}m"
