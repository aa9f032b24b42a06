"""
Display helpers for the Markdown renderer.

These functions turn raw export values into display-friendly strings.
They avoid raising on missing or malformed fields.
"""

from __future__ import annotations

import html
import re
from datetime import datetime
from typing import Any, Optional, Tuple

INVALID_DATE = "Invalid Date"

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Characters forbidden in Windows filenames.
_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')


def safe_str(value: Any) -> str:
    # Converts any value to a string for safe display.
    # If value is None, return an empty string.
    # - Ensures "None" never appears in output.
    return "" if value is None else str(value)


def escape_html(value: Any) -> Any:
    """
    Escape & < > " ' for text placed inside raw HTML (e.g. <summary>).

    Non-string values are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    return html.escape(value, quote=True).replace("&#x27;", "&#39;")


def sanitize_filename(name: str, max_length: int = 200) -> str:
    # Creates a safe path component from a conversation title.
    # - unsafe characters and whitespace runs become "_"
    # - repeated "_" collapse to one, edge "_" are trimmed
    # - max_length counts UTF-8 bytes, never splitting a character
    name = _UNSAFE_FILENAME_CHARS.sub("_", name or "")
    name = re.sub(r"\s+", "_", name)
    name = re.sub(r"_+", "_", name)
    name = name.strip("_")
    return name.encode("utf-8")[:max_length].decode("utf-8", "ignore")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an export timestamp such as "2024-03-01T14:05:09.123456Z".

    Returns an aware datetime in local time, or None if missing/invalid.
    Values without an offset are read as local time.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).astimezone()
    except (ValueError, OverflowError, OSError):
        # Overflow: in range as UTC, out of range once shifted to local time.
        return None


def _hour_12(dt: datetime) -> Tuple[int, str]:
    hour = dt.hour % 12 or 12
    return hour, "AM" if dt.hour < 12 else "PM"


def format_datetime(value: Optional[str]) -> str:
    """
    Long form used in document metadata: "3/1/2024, 2:05:09 PM".
    """
    dt = parse_timestamp(value)
    if dt is None:
        return INVALID_DATE
    hour, meridiem = _hour_12(dt)
    return f"{dt.month}/{dt.day}/{dt.year}, {hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"


def format_message_time(value: Optional[str]) -> str:
    """
    Short form used under message headers: "Mar 1, 2024, 02:05 PM".
    """
    dt = parse_timestamp(value)
    if dt is None:
        return INVALID_DATE
    hour, meridiem = _hour_12(dt)
    return f"{MONTHS[dt.month - 1]} {dt.day}, {dt.year}, {hour:02d}:{dt.minute:02d} {meridiem}"
