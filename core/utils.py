# core/utils.py

from datetime import date, datetime
from typing import Optional


def sanitize(data: dict) -> dict:
    """
    Sanitize a payload dict before it reaches the store:
    - Empty strings → None
    - Strip string whitespace
    - Preserve booleans, numbers, None
    """
    clean = {}

    for k, v in data.items():
        if isinstance(v, str):
            stripped = v.strip()
            clean[k] = stripped if stripped else None
            continue

        clean[k] = v

    return clean


def parse_calendar_date(value) -> Optional[date]:
    """
    Parse a stored date/deadline value as a calendar date.

    Accepts "YYYY-MM-DD", full ISO timestamps (only the date part is kept,
    no timezone conversion), and date / datetime objects.
    Returns None when the value is empty or unparseable.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def to_calendar_date(now) -> date:
    """Calendar date of `now` (date or datetime), as the sweep compares it."""
    if isinstance(now, datetime):
        return now.date()
    return now
