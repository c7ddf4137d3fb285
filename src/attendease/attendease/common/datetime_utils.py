from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_time(value: datetime | time) -> str:
    return value.strftime(TIME_FORMAT)


def parse_time_of_day(value: str) -> time:
    """Parse a stored HH:MM:SS (or HH:MM) value.

    Raises ValueError for anything else, including out of range parts.
    """

    parts = value.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid time string: {value!r}")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) == 3 else 0
    return time(hour=hours, minute=minutes, second=seconds)


def combine(day: str, time_of_day: str) -> Optional[datetime]:
    """Same-day timestamp from stored strings, or None when unparsable."""
    try:
        return datetime.combine(parse_iso_date(day), parse_time_of_day(time_of_day))
    except (TypeError, ValueError):
        return None


def format_display_time(value: Optional[str]) -> str:
    """12-hour rendering used by the HR table and exports."""
    if not value:
        return "N/A"
    try:
        t = parse_time_of_day(value)
    except ValueError:
        return "Invalid Time"
    return t.strftime("%I:%M %p").lstrip("0")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
