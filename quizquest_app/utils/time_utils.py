"""
Centralized Utilities for Time Handling in QuizQuest.
Goal: store and compare everything in UTC, convert only for display.
"""
from datetime import date, datetime, timezone
from typing import Optional, Union

import pytz

DEFAULT_DISPLAY_TIMEZONE = 'Europe/London'


def utcnow() -> datetime:
    """
    Get the current timezone-aware UTC datetime.
    Always use this instead of datetime.utcnow() or datetime.now().
    """
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Current calendar day in UTC."""
    return utcnow().date()


def parse_db_date(date_string: str) -> datetime:
    """
    Parse a ``YYYY-MM-DD`` string from the database as midnight UTC.

    Raises ValueError for anything that is not three dash-separated integers.
    """
    year, month, day = (int(part) for part in date_string.split('-'))
    return datetime(year, month, day, tzinfo=timezone.utc)


def get_utc_midnight(value: datetime) -> datetime:
    """Return a new datetime at midnight UTC of the given moment's UTC day."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)


def format_date_for_db(value: Union[date, datetime]) -> str:
    """Convert a date or datetime to the ``YYYY-MM-DD`` string stored in the database."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    return value.isoformat()


def format_date_for_display(
    value: datetime,
    tz_name: Optional[str] = None,
    fmt: str = '%d/%m/%Y'
) -> str:
    """
    Format a (UTC or naive-as-UTC) datetime in the display timezone.
    Unknown timezone names fall back to UTC.
    """
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    try:
        target_tz = pytz.timezone(tz_name or DEFAULT_DISPLAY_TIMEZONE)
    except pytz.UnknownTimeZoneError:
        target_tz = pytz.UTC

    return value.astimezone(target_tz).strftime(fmt)


def is_same_day(first: datetime, second: datetime) -> bool:
    """True when both moments fall on the same UTC calendar day."""
    return get_utc_midnight(first) == get_utc_midnight(second)


def to_utc_date(value: Union[date, datetime, str, None]) -> Optional[date]:
    """
    Normalize a date, datetime or ISO string to a UTC calendar date.

    Naive datetimes are taken as UTC. Returns None when the value cannot
    be interpreted.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return to_utc_date(datetime.fromisoformat(text.replace('Z', '+00:00')))
        except ValueError:
            try:
                return datetime.strptime(text[:10], '%Y-%m-%d').date()
            except ValueError:
                return None

    return None
