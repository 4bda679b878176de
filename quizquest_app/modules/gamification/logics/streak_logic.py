"""
Streak Logic - Pure functions for streak calculation.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.
"""
from datetime import date, timedelta
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from quizquest_app.utils.time_utils import to_utc_date, utc_today

# Fields looked up, in order, to find the day a record was completed
DATE_FIELDS = ('completed_at', 'date')


def _get(record: Any, name: str):
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _is_completed(record: Any) -> bool:
    """Records without a ``completed`` flag count as completed."""
    flag = _get(record, 'completed')
    return flag is None or bool(flag)


def _record_date(record: Any, date_fields: Sequence[str] = DATE_FIELDS) -> Optional[date]:
    if isinstance(record, (date, str)):
        return to_utc_date(record)
    for field in date_fields:
        value = to_utc_date(_get(record, field))
        if value is not None:
            return value
    return None


def completion_days(records: Iterable[Any], today: date,
                    date_fields: Sequence[str] = DATE_FIELDS) -> List[date]:
    """Distinct completion days up to ``today``, newest first."""
    days = set()
    for record in records or []:
        if not _is_completed(record):
            continue
        day = _record_date(record, date_fields)
        if day is not None and day <= today:
            days.add(day)
    return sorted(days, reverse=True)


def calculate_study_streak(records: Iterable[Any], today: date = None,
                           date_fields: Sequence[str] = DATE_FIELDS) -> int:
    """
    Count consecutive calendar days with a completion, ending today.

    Args:
        records: Completed sessions / assignments. Each may be a mapping or an
            object with a ``completed_at`` or ``date`` field, or a bare date.
            Records whose ``completed`` flag is false are ignored.
        today: Reference day (default: current UTC day).
        date_fields: Fields tried in order for the record's day.

    Returns:
        Number of consecutive days walking back from ``today``; 0 when
        there was no completion today.

    Examples:
        >>> from datetime import date
        >>> days = [date(2024, 1, 3), date(2024, 1, 2), date(2024, 1, 1)]
        >>> calculate_study_streak(days, today=date(2024, 1, 3))
        3

        >>> # Gap in dates
        >>> calculate_study_streak([date(2024, 1, 3), date(2024, 1, 1)], today=date(2024, 1, 3))
        1
    """
    if today is None:
        today = utc_today()

    streak = 0
    for offset, day in enumerate(completion_days(records, today, date_fields)):
        if day != today - timedelta(days=offset):
            break
        streak += 1

    return streak
