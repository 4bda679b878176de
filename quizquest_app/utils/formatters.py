"""
Display formatters.

Pure functions turning minutes, streak counts and study-item lists into
the short strings shown on dashboards and assignment tables.
"""
from collections import OrderedDict
from typing import Any, Iterable, List, Mapping, Union

GENERAL_CHAPTER = 'General'


def format_total_time(minutes: int) -> str:
    """
    Format total time spent.

    >>> format_total_time(45)
    '45m'
    >>> format_total_time(60)
    '1h'
    >>> format_total_time(125)
    '2h 5m'
    """
    if minutes < 60:
        return f"{minutes}m"

    hours, remaining_minutes = divmod(minutes, 60)
    if remaining_minutes == 0:
        return f"{hours}h"

    return f"{hours}h {remaining_minutes}m"


def format_seconds(seconds: int) -> str:
    """Clock-style ``m:ss`` display for per-question timings."""
    seconds = max(0, int(round(seconds or 0)))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def format_streak(days: int) -> str:
    if not days or days <= 0:
        return "No streak"
    if days == 1:
        return "1 day"
    return f"{days} days"


def _field(item: Union[Mapping[str, Any], Any], name: str):
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _collapse_ranges(numbers: List[int]) -> str:
    """[1, 2, 3, 5] -> '1-3,5'"""
    ranges = []
    start = end = numbers[0]
    for number in numbers[1:]:
        if number == end + 1:
            end = number
            continue
        ranges.append(f"{start}" if start == end else f"{start}-{end}")
        start = end = number
    ranges.append(f"{start}" if start == end else f"{start}-{end}")
    return ",".join(ranges)


def _chapter_sort_key(chapter: str):
    try:
        return (0, int(chapter))
    except (TypeError, ValueError):
        return (1, chapter)


def format_study_items_for_assignment(study_items: Iterable[Any]) -> str:
    """
    Summarize study items for assignment tables.

    Items are grouped by book (first-seen order), chapters sorted
    numerically, consecutive verses collapsed into ranges. Book-only items
    show as ``General``.

    >>> format_study_items_for_assignment([
    ...     {'book': 'Ruth', 'chapter': 1, 'verse': 1},
    ...     {'book': 'Ruth', 'chapter': 1, 'verse': 2},
    ...     {'book': 'Ruth', 'chapter': 2},
    ... ])
    'Ruth 1:1-2, 2'
    """
    items = list(study_items or [])
    if not items:
        return ''

    books: "OrderedDict[str, OrderedDict[str, list]]" = OrderedDict()
    for item in items:
        book = _field(item, 'book')
        chapter = _field(item, 'chapter')
        key = str(chapter) if chapter not in (None, '') else GENERAL_CHAPTER
        books.setdefault(book, OrderedDict()).setdefault(key, []).append(item)

    parts = []
    for book, chapters in books.items():
        chapter_ranges = []
        for chapter in sorted((c for c in chapters if c != GENERAL_CHAPTER), key=_chapter_sort_key):
            verses = sorted({int(v) for v in (_field(i, 'verse') for i in chapters[chapter]) if v})
            if verses:
                chapter_ranges.append(f"{chapter}:{_collapse_ranges(verses)}")
            else:
                chapter_ranges.append(chapter)

        if GENERAL_CHAPTER in chapters:
            chapter_ranges.insert(0, GENERAL_CHAPTER)

        parts.append(f"{book} {', '.join(chapter_ranges)}")

    return '; '.join(parts)
