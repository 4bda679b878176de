"""Summary numbers shown when a quiz ends."""
from typing import Any, Dict, Iterable, Mapping


def _get(item: Any, name: str, default=0):
    if isinstance(item, Mapping):
        value = item.get(name, default)
    else:
        value = getattr(item, name, default)
    return default if value is None else value


def _percent(part: float, whole: float) -> int:
    if not whole:
        return 0
    return int(round(part * 100.0 / whole))


def build_completion_stats(session: Any, logs: Iterable[Any]) -> Dict[str, Any]:
    """
    Aggregate a session's answer logs.

    ``total_possible_points`` comes from the session's ``max_points``; when it
    is unset, the points earned are used so that the score is never above 100%.
    Average time is in whole seconds per answered question.

    >>> stats = build_completion_stats({'max_points': 30},
    ...     [{'is_correct': True, 'points_earned': 10, 'time_spent_seconds': 12},
    ...      {'is_correct': False, 'points_earned': 0, 'time_spent_seconds': 20}])
    >>> stats['accuracy'], stats['total_points_earned'], stats['average_time']
    (50, 10, 16)
    """
    logs = list(logs or [])
    total_questions = len(logs)
    correct_answers = sum(1 for log in logs if _get(log, 'is_correct', False))
    points_earned = sum(_get(log, 'points_earned') for log in logs)
    total_time = sum(_get(log, 'time_spent_seconds') for log in logs)

    possible_points = _get(session, 'max_points') or points_earned

    return {
        'accuracy': _percent(correct_answers, total_questions),
        'correct_answers': correct_answers,
        'total_questions': total_questions,
        'total_points_earned': points_earned,
        'total_possible_points': possible_points,
        'score_percent': _percent(points_earned, possible_points),
        'average_time': int(round(total_time / total_questions)) if total_questions else 0,
    }
