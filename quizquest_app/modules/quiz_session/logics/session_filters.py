"""
Session Filters - lookups over an already-loaded list of quiz sessions.

Sessions may be DTOs, ORM rows or plain mappings.
"""
from typing import Any, Iterable, List, Mapping, Optional

ACTIVE = 'active'
PAUSED = 'paused'
OPEN_STATUSES = (ACTIVE, PAUSED)


def _get(session: Any, name: str):
    if isinstance(session, Mapping):
        return session.get(name)
    return getattr(session, name, None)


def is_open(session: Any) -> bool:
    """Active or paused."""
    return _get(session, 'status') in OPEN_STATUSES


def find_session(sessions: Iterable[Any], session_id: int) -> Optional[Any]:
    return next((s for s in sessions if _get(s, 'id') == session_id), None)


def filter_active_sessions(sessions: Iterable[Any], user_id: int) -> List[Any]:
    """
    >>> filter_active_sessions([{'user_id': 1, 'status': 'paused'},
    ...                         {'user_id': 1, 'status': 'completed'}], 1)
    [{'user_id': 1, 'status': 'paused'}]
    """
    return [s for s in sessions if _get(s, 'user_id') == user_id and is_open(s)]


def find_session_for_assignment(sessions: Iterable[Any], assignment_id: int, user_id: int) -> Optional[Any]:
    """First open session of the user for the assignment, in list order."""
    for session in sessions:
        if (_get(session, 'assignment_id') == assignment_id
                and _get(session, 'user_id') == user_id
                and is_open(session)):
            return session
    return None
