from quizquest_app.modules.quiz_session.logics.completion_stats import build_completion_stats
from quizquest_app.modules.quiz_session.logics.session_filters import (
    filter_active_sessions,
    find_session,
    find_session_for_assignment,
)

SESSIONS = [
    {'id': 1, 'user_id': 7, 'assignment_id': 10, 'status': 'completed'},
    {'id': 2, 'user_id': 7, 'assignment_id': 10, 'status': 'paused'},
    {'id': 3, 'user_id': 7, 'assignment_id': None, 'status': 'active'},
    {'id': 4, 'user_id': 8, 'assignment_id': 10, 'status': 'active'},
]


class TestSessionFilters:

    def test_active_means_active_or_paused(self):
        assert [s['id'] for s in filter_active_sessions(SESSIONS, 7)] == [2, 3]

    def test_other_users_are_excluded(self):
        assert [s['id'] for s in filter_active_sessions(SESSIONS, 8)] == [4]
        assert filter_active_sessions(SESSIONS, 99) == []

    def test_session_for_assignment_skips_completed(self):
        assert find_session_for_assignment(SESSIONS, 10, 7)['id'] == 2
        assert find_session_for_assignment(SESSIONS, 11, 7) is None

    def test_find_session(self):
        assert find_session(SESSIONS, 3)['id'] == 3
        assert find_session(SESSIONS, 42) is None


class TestCompletionStats:

    def test_summary(self):
        logs = [
            {'is_correct': True, 'points_earned': 10, 'time_spent_seconds': 10},
            {'is_correct': True, 'points_earned': 10, 'time_spent_seconds': 20},
            {'is_correct': False, 'points_earned': 0, 'time_spent_seconds': 30},
            {'is_correct': True, 'points_earned': 20, 'time_spent_seconds': 40},
        ]
        stats = build_completion_stats({'max_points': 50}, logs)

        assert stats == {
            'accuracy': 75,
            'correct_answers': 3,
            'total_questions': 4,
            'total_points_earned': 40,
            'total_possible_points': 50,
            'score_percent': 80,
            'average_time': 25,
        }

    def test_no_answers(self):
        stats = build_completion_stats({'max_points': 0}, [])
        assert stats['accuracy'] == 0
        assert stats['score_percent'] == 0
        assert stats['average_time'] == 0

    def test_missing_max_points_uses_points_earned(self):
        stats = build_completion_stats({}, [{'is_correct': True, 'points_earned': 5}])
        assert stats['total_possible_points'] == 5
        assert stats['score_percent'] == 100
