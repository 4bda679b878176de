"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker namespaces so modules can react to each other without
importing each other's services.

Usage:
    # Publisher (sender)
    from quizquest_app.core.signals import quiz_session_completed
    quiz_session_completed.send(app, session=session, user_id=1)

    # Subscriber (receiver) - in module's events.py
    def on_quiz_session_completed(sender, **kwargs):
        ...
    quiz_session_completed.connect(on_quiz_session_completed)

Receivers run synchronously inside the sender's request.
"""
from blinker import Namespace

# ============================================
# Account Signals
# ============================================
account_signals = Namespace()

# Signal: Fired after a user account is created
# Payload: user
user_registered = account_signals.signal('user_registered')

# ============================================
# Quiz Signals
# ============================================
quiz_signals = Namespace()

# Signal: Fired once when a quiz session transitions to 'completed'
# Payload: user_id, session (QuizSession row, already committed)
# Receivers must not raise: a gamification fault never blocks completion.
quiz_session_completed = quiz_signals.signal('quiz_session_completed')

# ============================================
# Gamification Signals
# ============================================
gamification_signals = Namespace()

# Signal: Fired after an achievement is unlocked for a user
# Payload: user_id, achievement (Achievement row)
achievement_unlocked = gamification_signals.signal('achievement_unlocked')

# Signal: Fired after a user's stats row is upserted
# Payload: user_id, total_xp, current_level, longest_streak, leveled_up
stats_updated = gamification_signals.signal('stats_updated')
