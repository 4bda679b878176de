"""
Event Handlers for Gamification Module.

Listens to signals from other modules and triggers gamification logic.
The quiz session store does not need to know about Gamification internals.
"""
from .services.reward_manager import RewardManager


def register_events():
    """Connect signals."""
    RewardManager.init_listeners()
