from .session_store import QuizSessionStore, evict_store, get_store

__all__ = ['QuizSessionStore', 'evict_store', 'get_store']
