"""Pure quiz-session helpers (no Flask, no database)."""
