"""Pure gamification rules (no Flask, no database)."""
