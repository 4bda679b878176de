"""Shared utilities for QuizQuest."""
