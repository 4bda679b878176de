"""Assignments module: dated study assignments and their completion."""
