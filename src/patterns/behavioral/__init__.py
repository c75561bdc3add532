"""Behavioral patterns: listener, state and strategy."""
