"""Command-line interface for PATTERNS."""
