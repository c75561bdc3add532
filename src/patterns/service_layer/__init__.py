"""Service layer for PATTERNS.

Replays the canonical scenario of each pattern example in response to a
command. May import the pattern packages and `patterns.config`, but not
`patterns.entrypoints`.
"""
