"""PATTERNS

Small, self-contained illustrations of classic object-oriented design
patterns. Each pattern lives in its own module with no dependencies on the
others; a command-line interface replays the canonical scenario of each one.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
