"""CLI helpers for PATTERNS.

Utilities used by the command-line interface: logger-level option parsing and
message emitters that write to stderr with emoji to ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success

__all__ = ["parse_log_level", "error", "success"]
