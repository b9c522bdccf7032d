"""CLI helpers for USTRING.

Utilities used by the command-line interface: parsing of per-logger level
options and message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, warn

__all__ = ["parse_log_level", "warn", "error"]
