"""
Debug output for Desk Calendar.

Diagnostics go to stderr with a timestamp. Debug lines are silent unless
enabled with --debug; errors are always printed.
"""

import sys
from datetime import datetime


_debug_enabled: bool = False


def set_debug(enabled: bool):
    """Enable or disable debug output for the whole application."""
    global _debug_enabled
    _debug_enabled = enabled


def _timestamped(message: str) -> str:
    timestamp = datetime.now().strftime("%H:%M:%S")
    return f"[{timestamp}] {message}"


def debug_print(message: str) -> None:
    if _debug_enabled:
        print(_timestamped(f"DEBUG: {message}"), file=sys.stderr)


def error_print(message: str) -> None:
    print(_timestamped(f"ERROR: {message}"), file=sys.stderr)
