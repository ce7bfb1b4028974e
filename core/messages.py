"""
messages.py - User-facing Output

Errors and warnings go to stderr with a prefix, everything else to stdout
"""

import sys


def _prefix(label: str, color: str) -> str:
    if sys.stderr.isatty():
        return f"\x1b[{color}m{label}\x1b[0m: "
    return f"{label}: "


def error(msg: str) -> None:
    """Print an error line"""
    print(_prefix("error", "31") + msg, file=sys.stderr)


def warning(msg: str) -> None:
    """Print a warning line"""
    print(_prefix("warning", "33") + msg, file=sys.stderr)


def info(msg: str) -> None:
    """Print an informational line"""
    print(msg)
