"""Level-filtered debug messages written to standard error."""

from __future__ import annotations

import enum
import sys

DEFAULT_LEVEL = 100
_PROJECT_DIR = "antinet"


class DebugLevel(enum.IntEnum):
    """Importance of a message; it is shown when it is >= the current level."""

    DBG3 = 10
    DBG2 = 20
    DBG1 = 30
    INFO = 40
    NOTE = 50
    FACT = 90
    WARN = 100
    GOAL = 150
    MARK = 150
    ERROR = 200


_current_level = DEFAULT_LEVEL


def debug_level() -> int:
    """Return the current debug level."""
    return _current_level


def _label(level: int) -> str:
    try:
        return DebugLevel(level).name.lower()
    except ValueError:
        return "dbg"


def emit(level: int, message: str) -> bool:
    """Write message to stderr if level passes the filter; return whether it did."""
    if level < _current_level:
        return False
    print(f"{_label(level)}: {message}", file=sys.stderr)
    return True


def set_debug_level(level: int, why: str = "", quiet: bool = False) -> None:
    """Change the debug level, announcing the change unless quiet.

    When the level is lowered (more messages) the change happens before the
    announcement, otherwise after it, so the announcement is shown whenever
    either level would show it.
    """
    global _current_level
    if not 0 <= level <= 0xFF:
        raise ValueError(f"debug level must be in 0..255, got {level}")
    more_debug = level < _current_level
    if more_debug:
        _current_level = level
    if not quiet:
        emit(DebugLevel.NOTE, f"Setting debug level to {level} because: {why}")
    if not more_debug:
        _current_level = level


def shorten_file(name: str) -> str:
    """Return the part of a path after its 'antinet' directory, or the path unchanged."""
    start = 0
    while True:
        slash = name.find("/", start)
        if slash < 0:
            return name
        if name[start:slash] == _PROJECT_DIR:
            return name[slash:]
        start = slash + 1
        if start >= len(name):
            return name