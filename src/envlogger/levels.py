"""
FilterLevel — ordered verbosity ceiling for directives and events.

The emit rule mirrors the THAC0 rule used by the diagnostics layer, only
on the record's axis instead of the reader's:

    record.level <= directive.level  →  record is let through

    ←── quieter ──────────────────────────── louder ──→
    0     1      2        3     4      5
    off   error  warning  info  debug  trace

OFF lets nothing through, TRACE lets everything through.
"""

import logging
from enum import IntEnum


# Accepted spellings for FilterLevel.parse() (lowercase)
LEVEL_NAMES = {
    'off': 0,
    'error': 1,
    'warn': 2,
    'warning': 2,
    'info': 3,
    'debug': 4,
    'trace': 5,
}


class FilterLevel(IntEnum):
    """Verbosity ceiling. Comparisons follow the integer rank."""

    OFF = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def max(cls) -> 'FilterLevel':
        """The most permissive level."""
        return cls.TRACE

    @classmethod
    def min(cls) -> 'FilterLevel':
        """The least permissive level."""
        return cls.OFF

    @classmethod
    def parse(cls, text) -> 'FilterLevel':
        """Parse a level name or integer rank.

        Names are case-insensitive and surrounding whitespace is ignored.
        Integer ranks run from 0 (off) to 5 (trace).

        Args:
            text: Level name like "warn" or rank like "2"

        Returns:
            The matching FilterLevel

        Raises:
            ValueError: if text is neither a known name nor a valid rank
        """
        if isinstance(text, FilterLevel):
            return text
        token = str(text).strip().lower()
        if token in LEVEL_NAMES:
            return cls(LEVEL_NAMES[token])
        if token.isdecimal():
            rank = int(token)
            if cls.OFF <= rank <= cls.TRACE:
                return cls(rank)
        raise ValueError(f"invalid filter level: {text!r}")

    @classmethod
    def from_logging(cls, levelno: int) -> 'FilterLevel':
        """Map a stdlib logging level number onto a FilterLevel.

        CRITICAL folds into ERROR. Anything below DEBUG (including
        custom levels like 5, and NOTSET) becomes TRACE.
        """
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE

    def to_logging(self) -> int:
        """The lowest stdlib level number this ceiling still admits."""
        return _TO_LOGGING[self]

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, format_spec: str) -> str:
        # IntEnum would otherwise format as the bare integer
        return format(str(self), format_spec)


# OFF maps above CRITICAL so a stdlib logger set to it admits nothing
_TO_LOGGING = {
    FilterLevel.OFF: logging.CRITICAL + 10,
    FilterLevel.ERROR: logging.ERROR,
    FilterLevel.WARNING: logging.WARNING,
    FilterLevel.INFO: logging.INFO,
    FilterLevel.DEBUG: logging.DEBUG,
    FilterLevel.TRACE: 5,
}
