"""envlogger — per-module log filtering configured from an environment variable.

A spec such as ``ENVLOG="warn,app.db=debug/slow query"`` lists
``module=level`` directives and an optional ``/pattern`` content filter.
An EnvLogger wraps a nested drain and forwards only the records the spec
lets through; the longest matching module prefix decides the level.

Public API:
    FilterLevel         — ordered verbosity ceiling (OFF..TRACE)
    Directive           — one (module-prefix, level) rule
    parse_logging_spec  — spec string → (directives, filter)
    RegexFilter, SubstringFilter, make_filter — content filters
    Record, Discard     — event type and a no-op drain
    LogBuilder, EnvLogger, new — build and use the filter
    EnvFilterHandler    — stdlib logging.Handler wrapper
"""

from envlogger._version import __version__, __app_name__
from envlogger.levels import FilterLevel
from envlogger.filters import RegexFilter, SubstringFilter, make_filter
from envlogger.spec import Directive, parse_logging_spec
from envlogger.logger import Discard, EnvLogger, LogBuilder, Record, new
from envlogger.handler import EnvFilterHandler, HandlerDrain, record_from_logging

__all__ = [
    "__version__", "__app_name__",
    "FilterLevel",
    "RegexFilter", "SubstringFilter", "make_filter",
    "Directive", "parse_logging_spec",
    "Discard", "EnvLogger", "LogBuilder", "Record", "new",
    "EnvFilterHandler", "HandlerDrain", "record_from_logging",
]
