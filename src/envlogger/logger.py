"""
EnvLogger — a drain wrapper that filters records by module and content.

Per record:
    1. enabled(level, module)  longest matching directive decides
    2. content filter          rendered message must match the pattern
    3. forward                 nested drain's result is returned as-is

A dropped record returns None, same as a drain that accepted it.

Usage::

    logger = (LogBuilder(drain)
              .filter(None, FilterLevel.INFO)
              .parse("app.db=debug/slow query")
              .build())
    logger.log(Record(FilterLevel.DEBUG, "app.db.pool", "slow query: %s", (sql,)))
"""

import io
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Mapping, Optional, Protocol, Tuple

from .config import DEFAULT_ENV_VAR, resolve_spec, resolve_strategy
from .diagnostics import get_diagnostics
from .filters import DEFAULT_STRATEGY, STRATEGIES
from .levels import FilterLevel
from .spec import Directive, parse_logging_spec


@dataclass
class Record:
    """A log event as seen by the filter.

    Attributes:
        level: Severity of the event
        module: Dotted or ::-separated path of the emitting module
        msg: Message, or a %-format string when args are given
        args: Arguments for msg
        kv: Structured key-value context, forwarded without inspection
        origin: Opaque source object (e.g. a logging.LogRecord)
    """
    level: FilterLevel
    module: str
    msg: Any
    args: tuple = ()
    kv: Mapping[str, Any] = field(default_factory=dict)
    origin: Any = None

    def render(self) -> str:
        """Render the message text the content filter is tested against.

        A msg/args mismatch falls back to the bare msg text, so a bad
        format string is judged by the filter the same way it would pass
        the level gate; the drain still decides how to report it.
        """
        text = str(self.msg)
        if self.args:
            try:
                text = text % self.args
            except (TypeError, ValueError, KeyError):
                pass
        return text


class Drain(Protocol):
    """Anything that accepts a Record."""

    def log(self, record: Record) -> Any:
        ...


class Discard:
    """A drain that accepts and drops everything."""

    def log(self, record: Record) -> None:
        return None


class EnvLogger:
    """Filtering wrapper around a nested drain.

    Directives are stored sorted by prefix length, shortest first, so a
    reverse scan meets the most specific applicable directive first.
    Build instances through LogBuilder or new().
    """

    def __init__(self, drain, directives, content_filter=None):
        self.drain = drain
        self.directives: Tuple[Directive, ...] = tuple(directives)
        self.content_filter = content_filter
        self._local = threading.local()

    @classmethod
    def from_env(cls, drain, env_var: str = DEFAULT_ENV_VAR) -> 'EnvLogger':
        """Build from the spec in ``env_var`` (or .envlog.json)."""
        return LogBuilder(drain).from_env(env_var).build()

    def max_level(self) -> FilterLevel:
        """The most verbose level any directive lets through."""
        return max((d.level for d in self.directives),
                   default=FilterLevel.OFF)

    def directive_for(self, module: str) -> Optional[Directive]:
        """The directive that governs ``module``, or None if none applies.

        Prefixes are plain string prefixes: "app.d" covers "app.db".
        """
        for directive in reversed(self.directives):
            if directive.module is not None and \
                    not module.startswith(directive.module):
                continue
            return directive
        return None

    def enabled(self, level: FilterLevel, module: str) -> bool:
        """Check a level/module pair against the longest matching directive.

        OFF is a ceiling, never a record level: an OFF record is always
        disabled, and an OFF directive admits nothing.
        """
        if level is FilterLevel.OFF:
            return False
        directive = self.directive_for(module)
        if directive is None or directive.level is FilterLevel.OFF:
            return False
        return level <= directive.level

    @contextmanager
    def _scratch(self) -> Iterator[io.StringIO]:
        """This thread's render buffer, emptied again on every exit path."""
        buf = getattr(self._local, 'buf', None)
        if buf is None:
            buf = self._local.buf = io.StringIO()
        try:
            yield buf
        finally:
            buf.seek(0)
            buf.truncate()

    def matches_content(self, record: Record) -> bool:
        """Test the record's rendered message against the content filter."""
        if self.content_filter is None:
            return True
        with self._scratch() as buf:
            buf.write(record.render())
            return self.content_filter.is_match(buf.getvalue())

    def log(self, record: Record) -> Any:
        """Forward ``record`` to the nested drain if it passes both gates.

        Returns the drain's result, or None when the record was dropped.
        Exceptions raised by the drain propagate unchanged.
        """
        if not self.enabled(record.level, record.module):
            return None
        if not self.matches_content(record):
            return None
        return self.drain.log(record)

    def __repr__(self) -> str:
        dirs = ','.join(str(d) for d in self.directives)
        if self.content_filter is not None:
            dirs += f"/{self.content_filter}"
        return f"EnvLogger({dirs!r})"


class LogBuilder:
    """Accumulates directives and a content filter, then builds an EnvLogger.

    Usage::

        logger = LogBuilder(drain).parse("warn,app.http=debug").build()
    """

    def __init__(self, drain=None):
        self._drain = drain
        self._directives: List[Directive] = []
        self._filter = None
        self._strategy = None

    def filter(self, module: Optional[str], level: FilterLevel) -> 'LogBuilder':
        """Add a directive; ``module=None`` applies to every module."""
        self._directives.append(Directive(module, FilterLevel.parse(level)))
        return self

    def strategy(self, name: str) -> 'LogBuilder':
        """Choose the content filter strategy for subsequent parse() calls.

        An unknown name is reported and the current strategy is kept.
        """
        if name in STRATEGIES:
            self._strategy = name
        else:
            get_diagnostics().warn(
                "unknown filter strategy '{name}', using '{current}'",
                channel='filter', name=name,
                current=self._strategy or DEFAULT_STRATEGY)
        return self

    def parse(self, spec: str) -> 'LogBuilder':
        """Add the directives in ``spec`` and replace the content filter."""
        directives, content_filter = parse_logging_spec(
            spec, strategy=self._strategy or DEFAULT_STRATEGY)
        self._filter = content_filter
        self._directives.extend(directives)
        return self

    def from_env(self, env_var: str = DEFAULT_ENV_VAR,
                 start_dir=None) -> 'LogBuilder':
        """Parse the spec resolved from ``env_var`` or .envlog.json, if any."""
        self.strategy(resolve_strategy(explicit=self._strategy,
                                       start_dir=start_dir))
        spec = resolve_spec(env_var=env_var, start_dir=start_dir)
        if spec is not None:
            self.parse(spec)
        return self

    def build(self) -> EnvLogger:
        """Sort the directives and wrap the drain.

        With no directives at all the logger lets errors through only.
        """
        if not self._directives:
            directives = [Directive(None, FilterLevel.ERROR)]
        else:
            # stable: equal-length prefixes keep insertion order
            directives = sorted(self._directives, key=lambda d: d.sort_key)

        drain = self._drain if self._drain is not None else Discard()
        return EnvLogger(drain, directives, self._filter)


def new(drain, env_var: str = DEFAULT_ENV_VAR) -> EnvLogger:
    """Create an EnvLogger configured from the ``env_var`` environment variable."""
    return LogBuilder(drain).from_env(env_var).build()
