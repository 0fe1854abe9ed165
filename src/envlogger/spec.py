"""
Logging specification parser.

A spec is a comma-separated list of directives, optionally followed by a
single ``/`` and a content filter pattern:

    spec       := directives [ "/" pattern ]
    directive  := LEVEL | MODULE | MODULE "=" | MODULE "=" LEVEL

Examples:
    info                        # everything at info and below
    hello                       # all logging for the 'hello' module
    error,hello=warn            # global errors, warn for hello
    hello=debug/foo*foo         # debug for hello, message must match foo*foo
    crate1::mod1=error,crate2   # '::' and '.' paths are both plain prefixes

Parsing is permissive: a bad directive is dropped with a warning on the
'parse' diagnostics channel and the rest of the spec still applies. The
one exception is a spec with more than one '/', which is ignored whole.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .diagnostics import DEBUG, get_diagnostics
from .filters import DEFAULT_STRATEGY, make_filter
from .levels import FilterLevel


@dataclass(frozen=True)
class Directive:
    """A single (module-prefix, level) rule.

    Attributes:
        module: Path prefix the rule applies to, None for the global default
        level: Most verbose level let through for matching modules
    """
    module: Optional[str]
    level: FilterLevel

    @property
    def sort_key(self) -> int:
        """Prefix length used to order directives (None counts as 0)."""
        return len(self.module) if self.module is not None else 0

    def __str__(self) -> str:
        if self.module is None:
            return str(self.level)
        return f"{self.module}={self.level}"


def _parse_directive(token: str) -> Optional[Directive]:
    """Turn one comma-separated token into a Directive, or None to skip it."""
    diag = get_diagnostics()
    parts = token.split('=')

    if len(parts) == 1:
        # A bare level is a global fallback, anything else is a module
        try:
            return Directive(None, FilterLevel.parse(token))
        except ValueError:
            return Directive(token.strip(), FilterLevel.max())

    if len(parts) == 2:
        module, level = parts[0].strip(), parts[1].strip()
        if not level:
            return Directive(module, FilterLevel.max())
        try:
            return Directive(module, FilterLevel.parse(level))
        except ValueError:
            diag.warn("invalid logging spec '{spec}', ignoring it",
                      channel='parse', spec=level)
            return None

    diag.warn("invalid logging spec '{token}', ignoring it",
              channel='parse', token=token)
    return None


def parse_logging_spec(spec: str, *, strategy: str = DEFAULT_STRATEGY
                       ) -> Tuple[List[Directive], Optional[object]]:
    """Parse a logging spec into directives and an optional content filter.

    Args:
        spec: Spec string, e.g. "crate1::mod1=error,crate2=debug/abc"
        strategy: Content filter strategy ('regex' or 'substring')

    Returns:
        (directives in spec order, filter or None)
    """
    diag = get_diagnostics()
    directives: List[Directive] = []

    segments = spec.split('/')
    if len(segments) > 2:
        diag.warn("invalid logging spec '{spec}', ignoring it (too many '/'s)",
                  channel='parse', spec=spec)
        return [], None

    mods = segments[0]
    pattern = segments[1] if len(segments) == 2 else None

    for token in mods.split(','):
        if not token.strip():
            continue
        directive = _parse_directive(token)
        if directive is None:
            continue
        diag.emit(DEBUG, "  directive {d!r}", channel='parse', d=directive)
        directives.append(directive)

    content_filter = None
    if pattern is not None:
        try:
            content_filter = make_filter(pattern, strategy)
        except (re.error, ValueError) as e:
            diag.warn("invalid regex filter - {err}", channel='filter', err=e)
            content_filter = None

    return directives, content_filter
