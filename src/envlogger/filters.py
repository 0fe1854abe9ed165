"""
Content filters — the optional ``/pattern`` tail of a logging spec.

Two interchangeable strategies, chosen once when the logger is built:

    regex       re.search() against the rendered message (unanchored)
    substring   plain ``pattern in message`` test

Both expose ``is_match(text)`` and ``pattern``; ``str(f)`` is the pattern.
"""

import re


STRATEGIES = ('regex', 'substring')
DEFAULT_STRATEGY = 'regex'


class RegexFilter:
    """Regular expression content filter.

    Raises re.error from the constructor when the pattern does not compile.
    """

    def __init__(self, pattern: str):
        self._pattern = pattern
        self._regex = re.compile(pattern)

    @property
    def pattern(self) -> str:
        return self._pattern

    def is_match(self, text: str) -> bool:
        return self._regex.search(text) is not None

    def __str__(self) -> str:
        return self._pattern

    def __repr__(self) -> str:
        return f"RegexFilter({self._pattern!r})"


class SubstringFilter:
    """Literal substring content filter. Never fails to build."""

    def __init__(self, pattern: str):
        self._pattern = pattern

    @property
    def pattern(self) -> str:
        return self._pattern

    def is_match(self, text: str) -> bool:
        return self._pattern in text

    def __str__(self) -> str:
        return self._pattern

    def __repr__(self) -> str:
        return f"SubstringFilter({self._pattern!r})"


_FILTER_TYPES = {
    'regex': RegexFilter,
    'substring': SubstringFilter,
}


def make_filter(pattern: str, strategy: str = DEFAULT_STRATEGY):
    """Build a content filter for ``pattern`` using the named strategy.

    Args:
        pattern: Filter text from the spec (everything after the '/')
        strategy: 'regex' or 'substring'

    Returns:
        RegexFilter or SubstringFilter

    Raises:
        ValueError: unknown strategy name
        re.error: regex strategy and the pattern does not compile
    """
    try:
        filter_type = _FILTER_TYPES[strategy]
    except KeyError:
        raise ValueError(
            f"unknown filter strategy {strategy!r} "
            f"(expected one of: {', '.join(STRATEGIES)})"
        ) from None
    return filter_type(pattern)
