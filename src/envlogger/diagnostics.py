"""
Diagnostics — THAC0 verbosity-gated output for envlogger's own messages.

envlogger cannot report its configuration problems through the logging
system it is filtering, so warnings about malformed specs are written
straight to a file handle (stderr by default) through this manager.

The emit rule is: message shows when message.level <= threshold.
The threshold is either a per-channel override or the global verbosity.

THAC0 axis:
    ←── quieter ────────── default ────────── louder ──→
    -4    -3     -2       0       2      3
    wall  errors warnings default config debug

Channel spec syntax (compact):
    CHANNEL[:LEVEL]

    Examples:
        parse           # level 0
        parse:-4        # silence spec parse warnings entirely
        config:2        # show config resolution details at -v -v
"""

import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional, TextIO


# Positive levels (verbose output, shown with -v/-vv/-vvv)
DEBUG = 3          # Internal state, per-token parse trace
CONFIG = 2         # Configuration resolution (which source won)
DEFAULT = 0        # Default output

# Negative levels (quiet suppression, activated with -Q/-QQ/-QQQ/-QQQQ)
WARNING = -2       # Spec parse warnings live here
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall — nothing at all


KNOWN_CHANNELS = {
    'parse',        # Specification string parsing
    'filter',       # Content filter construction
    'config',       # Spec source resolution
    'general',      # Default channel
    'error',        # Error messages
}

CHANNEL_DESCRIPTIONS = {
    'parse':   'Specification string parsing',
    'filter':  'Content filter construction',
    'config':  'Spec source resolution (argument, env, file)',
    'general': 'General output',
    'error':   'Error messages',
}


@dataclass
class ChannelConfig:
    """Threshold override for a single diagnostics channel."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a ``CHANNEL[:LEVEL]`` spec string into a ChannelConfig.

    Args:
        spec: Channel spec like "parse" or "parse:-4"

    Returns:
        ChannelConfig with parsed values

    Raises:
        ValueError: if the level slot is not an integer
    """
    name, _, level = spec.partition(':')
    return ChannelConfig(name=name.strip(),
                         level=int(level) if level.strip() else 0)


def format_channel_list() -> str:
    """Format the list of known channels for display."""
    lines = ["Available channels:"]
    max_name = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        lines.append(f"  {name:<{max_name}}  {desc}")
    return "\n".join(lines)


class Diagnostics:
    """Verbosity-gated writer for envlogger's own diagnostic lines.

    Usage::

        diag = Diagnostics(verbosity=0)
        diag.warn("invalid logging spec '{spec}', ignoring it",
                  channel='parse', spec="a=b=c")
        diag.emit(2, "spec taken from {source}", channel='config',
                  source="ENVLOG")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self._file = file

    @property
    def file(self) -> TextIO:
        # Looked up per call so pytest's capsys sees stderr swaps
        return self._file if self._file is not None else sys.stderr

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Emit a message if level <= threshold for that channel.

        At threshold -4 (hard wall) nothing is emitted regardless of level.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders
        """
        threshold = self.threshold(channel)
        if threshold <= NOTHING:
            return
        if level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def warn(self, message: str, *, channel: str = 'general',
             **kwargs: Any) -> None:
        """Emit a ``warning: ...`` line at WARNING level."""
        self.emit(WARNING, "warning: " + message, channel=channel, **kwargs)

    def error(self, message: str) -> None:
        """Emit an error message (level -3, shown unless at hard wall)."""
        self.emit(ERROR, message, channel='error')


# =============================================================================
# Module-level singleton
# =============================================================================

_diagnostics: Optional[Diagnostics] = None


def init_diagnostics(verbosity: int = 0, channels: list = None,
                     file: TextIO = None) -> Diagnostics:
    """Initialize the module-level Diagnostics singleton.

    Args:
        verbosity: THAC0 verbosity level (0=default, positive=verbose, negative=quiet)
        channels: List of channel spec strings (e.g., ['parse:-4', 'config:2'])
        file: Destination handle, stderr when None

    Returns:
        The initialized Diagnostics instance
    """
    global _diagnostics

    channel_overrides = {}
    for spec in channels or []:
        cfg = parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _diagnostics = Diagnostics(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _diagnostics


def get_diagnostics() -> Diagnostics:
    """Get the module-level Diagnostics, creating a default if needed."""
    global _diagnostics
    if _diagnostics is None:
        _diagnostics = Diagnostics()
    return _diagnostics
