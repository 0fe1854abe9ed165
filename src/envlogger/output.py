"""Output formatting utilities for the envlogger CLI.

Consistent message formatting across commands.  Bridges the print_*()
functions with the THAC0 verbosity of the diagnostics layer, so they
respect the quiet axis at extreme levels (-QQQ, -QQQQ).
"""

from .diagnostics import NOTHING, WARNING, get_diagnostics


def _should_print():
    """Check if user-facing print_*() calls should display.

    These are effectively level -2 (WARNING) messages — they show at
    verbosity -2 and above, but are suppressed at -3 (errors only)
    and -4 (hard wall / silent).
    """
    verbosity = get_diagnostics().verbosity
    if verbosity <= NOTHING:
        return False
    return WARNING <= verbosity


def print_header(msg):
    """Print a section header."""
    if _should_print():
        print(f"== {msg} ==")


def print_item(label, value):
    """Print an indented label/value line."""
    if _should_print():
        print(f"  {label}: {value}")


def print_ok(msg):
    """Print a success message."""
    if _should_print():
        print(f"  [OK] {msg}")


def print_drop(msg):
    """Print a dropped-record message."""
    if _should_print():
        print(f"  [DROP] {msg}")


def print_warn(msg):
    """Print a warning message."""
    if _should_print():
        print(f"  [WARN] {msg}")


def print_error(msg):
    """Print an error message to stderr.

    Routes through Diagnostics.error() which emits at level -3.
    Shown at all verbosity levels except hard wall (-QQQQ / -4).
    """
    get_diagnostics().error(f"  ERROR: {msg}")

