"""Main CLI entry point for envlogger.

A small developer tool for checking logging specs before putting them in
the environment.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--verbose, --quiet, --show)
  2. Second pass: dispatch to subcommand

Global flags can appear before OR after the subcommand:
  envlogger -v check "info,app.db=debug"      # works
  envlogger check "info,app.db=debug" -v      # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from envlogger._version import BASE_VERSION, VERSION


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show diagnostics channel (bare --show lists channels)"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared argument parser for spec-source flags."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--env-var", metavar="NAME", default=None,
                        help="Environment variable to read the spec from "
                             "(default: ENVLOG)")
    common.add_argument("--strategy", choices=["regex", "substring"],
                        default=None,
                        help="Content filter strategy (default: regex)")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in envlogger.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from envlogger.commands import check, match
    return [check, match]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="envlogger",
        description="envlogger — check and try out logging filter specs",
        epilog=(
            "Run 'envlogger <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--verbose, --quiet, --show) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"envlogger {BASE_VERSION} ({VERSION})",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the envlogger CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 1 = record dropped, 2 = usage error).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Handle bare --show (list channels and exit)
    if global_args.show and None in global_args.show:
        from envlogger.diagnostics import format_channel_list
        print(format_channel_list())
        return 0

    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.show or []) if s is not None]
    from envlogger.diagnostics import init_diagnostics
    try:
        init_diagnostics(verbosity=verbosity, channels=channels)
    except ValueError as e:
        print(f"envlogger: invalid --show value: {e}", file=sys.stderr)
        return 2

    # Pass 2: parse subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
