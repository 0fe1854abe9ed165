"""envlogger check — parse a logging spec and show how it resolves.

Prints the directives in the order they are consulted (most specific
first), the content filter, and the most verbose level any module can
reach. Parse warnings go to stderr on the 'parse' channel.
"""

import argparse

from envlogger.config import DEFAULT_ENV_VAR, resolve_spec, resolve_strategy
from envlogger.logger import LogBuilder
from envlogger.output import print_header, print_item, print_warn


def register(subparsers, parents):
    """Register the 'check' subcommand."""
    p = subparsers.add_parser(
        "check",
        parents=parents,
        help="Parse a spec and list its directives",
        description=(
            "Parse a logging spec and show the resulting directives.\n"
            "Without SPEC the spec is read from $ENVLOG (or --env-var),\n"
            "then from the nearest .envlog.json."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("spec", nargs="?", metavar="SPEC",
                   help="Logging spec, e.g. 'warn,app.db=debug/slow'")
    p.set_defaults(func=run)


def build_logger(args):
    """Build an EnvLogger from the command's spec-source arguments.

    Returns (logger, spec) where spec is None when nothing was configured.
    """
    spec = resolve_spec(explicit=getattr(args, "spec", None),
                        env_var=args.env_var or DEFAULT_ENV_VAR)
    builder = LogBuilder().strategy(resolve_strategy(explicit=args.strategy))
    if spec is not None:
        builder.parse(spec)
    return builder.build(), spec


def run(args):
    """Execute the check command."""
    logger, spec = build_logger(args)

    if spec is None:
        print_warn("no spec configured; the default is errors only")

    print_header("directives (most specific first)")
    for directive in reversed(logger.directives):
        module = directive.module if directive.module is not None else "*"
        print_item(module, directive.level)

    print_header("content filter")
    if logger.content_filter is None:
        print_item("pattern", "(none)")
    else:
        print_item("pattern", repr(logger.content_filter.pattern))
        print_item("strategy", type(logger.content_filter).__name__)

    print_header("summary")
    print_item("max level", logger.max_level())
    return 0
