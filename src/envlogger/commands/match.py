"""envlogger match — would this record get through?

Evaluates one synthetic record against a spec and reports which
directive decided and whether the content filter passed.

Exit status is 0 when the record would be forwarded and 1 when it
would be dropped, so the command can be used in shell tests.
"""

import argparse

from envlogger.commands.check import build_logger
from envlogger.levels import FilterLevel
from envlogger.logger import Record
from envlogger.output import print_drop, print_error, print_item, print_ok


def register(subparsers, parents):
    """Register the 'match' subcommand."""
    p = subparsers.add_parser(
        "match",
        parents=parents,
        help="Check whether a record would pass a spec",
        description=(
            "Evaluate a record (LEVEL, MODULE, MESSAGE) against a spec.\n"
            "Exit status 0 means forwarded, 1 means dropped."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("level", metavar="LEVEL",
                   help="Record level (error, warn, info, debug, trace or 1-5)")
    p.add_argument("module", metavar="MODULE",
                   help="Module path of the record, e.g. app.db.pool")
    p.add_argument("message", nargs="?", default="", metavar="MESSAGE",
                   help="Rendered message text")
    p.add_argument("--spec", default=None,
                   help="Logging spec (default: $ENVLOG, then .envlog.json)")
    p.set_defaults(func=run)


def run(args):
    """Execute the match command."""
    try:
        level = FilterLevel.parse(args.level)
    except ValueError as e:
        print_error(str(e))
        return 2
    if level is FilterLevel.OFF:
        print_error("'off' is a filter ceiling, not a record level")
        return 2

    logger, _ = build_logger(args)
    record = Record(level=level, module=args.module, msg=args.message)

    directive = logger.directive_for(args.module)
    print_item("directive", directive if directive is not None else "(none)")

    if not logger.enabled(record.level, record.module):
        print_drop(f"{level} is above the level allowed for {args.module!r}")
        return 1
    if not logger.matches_content(record):
        print_drop(f"message does not match {logger.content_filter.pattern!r}")
        return 1

    print_ok(f"{level} record from {args.module!r} is forwarded")
    return 0
