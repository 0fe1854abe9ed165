"""envlogger subcommands."""
