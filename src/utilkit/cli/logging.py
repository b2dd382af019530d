"""Command-line helpers for configuring utilkit logging."""

import logging

from utilkit.logging import get_logger, reset_logger
from utilkit.logging.logging import get_configured_level, _resolve_log_file
from utilkit.logging.config import save_log_dir, save_log_level

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def register_subcommands(subparsers):
    """Register logging subcommands on the provided ``argparse`` object.

    Parameters
    ----------
    subparsers : :class:`argparse._SubParsersAction`
        The ``argparse`` subparsers object to which logging commands are added.
    """

    set_level_parser = subparsers.add_parser("set-level", help="Persist the logging level")
    set_level_parser.add_argument("level", choices=LEVELS, help="Logging level to use")

    set_dir_parser = subparsers.add_parser("set-dir", help="Persist the log directory")
    set_dir_parser.add_argument("directory", help="Directory for utilkit.log")

    subparsers.add_parser("show-path", help="Show the log file location")
    subparsers.add_parser("show-level", help="Show the configured logging level")


def dispatch(args):
    """Execute the logging command associated with ``args.subcommand``."""

    if args.subcommand == "set-level":
        level_name = args.level.upper()
        save_log_level(level_name)
        reset_logger()
        get_logger(level=getattr(logging, level_name))
    elif args.subcommand == "set-dir":
        path = save_log_dir(args.directory)
        reset_logger()
        print(path)
    elif args.subcommand == "show-path":
        print(_resolve_log_file().resolve())
    elif args.subcommand == "show-level":
        print(get_configured_level())
    else:
        get_logger(__name__).error("No handler for subcommand: %s", args.subcommand)
