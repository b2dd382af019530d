# utilkit/cli/main.py
import argparse

from utilkit.cli import logging as logging_cli
from utilkit.cli import matrix as matrix_cli


def build_parser():
    parser = argparse.ArgumentParser(prog="utilkit", description="utilkit helper toolkit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    matrix_parser = subparsers.add_parser("matrix", help="Edit 2D matrix files")
    matrix_subparsers = matrix_parser.add_subparsers(dest="subcommand", required=True)
    matrix_cli.register_subcommands(matrix_subparsers)

    logging_parser = subparsers.add_parser("logging", help="Logging utilities")
    logging_subparsers = logging_parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(logging_subparsers)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.command == "matrix":
        matrix_cli.dispatch(args)
    elif args.command == "logging":
        logging_cli.dispatch(args)


if __name__ == "__main__":
    main()
