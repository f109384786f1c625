"""CLI Main Entry Point"""

import logging

from gitai.cli.args import parse_args
from gitai.cli.commands import run_commit, run_init


def _configure_logging(verbose: bool) -> None:
    """Debug logs go to stderr only when --verbose is set."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == 'init':
        return run_init()
    return run_commit(conventional=args.conventional, print_only=args.print_only)
