"""CLI Argument Parsing"""

import argparse
import argcomplete

from gitai import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gitai',
        description='AI-powered git commit messages',
        epilog='Example: git add -p && gitai commit'
    )
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--verbose', action='store_true', help='Log debug info (requests, timings) to stderr')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND', required=True)

    subparsers.add_parser('init', parents=[common], help='Initialize gitai with your API key')

    commit = subparsers.add_parser('commit', parents=[common], help='Generate a commit message based on staged changes')
    commit.add_argument('-c', '--conventional', action='store_true', help='Use Conventional Commits format: type(scope): description')
    commit.add_argument('--print', dest='print_only', action='store_true', help='Print the message instead of opening git commit')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
