"""CLI Argument Parsing"""

import argparse
import argcomplete

from silly_commit import __version__

PROG = 'silly-commit'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Generate a random, silly commit message',
        epilog='Example: git commit -m "$(silly-commit)"'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Word sources
    parser.add_argument('-n', '--names', type=str, metavar='FILE', help='Names file, one name per line')
    parser.add_argument('-m', '--messages', type=str, metavar='FILE', help='Message templates file, one template per line')

    # Generation options
    parser.add_argument('-c', '--count', type=int, metavar='N', help='Generate N messages (default: 1)')
    parser.add_argument('--seed', type=int, metavar='N', help='Seed the random generator for repeatable output')

    # Output options
    parser.add_argument('--copy', action='store_true', help='Also copy the message to the clipboard')
    parser.add_argument('--verbose', action='store_true', help='Show the chosen name and template on stderr')

    # Setup/config
    parser.add_argument('--save-config', action='store_true', help='Save the given options to ~/.sillyrc')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
