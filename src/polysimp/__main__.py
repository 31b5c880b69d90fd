"""Rewrite polynomials in canonical form, with like terms combined."""

import argparse
import configparser
import logging
import sys
import typing

import polysimp
from polysimp.core import iotools


def main(argv: typing.Sequence[str]=None) -> int:
    """Print the canonical form of each expression on its own line."""
    parser = argparse.ArgumentParser(
        prog='polysimp',
        description=__doc__,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        'expressions',
        help="one or more polynomials (e.g., '200x + 100x^2 + 300')",
        nargs='+',
        metavar='EXPR',
    )
    parser.add_argument(
        '--ini',
        help=(
            "path to a settings file"
            f"\n(default: the first {polysimp.INI} found)"
        ),
        metavar='PATH',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        help="log each stage of the pipeline",
        action='store_true',
    )
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(name)s: %(message)s',
        )
    try:
        options = polysimp.settings(args.ini)
    except (iotools.NonExistentPathError, configparser.Error) as err:
        parser.error(str(err))
    status = 0
    for expression in args.expressions:
        try:
            print(polysimp.simplify(expression, **options))
        except polysimp.InterpreterError as err:
            print(f"{expression!r}: {err}", file=sys.stderr)
            status = 1
    return status


if __name__ == '__main__':
    sys.exit(main())
