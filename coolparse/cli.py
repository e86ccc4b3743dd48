#!/usr/bin/env python3
"""
coolparse command-line driver
=============================

Parse COOL source and report the result.

Usage:
    coolparse program.cl                  # recognize a whole program
    coolparse -e "1 + 2 * 3"              # print the expression tree
    coolparse -e "8 / 4 / 2" --json       # the tree as JSON
    cat Main.cl | coolparse --rule class  # read from stdin
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .options import ParserOptions
from .parser import RULES, EXPRESSION_RULES, ParseError, parse_source
from .parser.printer import format_expression, expression_to_dict

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coolparse",
        description="Parse a subset of COOL and print the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    coolparse program.cl                    # Recognize a whole program
    coolparse -e "val <- not true"          # Print an expression tree
    coolparse -e "8 / 4 / 2" --json         # Expression tree as JSON
        """
    )

    # Input options
    parser.add_argument('file', nargs='?',
                        help='Source file to parse (default: stdin)')
    parser.add_argument('-e', '--expr', metavar='TEXT',
                        help='Parse TEXT instead of reading a file')
    parser.add_argument('--rule', choices=sorted(RULES),
                        help='Grammar rule to match (default: program, or expr with -e)')

    # Grammar options
    parser.add_argument('--no-variables', action='store_true',
                        help='Reject bare identifiers as variable references')
    parser.add_argument('--left-assoc-factors', action='store_true',
                        help="Group '*' and '/' left to right")

    # Output options
    parser.add_argument('--json', action='store_true',
                        help='Print expression trees as JSON')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase log verbosity (-v info, -vv debug)')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    return parser


def _configure_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_source(args: argparse.Namespace) -> tuple:
    if args.expr is not None:
        return args.expr, "<expr>"
    if args.file and args.file != "-":
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read(), args.file
    return sys.stdin.read(), "<stdin>"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the coolparse command"""
    args = build_arg_parser().parse_args(argv)
    _configure_logging(args.verbose)

    rule = args.rule or ("expr" if args.expr is not None else "program")

    try:
        source, filename = _read_source(args)
    except OSError as e:
        print(f"coolparse: cannot read {args.file}: {e.strerror}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        print(f"coolparse: cannot decode {args.file or '<stdin>'}: {e}", file=sys.stderr)
        return 2

    options = ParserOptions(
        filename=filename,
        allow_variables=not args.no_variables,
        left_assoc_factors=args.left_assoc_factors,
    )
    logger.info("parsing %s as %s", filename, rule)

    try:
        value = parse_source(source, rule, options)
    except ParseError as e:
        print(str(e), end="", file=sys.stderr)
        return 1

    if rule in EXPRESSION_RULES:
        if args.json:
            print(json.dumps(expression_to_dict(value), indent=2))
        else:
            print(format_expression(value))
    else:
        print("ok")

    return 0


if __name__ == "__main__":
    sys.exit(main())
