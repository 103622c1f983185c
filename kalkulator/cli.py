"""Command line front end.

Convert an expression to postfix without evaluating it::

    kalkulator --expr "2+3/4" -p

Evaluate an expression::

    kalkulator --expr "2+3/4"
"""

import argparse
import logging
import sys
import typing as t

from kalkulator import __version__
from kalkulator.errors import ExpressionError
from kalkulator.expression import Expression
from kalkulator.factorial import FactorialCache

logger = logging.getLogger(__name__)

SUPPORTED_OPERATORS: t.Final[tuple[tuple[str, str], ...]] = (
    ("+", "addition"),
    ("-", "subtraction"),
    ("*", "multiplication"),
    ("/", "integer division, truncating toward zero"),
    ("!", "factorial"),
    ("( )", "grouping"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kalkulator",
        description="kalkulator: a command line integer calculator",
    )
    parser.add_argument("-e", "--expr", help="the expression to process")
    parser.add_argument(
        "-p",
        "--postfix",
        action="store_true",
        help="only convert the expression to postfix notation",
    )
    parser.add_argument(
        "-s",
        "--show-ops",
        action="store_true",
        help="list the supported operators and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def show_operators() -> None:
    print("Supported operators:")
    for symbol, meaning in SUPPORTED_OPERATORS:
        print(f"  {symbol:<4} {meaning}")


def main(argv: t.Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Returns:
        int: The process exit status, 1 if the expression failed.

    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.show_ops:
        show_operators()
        return 0

    if args.expr is None:
        parser.error("the following arguments are required: -e/--expr")

    expression = Expression(args.expr.strip(), FactorialCache())

    try:
        outcome = expression.process(not args.postfix)
    except ExpressionError as error:
        logger.debug("Failed on %r: %s", expression, error.kind.name)
        print(f"Error processing expression: {error}", file=sys.stderr)
        return 1

    if args.postfix:
        print(f"Postfix: [{outcome}]")
    else:
        print(f"Result = {outcome}")
    return 0
