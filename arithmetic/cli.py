"""Command-line interface for the arithmetic evaluator.

WHY: Users want to check an expression from the terminal, pipe a file
of expressions through the calculator, or start the HTTP API, without
writing Python.

HOW: Uses argparse to accept expressions (or read them from stdin, one
per line), a notation, and an output mode: bare results, the postfix
token sequence (--parse), or a registered formatter (--format). --serve
starts the FastAPI app with uvicorn instead.

RULES:
- Results go to stdout, one per line, in input order
- Error details go to stderr as "Error: <detail>"
- Exit status is 1 if any expression failed, 0 otherwise
- With --format, failed values show the placeholder inside the
  formatted document and still set exit status 1
- An unknown configured notation is reported and exits with status 2
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from arithmetic.config import (
    API_HOST,
    API_PORT,
    DEFAULT_NOTATION,
    LOG_LEVEL,
    NOTATIONS,
)
from arithmetic.core.calculator import Calculator
from arithmetic.core.errors import ExpressionError
from arithmetic.formatters import FORMATTERS
from arithmetic.render import CalculatedValueRenderer

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status or error message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def _read_expressions(args: argparse.Namespace) -> List[str]:
    """Expressions from the command line, or non-blank stdin lines."""
    if args.expressions:
        return list(args.expressions)
    return [line.rstrip("\r\n") for line in sys.stdin if line.strip()]


def _run_plain(expressions: List[str], notation: str, parse_only: bool) -> int:
    calculator = Calculator()
    failures = 0
    for expression in expressions:
        try:
            if parse_only:
                print(" ".join(calculator.parse(expression, notation).texts()))
            else:
                print(calculator.calculate(expression, notation))
        except ExpressionError as exc:
            failures += 1
            logger.debug("Failed expression %r", expression)
            _status("Error: {}".format(exc))
    return 1 if failures else 0


def _run_formatted(expressions: List[str], notation: str, format_key: str) -> int:
    renderer = CalculatedValueRenderer(notation=notation)
    values = renderer.view_elements(expressions)
    formatter = FORMATTERS[format_key]()
    for output in formatter.format(values):
        sys.stdout.write(output.content)
        if output.content and not output.content.endswith("\n"):
            sys.stdout.write("\n")
    return 0 if all(value.ok for value in values) else 1


def _serve() -> int:
    from arithmetic.server.app import run_api

    run_api()
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: expressions (zero or more; stdin when none)
    - Optional: --notation, --parse, --format, --serve
    """
    parser = argparse.ArgumentParser(
        prog="arithmetic",
        description="Calculate arithmetic expressions written in infix "
                    "(\"12-(4*3)\") or postfix (\"12 4 3 * -\") notation.",
    )

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to calculate. Reads one per line from stdin when omitted.",
    )

    parser.add_argument(
        "--notation",
        choices=NOTATIONS,
        default=DEFAULT_NOTATION,
        help="Notation of the expressions (default: %(default)s).",
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--parse",
        action="store_true",
        help="Print the postfix token sequence instead of the result.",
    )
    output.add_argument(
        "--format",
        choices=sorted(FORMATTERS.keys()),
        default=None,
        help="Render results through an output formatter.",
    )
    output.add_argument(
        "--serve",
        action="store_true",
        help="Run the HTTP API on {}:{}.".format(API_HOST, API_PORT),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Always exits via sys.exit with the computed status
    """
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.notation not in NOTATIONS:
        _status("Error: Unknown notation '{}'. Available: {}".format(
            args.notation, ", ".join(NOTATIONS)
        ))
        sys.exit(2)

    if args.serve:
        sys.exit(_serve())

    expressions = _read_expressions(args)
    if args.format:
        sys.exit(_run_formatted(expressions, args.notation, args.format))
    sys.exit(_run_plain(expressions, args.notation, args.parse))


if __name__ == "__main__":
    main()
