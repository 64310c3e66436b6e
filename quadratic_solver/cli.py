"""
Command line entry point.

Usage: quadratic-solver <a> <b> <c> [-o PATH] [--log-level LEVEL]
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from . import config
from .errors import InvalidArguments, PlottingError
from .graph_engine import render
from .logger import get_logger, setup_logging
from .report import COMPLEX_ROOTS_NOTE, report_lines
from .solver import ComplexRoots, Equation, solve

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PLOTTING_ERROR = 1
EXIT_INVALID_ARGUMENTS = 2

COEFFICIENT_NAMES = ("a", "b", "c")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        # -2. and -1e5 are negative coefficients, not options
        self._negative_number_matcher = re.compile(r"^-(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")

    def error(self, message: str) -> NoReturn:
        raise InvalidArguments(message)


def create_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="quadratic-solver",
        description="Solve ax^2 + bx + c = 0 and plot the parabola",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  quadratic-solver 1 -3 2          Two real roots
  quadratic-solver 1 2 1           One repeated root
  quadratic-solver 1 0 1           Complex conjugate roots
        """,
    )
    parser.add_argument(
        "coefficients",
        nargs="*",
        metavar="COEFFICIENT",
        help="The three real coefficients a, b and c (a must be non-zero)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=config.OUTPUT_PATH,
        help=f"Image file to write (default: {config.OUTPUT_PATH})",
    )
    parser.add_argument(
        "--log-level",
        choices=config.LOG_LEVELS,
        default=config.DEFAULT_LOG_LEVEL,
        help="Diagnostic log level",
    )
    return parser


def _coerce_float(name: str, raw: str) -> float:
    try:
        return float(raw.strip())
    except (TypeError, ValueError):
        raise InvalidArguments(f"coefficient '{name}' is not a number: {raw!r}") from None


def parse_coefficients(values: Sequence[str]) -> Equation:
    if len(values) != len(COEFFICIENT_NAMES):
        raise InvalidArguments(
            f"expected {len(COEFFICIENT_NAMES)} coefficients (a b c), got {len(values)}"
        )
    a, b, c = (_coerce_float(name, raw) for name, raw in zip(COEFFICIENT_NAMES, values))
    return Equation(a, b, c)


def parse_arguments(
    argv: Optional[Sequence[str]] = None,
    parser: Optional[argparse.ArgumentParser] = None,
) -> argparse.Namespace:
    parser = parser or create_parser()
    args = parser.parse_args(argv)
    args.equation = parse_coefficients(args.coefficients)
    return args


def _print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_parser()
    try:
        args = parse_arguments(argv, parser)
    except InvalidArguments as exc:
        parser.print_usage(sys.stderr)
        print(f"error: {exc.message}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENTS

    setup_logging(args.log_level)
    solution = solve(args.equation)
    _print_lines(report_lines(solution))

    if isinstance(solution.roots, ComplexRoots):
        print(COMPLEX_ROOTS_NOTE)

    try:
        path = render(solution, args.output)
    except PlottingError as exc:
        logger.error("plotting failed: %r", exc.cause)
        print(f"error: {exc.message}", file=sys.stderr)
        print(config.RENDER_HINT, file=sys.stderr)
        return EXIT_PLOTTING_ERROR

    logger.info("plot written to %s", path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
