"""
Command-line entrypoint.

This script:
- Reads numbers and operators as separate arguments
- Evaluates them with integer precedence rules
- Prints the result to stdout

Example
-------
$ integer-calculator 2 + 3 x 4
14

Any invalid input or arithmetic failure prints nothing to stdout, logs the
reason to stderr and exits with status 1.
"""

import argparse
import sys
from typing import List, Literal, NoReturn, Optional, Sequence

from pydantic import BaseModel, Field, ValidationError

from integer_calculator.calculator import Calculator
from integer_calculator.common.bounds import NATIVE_BITS, IntegerBounds
from integer_calculator.common.errors import CalculatorError
from integer_calculator.common.logger import configure_logging, logger


EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    tokens : List[str]
        Numbers and operators of the expression.
    bits : int
        Width of the signed integer type.
    log_level : str
        Level of diagnostics written to stderr.
    """

    tokens: List[str] = Field(default_factory=list)
    bits: int = Field(default=NATIVE_BITS, ge=8, le=128)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class TokenArgumentParser(argparse.ArgumentParser):
    """Argument parser exiting with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def parse_args(argv: Optional[Sequence[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = TokenArgumentParser(
        prog="integer-calculator",
        description="Evaluate an integer expression given as separate tokens",
        epilog="Operators: + - x * / %. Use -- before tokens that look like options.",
    )

    parser.add_argument(
        "tokens",
        nargs="*",
        help="Alternating numbers and operators, e.g. 2 + 3 x 4",
    )
    parser.add_argument(
        "--bits",
        type=int,
        default=NATIVE_BITS,
        help=f"Signed integer width in bits (default: {NATIVE_BITS})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Diagnostics level written to stderr (default: WARNING)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(tokens=args.tokens, bits=args.bits, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Evaluate the expression given on the command line.

    Usage errors and --help are reported by argparse and return its status.

    :param argv: Arguments without the program name, defaults to sys.argv[1:]
    :return: Process exit status
    :rtype: int
    """
    try:
        cli_args = parse_args(argv)
    except SystemExit as exc:
        return exc.code
    configure_logging(cli_args.log_level)

    calculator = Calculator(bounds=IntegerBounds(bits=cli_args.bits))

    try:
        result = calculator.calculate(cli_args.tokens)
    except CalculatorError as exc:
        logger.error(f"❌ {type(exc).__name__}: {exc}")
        return EXIT_FAILURE

    print(result)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
