"""Validate a pre-tokenized arithmetic expression and extract its parts."""
import re
from typing import List, Optional, Sequence

from integer_calculator.common.bounds import NATIVE_BOUNDS, IntegerBounds
from integer_calculator.common.errors import (
    ConsecutiveOperatorsError,
    EmptyInputError,
    InvalidNumberError,
    InvalidOperatorError,
    LeadingOrTrailingOperatorError,
    MalformedExpressionError,
    UntokenizedInputError,
)
from integer_calculator.common.logger import logger
from integer_calculator.common.models import ParsedExpression
from integer_calculator.common.operators import Operator, is_operator


# Optional sign followed by ASCII digits only
NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


class TokenParser:
    """
    Validate a flat token sequence and split it into numbers and operators.

    Design constraints:
        - No lexing, tokens arrive already split
        - Numbers sit at even positions, operators at odd positions
        - Fail on the first violation, never return a partial result

    Examples:
        - ["10", "+", "5"] -> numbers [10, 5], operators [+]
        - ["7"] -> numbers [7], operators []
    """

    @staticmethod
    def _to_number(token: str, bounds: IntegerBounds = NATIVE_BOUNDS) -> Optional[int]:
        """
        Convert a token to an integer if it is a decimal literal within bounds.

        :param str token: Token string
        :param IntegerBounds bounds: Accepted signed integer range

        :return: The integer value, or None if the token is not a valid number
        :rtype: Optional[int]
        """
        if NUMBER_PATTERN.fullmatch(token) is None:
            return None
        value = int(token)
        if not bounds.contains(value):
            return None
        return value

    @staticmethod
    def parse(tokens: Sequence[str], bounds: IntegerBounds = NATIVE_BOUNDS) -> ParsedExpression:
        """
        Check the token structure and extract numbers and operators.

        :param Sequence[str] tokens: Tokens, e.g. ["2", "+", "3", "x", "4"]
        :param IntegerBounds bounds: Accepted signed integer range

        :return: Numbers and operators in their original order
        :rtype: ParsedExpression
        :raises ParseError: On the first structural violation
        """
        if isinstance(tokens, str):
            raise UntokenizedInputError(tokens)
        if not tokens:
            raise EmptyInputError()

        numbers: List[int] = []
        operators: List[Operator] = []

        for index, token in enumerate(tokens):
            if index % 2 == 0:
                # Expecting a number
                if is_operator(token):
                    if index == 0:
                        raise LeadingOrTrailingOperatorError(token)
                    raise ConsecutiveOperatorsError(tokens[index - 1], token)
                number = TokenParser._to_number(token, bounds)
                if number is None:
                    raise InvalidNumberError(token)
                numbers.append(number)
            else:
                # Expecting an operator
                if not is_operator(token):
                    raise InvalidOperatorError(token)
                operators.append(Operator.from_symbol(token))

        if is_operator(tokens[-1]):
            raise LeadingOrTrailingOperatorError(tokens[-1])

        if len(numbers) != len(operators) + 1:
            raise MalformedExpressionError(numbers, operators)

        logger.debug(f"🔎 Parsed {len(numbers)} numbers and {len(operators)} operators")
        return ParsedExpression(numbers=numbers, operators=operators)
