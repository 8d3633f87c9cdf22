"""Evaluate parsed expressions with precedence and checked integer arithmetic."""
from typing import List, Sequence, Tuple

from integer_calculator.common.bounds import NATIVE_BOUNDS, IntegerBounds
from integer_calculator.common.errors import (
    DivisionByZeroError,
    IntegerOverflowError,
    ModulusByZeroError,
)
from integer_calculator.common.logger import logger
from integer_calculator.common.models import ParsedExpression
from integer_calculator.common.operators import Operator, Tier


def _truncated_divmod(a: int, b: int) -> Tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


class Evaluator:
    """
    Evaluate numbers and operators using standard arithmetic precedence.

    Algorithm:
        1. Walk the operators once, collapsing multiply, divide and modulus
           into the last working number and deferring add and subtract
        2. Fold the working numbers left to right with the deferred operators

    Examples:
        - 2 + 3 x 4: pass 1 gives [2, 12] with [+], pass 2 gives 14
        - 10 - 3 - 2: pass 1 gives [10, 3, 2] with [-, -], pass 2 gives 5
    """

    @staticmethod
    def compute(a: int, b: int, op: Operator, bounds: IntegerBounds = NATIVE_BOUNDS) -> int:
        """
        Apply a single operator with checked arithmetic.

        Division truncates toward zero and the remainder takes the sign of
        the dividend, so that a == (a / b) * b + a % b.

        :param int a: Left operand
        :param int b: Right operand
        :param Operator op: Operator to apply
        :param IntegerBounds bounds: Representable signed integer range

        :return: Result of the operation
        :rtype: int
        :raises IntegerOverflowError: If the result is not representable
        :raises DivisionByZeroError: If dividing by zero
        :raises ModulusByZeroError: If taking the modulus by zero
        """
        if op is Operator.ADD:
            result = a + b
        elif op is Operator.SUBTRACT:
            result = a - b
        elif op is Operator.MULTIPLY:
            result = a * b
        elif op is Operator.DIVIDE:
            if b == 0:
                raise DivisionByZeroError(a)
            result = _truncated_divmod(a, b)[0]
        elif op is Operator.MODULUS:
            if b == 0:
                raise ModulusByZeroError(a)
            result = _truncated_divmod(a, b)[1]
        else:
            raise TypeError(f"Unsupported operator: {op!r}")

        if not bounds.contains(result):
            raise IntegerOverflowError(op.operation, a, b)
        return result

    @staticmethod
    def evaluate(
        numbers: Sequence[int],
        operators: Sequence[Operator],
        bounds: IntegerBounds = NATIVE_BOUNDS,
    ) -> int:
        """
        Evaluate an alternating sequence of numbers and operators.

        The caller guarantees len(numbers) == len(operators) + 1.

        :param Sequence[int] numbers: Operands, left to right
        :param Sequence[Operator] operators: Operators, left to right
        :param IntegerBounds bounds: Representable signed integer range

        :return: Final result
        :rtype: int
        :raises CalculationArithmeticError: On overflow or a zero divisor
        """
        working: List[int] = [numbers[0]]
        deferred: List[Operator] = []

        # Pass 1: multiply, divide and modulus
        for op, number in zip(operators, numbers[1:]):
            if op.tier is Tier.HIGH:
                working.append(Evaluator.compute(working.pop(), number, op, bounds))
            else:
                working.append(number)
                deferred.append(op)

        # Pass 2: add and subtract
        result: int = working[0]
        for op, number in zip(deferred, working[1:]):
            result = Evaluator.compute(result, number, op, bounds)

        logger.debug(f"🧮 Evaluated {len(operators)} operators to {result}")
        return result

    @staticmethod
    def evaluate_expression(expression: ParsedExpression, bounds: IntegerBounds = NATIVE_BOUNDS) -> int:
        """
        Evaluate a parsed expression.

        :param ParsedExpression expression: Output of the parser
        :param IntegerBounds bounds: Representable signed integer range

        :return: Final result
        :rtype: int
        """
        return Evaluator.evaluate(expression.numbers, expression.operators, bounds)
