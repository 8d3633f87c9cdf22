"""Exceptions raised while parsing and evaluating a token sequence."""
from typing import List, Optional


class CalculatorError(Exception):
    """Base class of every calculation failure."""


class ParseError(CalculatorError, ValueError):
    """The token sequence is not a well-formed expression."""


class EmptyInputError(ParseError):
    """No tokens were given."""

    def __init__(self) -> None:
        super().__init__("No input provided")


class UntokenizedInputError(ParseError):
    """A raw string was given where a sequence of tokens is expected."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Expected a sequence of tokens, got the string {text!r}")


class InvalidNumberError(ParseError):
    """A token in number position is not an in-range integer."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"{token!r} is not a valid number or is out of bounds")


class InvalidOperatorError(ParseError):
    """A token in operator position is not a recognised operator."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"{token!r} is not a valid operator")


class ConsecutiveOperatorsError(ParseError):
    """Two operator tokens are next to each other."""

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Found two operators next to each other: {left!r} {right!r}")


class LeadingOrTrailingOperatorError(ParseError):
    """The expression starts or ends with an operator."""

    def __init__(self, token: Optional[str] = None) -> None:
        self.token = token
        super().__init__("Expression cannot start or end with an operator")


class MalformedExpressionError(ParseError):
    """The number of values does not match the number of operators."""

    def __init__(self, numbers: List[int], operators: List[object]) -> None:
        self.numbers = numbers
        self.operators = operators
        super().__init__(
            f"The number of values and operators is incorrect: "
            f"{len(numbers)} numbers, {len(operators)} operators"
        )


class CalculationArithmeticError(CalculatorError, ArithmeticError):
    """Checked arithmetic failed while evaluating an expression."""


class IntegerOverflowError(CalculationArithmeticError, OverflowError):
    """The result of an operation is not representable."""

    def __init__(self, operation: str, left: int, right: int) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(f"Integer overflow occurred during {operation} of {left} and {right}")


class DivisionByZeroError(CalculationArithmeticError, ZeroDivisionError):
    """Right-hand operand of a division is zero."""

    def __init__(self, dividend: int) -> None:
        self.dividend = dividend
        super().__init__(f"Division by zero is not allowed: {dividend} / 0")


class ModulusByZeroError(CalculationArithmeticError, ZeroDivisionError):
    """Right-hand operand of a modulus is zero."""

    def __init__(self, dividend: int) -> None:
        self.dividend = dividend
        super().__init__(f"Modulus by zero is not allowed: {dividend} % 0")
