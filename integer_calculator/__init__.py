"""Evaluate pre-tokenized integer expressions with checked arithmetic."""
from integer_calculator.calculator import Calculator
from integer_calculator.common.bounds import IntegerBounds
from integer_calculator.common.errors import (
    CalculationArithmeticError,
    CalculatorError,
    ParseError,
)

__all__ = [
    "CalculationArithmeticError",
    "Calculator",
    "CalculatorError",
    "IntegerBounds",
    "ParseError",
]

__version__ = "0.1.0"
