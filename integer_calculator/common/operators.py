"""Closed set of binary operators and their precedence tiers."""
from enum import Enum, IntEnum
from typing import Dict


class Tier(IntEnum):
    """Precedence tier; a higher value binds tighter."""

    LOW = 1
    HIGH = 2


class Operator(Enum):
    """Binary operator recognised in a token sequence."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"
    MODULUS = "%"

    @property
    def tier(self) -> Tier:
        """Precedence tier of the operator."""
        if self in (Operator.MULTIPLY, Operator.DIVIDE, Operator.MODULUS):
            return Tier.HIGH
        return Tier.LOW

    @property
    def operation(self) -> str:
        """Human readable name used in diagnostics."""
        return _OPERATION_NAMES[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """
        Look up the operator for a token.

        :param str symbol: Operator token, e.g. "+" or "*"

        :return: Matching operator
        :rtype: Operator
        :raises KeyError: If the symbol is not a recognised operator
        """
        return OPERATORS[symbol]

    def __str__(self) -> str:
        return self.value


_OPERATION_NAMES: Dict[Operator, str] = {
    Operator.ADD: "addition",
    Operator.SUBTRACT: "subtraction",
    Operator.MULTIPLY: "multiplication",
    Operator.DIVIDE: "division",
    Operator.MODULUS: "modulus",
}

# Mapping of operator symbols to operators, "*" and "x" both multiply
OPERATORS: Dict[str, Operator] = {
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "x": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
    "%": Operator.MODULUS,
}


def is_operator(token: str) -> bool:
    """Return True if the token is one of the recognised operator symbols."""
    return token in OPERATORS
