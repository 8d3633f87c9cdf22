"""Pydantic models exchanged between parser, evaluator and callers."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from integer_calculator.common.operators import Operator


class ParsedExpression(BaseModel):
    """Validated numbers and operators of one expression, in input order."""

    model_config = ConfigDict(frozen=True)

    numbers: List[int] = Field(..., min_length=1, description="Operands, left to right")
    operators: List[Operator] = Field(default_factory=list, description="Operators, left to right")

    @model_validator(mode="after")
    def one_more_number_than_operators(self) -> "ParsedExpression":
        """Ensure numbers and operators alternate."""
        if len(self.numbers) != len(self.operators) + 1:
            raise ValueError(
                f"Expected {len(self.operators) + 1} numbers for "
                f"{len(self.operators)} operators, got {len(self.numbers)}"
            )
        return self


class CalculationRequest(BaseModel):
    """Represents a pre-tokenized expression to evaluate."""

    tokens: List[str] = Field(..., description="Numbers and operators, already split")


class CalculationResult(BaseModel):
    """Represents the result of an evaluated expression."""

    tokens: List[str] = Field(..., description="Original tokens")
    result: int = Field(..., strict=True, description="Evaluated integer result")

    @property
    def text(self) -> str:
        """Decimal representation of the result."""
        return str(self.result)
