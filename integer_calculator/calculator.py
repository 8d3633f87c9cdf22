"""Calculator coordinating parsing, evaluation and result formatting."""
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field

from integer_calculator.common.bounds import IntegerBounds
from integer_calculator.common.evaluator import Evaluator
from integer_calculator.common.logger import logger
from integer_calculator.common.models import CalculationRequest, CalculationResult, ParsedExpression
from integer_calculator.common.parser import TokenParser


class Calculator(BaseModel):
    """
    Evaluate pre-tokenized integer expressions.

    Lifecycle of one calculation:
        - Tokens are validated and split by TokenParser
        - The parsed expression is evaluated once by Evaluator
        - The integer result is returned, or the first error is raised

    The calculator keeps no state between calls.
    """

    model_config = ConfigDict(frozen=True)

    bounds: IntegerBounds = Field(default_factory=IntegerBounds, description="Signed integer range")

    def parse(self, tokens: Sequence[str]) -> ParsedExpression:
        """Validate tokens and extract numbers and operators."""
        return TokenParser.parse(tokens, self.bounds)

    def evaluate(self, expression: ParsedExpression) -> int:
        """Evaluate a parsed expression with checked arithmetic."""
        return Evaluator.evaluate_expression(expression, self.bounds)

    def run(self, request: CalculationRequest) -> CalculationResult:
        """
        Parse and evaluate a calculation request.

        :param CalculationRequest request: Tokens to evaluate

        :return: Tokens together with the computed result
        :rtype: CalculationResult
        :raises CalculatorError: If the tokens are invalid or arithmetic fails
        """
        logger.info(f"🏁 Calculating: {' '.join(request.tokens)}")
        result = self.evaluate(self.parse(request.tokens))
        logger.info(f"✅ Result: {result}")
        return CalculationResult(tokens=request.tokens, result=result)

    def calculate(self, tokens: Sequence[str]) -> str:
        """
        Evaluate tokens and return the decimal representation of the result.

        :param Sequence[str] tokens: Numbers and operators, e.g. ["2", "+", "3"]

        :return: Result as a string
        :rtype: str
        :raises CalculatorError: If the tokens are invalid or arithmetic fails
        """
        return self.run(CalculationRequest(tokens=tokens)).text
