"""Test class Calculator."""
from pydantic import ValidationError
import pytest

from integer_calculator import Calculator, CalculationArithmeticError, IntegerBounds, ParseError
from integer_calculator.common.errors import DivisionByZeroError, EmptyInputError, IntegerOverflowError
from integer_calculator.common.models import CalculationRequest


def test_calculator_default_bounds() -> None:
    """The calculator uses the native width unless configured."""
    assert Calculator().bounds == IntegerBounds()


def test_calculator_is_frozen() -> None:
    """Configuration cannot change after creation."""
    calculator = Calculator()
    with pytest.raises(ValidationError):
        calculator.bounds = IntegerBounds(bits=8)


@pytest.mark.parametrize("tokens,expected", [
    (["7"], "7"),
    (["2", "+", "3", "x", "4"], "14"),
    (["-7", "/", "2"], "-3"),
    (["-7", "%", "2"], "-1"),
    (["3", "-", "10"], "-7"),
])
def test_calculate_returns_decimal_string(tokens, expected):
    """calculate returns the result as a decimal string."""
    assert Calculator().calculate(tokens) == expected


def test_run_returns_result_model() -> None:
    """run returns the tokens together with the integer result."""
    result = Calculator().run(CalculationRequest(tokens=["6", "x", "7"]))
    assert result.tokens == ["6", "x", "7"]
    assert result.result == 42


def test_calculate_is_idempotent() -> None:
    """The same tokens give the same result on every call."""
    calculator = Calculator()
    tokens = ["10", "-", "3", "-", "2", "x", "5"]
    assert calculator.calculate(tokens) == calculator.calculate(tokens) == "-3"


def test_calculate_propagates_parse_errors() -> None:
    """Parse failures reach the caller as typed errors."""
    with pytest.raises(EmptyInputError):
        Calculator().calculate([])
    with pytest.raises(ParseError):
        Calculator().calculate(["2", "+"])


def test_calculate_propagates_arithmetic_errors() -> None:
    """Arithmetic failures reach the caller as typed errors."""
    with pytest.raises(DivisionByZeroError):
        Calculator().calculate(["5", "/", "0"])
    with pytest.raises(CalculationArithmeticError):
        Calculator(bounds=IntegerBounds(bits=16)).calculate(["300", "x", "300"])


def test_calculate_with_narrow_bounds() -> None:
    """Parsing and arithmetic both follow the configured width."""
    calculator = Calculator(bounds=IntegerBounds(bits=32))
    assert calculator.calculate(["2147483646", "+", "1"]) == "2147483647"
    with pytest.raises(IntegerOverflowError):
        calculator.calculate(["2147483647", "+", "1"])
    with pytest.raises(ParseError):
        calculator.calculate(["2147483648"])


@pytest.mark.parametrize("text", ["2+3", "12 + 3", "7"])
def test_calculate_rejects_raw_string(text) -> None:
    """A raw string is rejected instead of being split into characters."""
    with pytest.raises(ValidationError):
        Calculator().calculate(text)


def test_calculate_accepts_tuple() -> None:
    """Any sequence of tokens is accepted."""
    assert Calculator().calculate(("6", "/", "4")) == "1"
