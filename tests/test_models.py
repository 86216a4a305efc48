"""Test token and result models."""
import math

from pydantic import ValidationError
import pytest

from statement_calculator.common.models import (
    CalculationResult,
    NumberToken,
    OperatorToken,
    StatementResult,
)


@pytest.mark.parametrize("symbol,precedence", [("+", 1), ("-", 1), ("*", 2), ("/", 2)])
def test_operator_precedence(symbol: str, precedence: int) -> None:
    """Multiplicative operators bind tighter than additive ones."""
    assert OperatorToken(symbol=symbol).precedence == precedence


@pytest.mark.parametrize("symbol,expected", [("+", 8.0), ("-", 4.0), ("*", 12.0), ("/", 3.0)])
def test_operator_apply(symbol: str, expected: float) -> None:
    """apply uses the left and right operands in order."""
    assert OperatorToken(symbol=symbol).apply(6.0, 2.0) == expected


def test_operator_divide_by_zero() -> None:
    """Division by zero follows IEEE semantics."""
    divide = OperatorToken(symbol="/")
    assert divide.apply(1.0, 0.0) == math.inf
    assert divide.apply(-1.0, 0.0) == -math.inf
    assert math.isnan(divide.apply(0.0, 0.0))


@pytest.mark.parametrize("symbol", ["^", "**", "", "x"])
def test_operator_invalid_symbol(symbol: str) -> None:
    """Only the four supported operators are accepted."""
    with pytest.raises(ValidationError):
        OperatorToken(symbol=symbol)


def test_number_token_not_empty() -> None:
    """A literal holds at least one character."""
    with pytest.raises(ValidationError):
        NumberToken(text="")


def test_tokens_are_frozen() -> None:
    """Tokens are immutable."""
    token = NumberToken(text="1")
    with pytest.raises(ValidationError):
        token.text = "2"


def test_calculation_result_ok() -> None:
    """A result without error is successful."""
    assert CalculationResult(statement="1", value=1.0, formatted="1").ok
    assert not CalculationResult(statement="1+", error="boom").ok


def test_statement_result_render() -> None:
    """Result lines show the value or the error."""
    assert StatementResult(line=1, statement="2+3", result="5").render() == "2+3 = 5"
    assert StatementResult(line=2, statement="2+", error="bad").render() == "2+ -> ERROR: bad"


def test_statement_result_invalid_line() -> None:
    """Line numbers start at 1."""
    with pytest.raises(ValidationError):
        StatementResult(line=0, statement="1")
