"""Test class PostfixConverter."""
import pytest

from statement_calculator.calculator.converter import PostfixConverter
from statement_calculator.common.errors import InvalidExpression
from statement_calculator.common.models import NumberToken, OperatorToken


def _render(tokens) -> list:
    """Render tokens as plain strings for readable assertions."""
    return [t.text if isinstance(t, NumberToken) else t.symbol for t in tokens]


def test_tokenize_strips_whitespace():
    """Tokenize ignores whitespace and keeps multi-digit literals together."""
    tokens = PostfixConverter.tokenize(" (1 + 38) *\t4.5 - 1 / 2\n")
    assert tokens == ["(", "1", "+", "38", ")", "*", "4.5", "-", "1", "/", "2"]


@pytest.mark.parametrize("statement,expected", [
    ("123", True),
    ("(1+2)*3.5/4-5", True),
    ("1+a", False),
    ("2^3", False),
    ("1,5", False),
    ("٣+1", False),  # non-ASCII digit
])
def test_is_correct_statement(statement, expected):
    """is_correct_statement only accepts digits, decimal marks, brackets and operators."""
    assert PostfixConverter.is_correct_statement(statement) == expected


@pytest.mark.parametrize("statement,expected", [
    ("3+4", ["3", "4", "+"]),
    ("3+4*2", ["3", "4", "2", "*", "+"]),
    ("(3+4)*2", ["3", "4", "+", "2", "*"]),
    ("8-4-2", ["8", "4", "-", "2", "-"]),
    ("10/2-1", ["10", "2", "/", "1", "-"]),
    ("(1 + 38) * 4.5 - 1 / 2", ["1", "38", "+", "4.5", "*", "1", "2", "/", "-"]),
    ("((7))", ["7"]),
    ("2*(3+(4-1))", ["2", "3", "4", "1", "-", "+", "*"]),
])
def test_convert_valid(statement, expected):
    """Convert produces postfix order honouring precedence and left associativity."""
    assert _render(PostfixConverter.convert(statement)) == expected


def test_convert_returns_typed_tokens():
    """Literals and operators are distinct token types."""
    tokens = PostfixConverter.convert("12.5*3")
    assert tokens == [NumberToken(text="12.5"), NumberToken(text="3"), OperatorToken(symbol="*")]
    assert tokens[2].precedence == 2


@pytest.mark.parametrize("statement", ["", "   ", "\t\n"])
def test_convert_empty_statement(statement):
    """An empty statement gives an empty postfix sequence."""
    assert PostfixConverter.convert(statement) == []


def test_convert_keeps_bad_literal_for_evaluator():
    """Badly placed decimal marks pass conversion, the evaluator rejects them."""
    assert _render(PostfixConverter.convert("1.2.3+1")) == ["1.2.3", "1", "+"]


@pytest.mark.parametrize("statement", [
    None,          # Missing statement
    "1+x",         # Unsupported symbol
    "2(3)",        # No operator before opening bracket
    "(1)(2)",      # No operator between brackets
    "+1",          # Leading operator
    "1+",          # Trailing operator
    "1++2",        # Consecutive operators
    "1*-2",        # Unary minus is not supported
    "(1+)",        # Operator before closing bracket
    "(1+2",        # Unmatched opening bracket
    "1+2)",        # Unmatched closing bracket
    ")1(",         # Closing bracket first
])
def test_convert_invalid(statement):
    """Convert raises InvalidExpression for malformed statements."""
    with pytest.raises(InvalidExpression):
        PostfixConverter.convert(statement)


def test_convert_after_failure_starts_clean():
    """A failed conversion leaves no state behind for the next call."""
    with pytest.raises(InvalidExpression):
        PostfixConverter.convert("(((1")
    assert _render(PostfixConverter.convert("1+2")) == ["1", "2", "+"]
