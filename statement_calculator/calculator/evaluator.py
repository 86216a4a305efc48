"""Evaluate postfix token sequences."""
from typing import Iterable, List

from statement_calculator.common.errors import InvalidExpression
from statement_calculator.common.models import NumberToken, Token


class PostfixEvaluator:
    """Evaluate a postfix token sequence with an operand stack."""

    @staticmethod
    def parse_literal(token: NumberToken) -> float:
        """
        Parse the numeric value of a literal token.

        :param NumberToken token: Literal as written in the statement

        :return: Value of the literal
        :rtype: float
        :raises InvalidExpression: If the literal is not a valid decimal number
        """
        try:
            return float(token.text)
        except ValueError as exc:
            raise InvalidExpression(f"Invalid number literal: {token.text!r}") from exc

    @staticmethod
    def evaluate(tokens: Iterable[Token]) -> float:
        """
        Evaluate tokens in postfix order.

        Division by zero is not an error here: the result is infinite or NaN
        and the caller decides how to report it.

        :param Iterable[Token] tokens: Tokens in postfix order

        :return: Computed result
        :rtype: float
        :raises InvalidExpression: If a literal is invalid or the operands do not match the operators
        """
        stack: List[float] = []
        for token in tokens:
            if isinstance(token, NumberToken):
                stack.append(PostfixEvaluator.parse_literal(token))
                continue

            # Operator requires two operands, the top of the stack is the right-hand one
            if len(stack) < 2:
                raise InvalidExpression(f"Not enough operands for operator {token.symbol!r}")
            right: float = stack.pop()
            left: float = stack.pop()
            stack.append(token.apply(left, right))

        if not stack:
            raise InvalidExpression("No operand to evaluate")
        if len(stack) > 1:
            raise InvalidExpression(f"Invalid expression ({len(stack)} remaining operands)")

        return stack[0]
