"""Convert infix statements into postfix token sequences."""
import re
from typing import List, Optional

from statement_calculator.common.errors import InvalidExpression
from statement_calculator.common.models import OPERATORS, NumberToken, OperatorToken, Token


DIGITS = frozenset("0123456789")
DECIMAL_DELIMITERS = frozenset(".")
OPENING_BRACKET = "("
CLOSING_BRACKET = ")"

ALLOWED_SYMBOLS = DIGITS | DECIMAL_DELIMITERS | frozenset(OPERATORS) | {OPENING_BRACKET, CLOSING_BRACKET}

# A literal is a maximal run of digits and decimal points, every other symbol stands alone
TOKEN_PATTERN = re.compile(r"[0-9.]+|[()+\-*/]")


class PostfixConverter:
    """
    Convert arithmetic statements to Reverse Polish Notation (RPN).

    Statements may contain digits, ``.`` as decimal mark, parentheses and the
    ``+ - * /`` operators; whitespace is ignored. Syntax is validated while
    converting, every violation raises :class:`InvalidExpression`.

    The operator stack lives in the scope of a single :meth:`convert` call, so
    the converter is reentrant and may be shared between threads.

    Examples:
        - Infix statement: (1 + 38) * 4.5 - 1 / 2
        - Postfix sequence: 1 38 + 4.5 * 1 2 / -
    """

    @staticmethod
    def is_correct_statement(statement: str) -> bool:
        """
        Check that the statement only contains supported symbols.

        :param str statement: Statement without whitespace

        :return: True if every character is a digit, decimal mark, bracket or operator
        :rtype: bool
        """
        return all(char in ALLOWED_SYMBOLS for char in statement)

    @staticmethod
    def tokenize(statement: Optional[str]) -> List[str]:
        """
        Strip whitespace from a statement and split it into raw tokens.

        :param str statement: Infix statement

        :return: Literals, brackets and operators in statement order
        :rtype: List[str]
        :raises InvalidExpression: If the statement is None or contains unsupported symbols
        """
        if statement is None:
            raise InvalidExpression("Input statement must not be None")

        compact: str = "".join(statement.split())
        if not PostfixConverter.is_correct_statement(compact):
            raise InvalidExpression(f"Statement contains invalid symbols: {statement!r}")

        return TOKEN_PATTERN.findall(compact)

    @staticmethod
    def convert(statement: Optional[str]) -> List[Token]:
        """
        Convert an infix statement to a postfix token sequence using the Shunting-yard algorithm.

        An empty statement gives an empty sequence.

        :param str statement: Infix statement

        :return: Tokens in postfix order
        :rtype: List[Token]
        :raises InvalidExpression: If the statement is malformed
        """
        tokens: List[str] = PostfixConverter.tokenize(statement)
        output: List[Token] = []
        stack: List[str] = []
        last: int = len(tokens) - 1

        for i, token in enumerate(tokens):
            if token[0] in DIGITS or token[0] in DECIMAL_DELIMITERS:
                # Literals are parsed by the evaluator, badly placed decimal marks fail there
                output.append(NumberToken(text=token))

            elif token == OPENING_BRACKET:
                if i > 0 and tokens[i - 1] not in OPERATORS and tokens[i - 1] != OPENING_BRACKET:
                    raise InvalidExpression("There should be an operator before an opening bracket")
                stack.append(token)

            elif token in OPERATORS:
                if i == 0 or i == last:
                    raise InvalidExpression("The operator should not be at the start or end of the statement")
                if tokens[i + 1] in OPERATORS:
                    raise InvalidExpression("Two operators should not occur consecutively")

                # Pop operators with higher or equal precedence (left associativity)
                precedence: int = OPERATORS[token][0]
                while stack and stack[-1] != OPENING_BRACKET and OPERATORS[stack[-1]][0] >= precedence:
                    output.append(OperatorToken(symbol=stack.pop()))
                stack.append(token)

            else:
                if i > 0 and tokens[i - 1] in OPERATORS:
                    raise InvalidExpression("There should not be an operator before a closing bracket")
                while stack and stack[-1] != OPENING_BRACKET:
                    output.append(OperatorToken(symbol=stack.pop()))
                if not stack:
                    raise InvalidExpression("The statement contains an unmatched closing bracket")
                stack.pop()

        # Remaining operators go out stack top first
        while stack:
            symbol: str = stack.pop()
            if symbol == OPENING_BRACKET:
                raise InvalidExpression("The statement contains an unmatched opening bracket")
            output.append(OperatorToken(symbol=symbol))

        return output
