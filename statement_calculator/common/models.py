"""Pydantic models shared by the converter, the evaluator and the batch runner."""
from collections.abc import Callable as ABCCallable
import math
import operator
from typing import Callable, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]


def _divide(left: float, right: float) -> float:
    """Divide following IEEE 754 semantics instead of raising ZeroDivisionError."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        # Sign of a zero divisor matters: 1 / -0.0 is -inf
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


# Mapping of operator symbols to (precedence, function)
OPERATORS: Dict[str, Tuple[int, OperatorFn]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, _divide),
}

OperatorSymbol = Literal["+", "-", "*", "/"]


class NumberToken(BaseModel):
    """Numeric literal of a postfix sequence, kept as written in the statement."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Digits and decimal points of the literal")


class OperatorToken(BaseModel):
    """Binary operator of a postfix sequence."""

    model_config = ConfigDict(frozen=True)

    symbol: OperatorSymbol = Field(..., description="Operator sign")

    @property
    def precedence(self) -> int:
        return OPERATORS[self.symbol][0]

    def apply(self, left: float, right: float) -> float:
        """
        Apply the operator to its operands.

        :param float left: Left-hand operand
        :param float right: Right-hand operand

        :return: Result of the operation, possibly infinite or NaN
        :rtype: float
        """
        return OPERATORS[self.symbol][1](left, right)


Token = Union[NumberToken, OperatorToken]


class CalculationResult(BaseModel):
    """
    Outcome of evaluating one statement.

    Either ``value`` and ``formatted`` are set (success) or ``error`` holds the
    reason the statement was rejected (failure). Never both.
    """

    model_config = ConfigDict(frozen=True)

    statement: Optional[str] = Field(default=None, description="Original statement")
    value: Optional[float] = Field(default=None, description="Numeric result")
    formatted: Optional[str] = Field(default=None, description="Result formatted for display")
    error: Optional[str] = Field(default=None, description="Reason of the failure")

    @property
    def ok(self) -> bool:
        return self.error is None


class StatementResult(BaseModel):
    """Result line of a batch run."""

    line: int = Field(..., ge=1, description="Line number in the input file")
    statement: str = Field(..., description="Statement as read from the input")
    result: Optional[str] = Field(default=None, description="Formatted result")
    error: Optional[str] = Field(default=None, description="Reason of the failure")

    def render(self) -> str:
        """Render the result as written to the output file."""
        if self.error is None:
            return f"{self.statement} = {self.result}"
        return f"{self.statement} -> ERROR: {self.error}"
