"""Evaluate arithmetic statements into display strings."""
import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from statement_calculator.calculator.converter import PostfixConverter
from statement_calculator.calculator.evaluator import PostfixEvaluator
from statement_calculator.common.errors import InvalidExpression
from statement_calculator.common.logger import logger
from statement_calculator.common.models import CalculationResult, Token


class Calculator(BaseModel):
    """
    Evaluate statements such as ``(1 + 38) * 4.5 - 1 / 2``.

    Pipeline:
        1. Convert the infix statement to postfix (:class:`PostfixConverter`)
        2. Evaluate the postfix sequence (:class:`PostfixEvaluator`)
        3. Format the value: integral values without decimals, others rounded
           half-up to ``precision`` decimal digits

    Invalid statements and infinite or NaN results never raise, they give a
    failed :class:`CalculationResult` and ``None`` from :meth:`evaluate`.
    """

    # The instance holds configuration only, so it can be shared between threads
    model_config = ConfigDict(frozen=True)

    precision: int = Field(default=4, ge=0, le=15, description="Decimal digits kept in non-integral results")

    def format_value(self, value: float) -> str:
        """
        Format a finite value for display.

        :param float value: Finite numeric result

        :return: Integer string for integral values, rounded decimal string otherwise
        :rtype: str
        """
        if value == math.floor(value):
            return str(int(value))

        scale: int = 10 ** self.precision
        rounded: float = math.floor(value * scale + 0.5) / scale
        if rounded.is_integer():
            return str(int(rounded))
        # Fixed notation, str() would switch to exponents below 1e-4
        return f"{rounded:.{self.precision}f}".rstrip("0").rstrip(".")

    def calculate(self, statement: Optional[str]) -> CalculationResult:
        """
        Evaluate a statement and keep the failure reason, if any.

        :param str statement: Infix statement, may be None

        :return: Successful result with value and formatted string, or failed result with the reason
        :rtype: CalculationResult
        """
        try:
            postfix: List[Token] = PostfixConverter.convert(statement)
            value: float = PostfixEvaluator.evaluate(postfix)
        except InvalidExpression as exc:
            logger.debug("🧮❌ Rejected statement %r: %s", statement, exc)
            return CalculationResult(statement=statement, error=str(exc))

        if math.isinf(value) or math.isnan(value):
            logger.debug("🧮❌ Statement %r has no finite result: %s", statement, value)
            return CalculationResult(statement=statement, error=f"Result is not a finite number: {value}")

        return CalculationResult(statement=statement, value=value, formatted=self.format_value(value))

    def evaluate(self, statement: Optional[str]) -> Optional[str]:
        """
        Evaluate a statement represented as a string.

        :param str statement: Statement with digits, ``.`` as decimal mark, parentheses and ``+ - * /``

        :return: Formatted result, or None if the statement is invalid
        :rtype: Optional[str]
        """
        return self.calculate(statement).formatted
