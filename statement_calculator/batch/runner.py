"""Evaluate batches of statements concurrently."""
from concurrent.futures import ThreadPoolExecutor
import os
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from statement_calculator.calculator.calculator import Calculator
from statement_calculator.common.logger import logger
from statement_calculator.common.models import CalculationResult, StatementResult


class BatchRunner(BaseModel):
    """
    Evaluate many statements with a pool of threads sharing one calculator.

    Features:
        - Limits the pool to the CPU count or the number of statements.
        - Writes every result to the output file, in input order.
        - Reports invalid statements as errors instead of stopping the batch.
    """

    model_config = ConfigDict(frozen=True)

    calculator: Calculator = Field(default_factory=Calculator, description="Calculator shared by all workers")
    max_workers: Optional[int] = Field(default=None, ge=1, description="Maximum number of worker threads")

    def _evaluate_line(self, line_number: int, statement: str) -> StatementResult:
        """
        Evaluate a single statement and wrap the outcome for the output file.

        :param int line_number: Line number of the statement in the input
        :param str statement: Statement to evaluate

        :return: Result line
        :rtype: StatementResult
        """
        outcome: CalculationResult = self.calculator.calculate(statement)
        if outcome.ok:
            logger.info(f"👷✅ Line {line_number} evaluated: {statement} = {outcome.formatted}")
            return StatementResult(line=line_number, statement=statement, result=outcome.formatted)

        logger.error(f"👷❌ Line {line_number} failed: {outcome.error}\nCould not evaluate: {statement!r}")
        return StatementResult(line=line_number, statement=statement, error=outcome.error)

    def run(self, statements: Sequence[str], output_file: Path) -> List[StatementResult]:
        """
        Evaluate the statements and write one result line per statement.

        :param Sequence[str] statements: Statements to evaluate
        :param Path output_file: Path where results are written

        :return: Results in input order
        :rtype: List[StatementResult]
        """
        workers: int = min(self.max_workers or os.cpu_count() or 1, max(len(statements), 1))
        logger.info(f"🖥️ Evaluating {len(statements)} statements with {workers} workers")

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results: List[StatementResult] = list(
                pool.map(self._evaluate_line, range(1, len(statements) + 1), statements)
            )

        with Path(output_file).open("w", encoding="utf-8") as f_out:
            for result in results:
                f_out.write(result.render() + "\n")

        logger.info(f"✉️ Results written to {output_file}")
        return results
