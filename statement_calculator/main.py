"""
Command line entrypoint.

This script:
- Reads statements from a text file or an archive provided as argument
- Evaluates them concurrently
- Writes one result line per statement next to the input file
"""

import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError

from statement_calculator.batch.reader import StatementReader
from statement_calculator.batch.runner import BatchRunner
from statement_calculator.calculator.calculator import Calculator
from statement_calculator.common.logger import logger


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath
        Path to the file containing statements.
    output : Path, optional
        Path of the results file.
    precision : int
        Decimal digits kept in non-integral results.
    workers : int, optional
        Maximum number of worker threads.
    """

    file_path: FilePath
    output: Optional[Path] = None
    precision: int = Field(default=4, ge=0, le=15)
    workers: Optional[int] = Field(default=None, ge=1)


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments to parse, defaults to sys.argv

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(description="Evaluate arithmetic statements from a file")

    parser.add_argument("file_path", help="Path to the file containing statements, one per line")
    parser.add_argument("-o", "--output", help="Path of the results file")
    parser.add_argument("-p", "--precision", type=int, default=4, help="Decimal digits kept in results")
    parser.add_argument("-w", "--workers", type=int, help="Maximum number of worker threads")

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            file_path=args.file_path,
            output=args.output,
            precision=args.precision,
            workers=args.workers,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/statements.7z
    output: resources/statements_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    # Path.stem only drops the last suffix, strip all of them
    stem: str = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    suffix_safe: str = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function of the ``statement-calculator`` command.
    """
    cli_args = parse_args(argv)
    input_path: Path = Path(cli_args.file_path)
    output_path: Path = cli_args.output or build_output_path(input_path)

    statements: List[str] = StatementReader().read(input_path)
    runner = BatchRunner(calculator=Calculator(precision=cli_args.precision), max_workers=cli_args.workers)
    results = runner.run(statements, output_path)

    failed: int = sum(1 for result in results if result.error is not None)
    logger.info(f"🏁 {len(results) - failed} statements evaluated, {failed} rejected")


if __name__ == "__main__":
    main()
