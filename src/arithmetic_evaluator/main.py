"""
Command-line entrypoint.

This script either:
- Evaluates a single expression given as argument and prints the result
- Evaluates every line of a text file or archive and writes a results file
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, FilePath, ValidationError, model_validator

from arithmetic_evaluator.batch.runner import BatchEvaluator, build_output_path
from arithmetic_evaluator.calculator import evaluate_expression
from arithmetic_evaluator.common.logger import logger, set_verbose
from arithmetic_evaluator.common.operations import OperationResult


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : str, optional
        Expression to evaluate directly.
    file_path : FilePath, optional
        Path to the file containing arithmetic operations.
    output : Path, optional
        Results file; derived from ``file_path`` when omitted.
    workers : int
        Number of worker processes for file evaluation.
    json_output : bool
        Print the structured outcome instead of plain text.
    verbose : bool
        Enable debug logging.
    """

    model_config = ConfigDict(frozen=True)

    expression: Optional[str] = None
    file_path: Optional[FilePath] = None
    output: Optional[Path] = None
    workers: int = Field(default=1, ge=1)
    json_output: bool = False
    verbose: bool = False

    @model_validator(mode="after")
    def exactly_one_source(self) -> "CliArgs":
        """Ensure that either an expression or a file is given, not both."""
        if (self.expression is None) == (self.file_path is None):
            raise ValueError("Provide either an expression or --file, not both")
        return self


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="arithmetic-evaluator",
        description="Evaluate arithmetic expressions with + - * / and parentheses",
        epilog="Expressions starting with '-' must follow '--', e.g. arithmetic-evaluator -- '-1+2'",
    )
    parser.add_argument("expression", nargs="?", help="Expression to evaluate, e.g. '2 + 3 * 4'")
    parser.add_argument("-f", "--file", dest="file_path", help="Text file or archive with one expression per line")
    parser.add_argument("-o", "--output", help="Results file (defaults to <input>_results.txt)")
    parser.add_argument("-w", "--workers", type=int, default=1, help="Worker processes for --file")
    parser.add_argument("--json", dest="json_output", action="store_true", help="Print the structured outcome as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    try:
        return CliArgs(**{key: value for key, value in vars(args).items() if value is not None})
    except ValidationError as exc:
        parser.error(str(exc))


def run_expression(cli_args: CliArgs) -> int:
    """Evaluate a single expression, print it and return the exit code."""
    outcome = evaluate_expression(cli_args.expression)
    print(outcome.model_dump_json() if cli_args.json_output else outcome.to_text())
    return 0 if isinstance(outcome, OperationResult) else 1


def run_file(cli_args: CliArgs) -> int:
    """Evaluate a file of expressions and return the exit code."""
    output_path: Path = cli_args.output or build_output_path(cli_args.file_path)
    evaluator = BatchEvaluator(input_file=cli_args.file_path, output_file=output_path, workers=cli_args.workers)
    try:
        outcomes = evaluator.run()
    except ValueError as exc:
        logger.error(str(exc))
        return 2

    if cli_args.json_output:
        for outcome in outcomes:
            print(outcome.model_dump_json())
    else:
        print(output_path)
    return 0 if all(isinstance(outcome, OperationResult) for outcome in outcomes) else 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the ``arithmetic-evaluator`` command.
    """
    cli_args = parse_args(argv)
    set_verbose(cli_args.verbose)
    if cli_args.file_path is not None:
        return run_file(cli_args)
    return run_expression(cli_args)


if __name__ == "__main__":
    sys.exit(main())
