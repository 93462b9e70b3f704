"""Evaluate every expression of an input file and write the results."""
from multiprocessing import Pool, cpu_count
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, FilePath

from arithmetic_evaluator.batch.reader import load_expressions
from arithmetic_evaluator.calculator import evaluate_expression
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.operations import OperationOutcome, OperationResult


def build_output_path(input_path: Path) -> Path:
    """
    Construct a safe output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations_short.7z
    output: resources/operations_short_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def format_line(outcome: OperationOutcome) -> str:
    """Render one outcome as a line of the results file."""
    if isinstance(outcome, OperationResult):
        return f"{outcome.expression} = {outcome.to_text()}"
    return f"{outcome.expression} -> ERROR: {outcome.message}"


class BatchEvaluator(BaseModel):
    """
    Evaluate the expressions of a text file or archive, one per line.

    Features:
        - Accepts .txt, .zip, .tar.xz and .7z inputs.
        - Keeps results in input order.
        - Spreads work over a process pool when more than one worker is requested.
    """

    model_config = ConfigDict(frozen=True)

    input_file: FilePath = Field(..., description="File or archive holding one expression per line")
    output_file: Path = Field(..., description="Path to write computation results")
    workers: int = Field(default=1, ge=1, description="Maximum number of worker processes")

    def _evaluate_all(self, expressions: List[str]) -> List[OperationOutcome]:
        # Limit number of workers to CPU cores or number of expressions
        max_workers: int = min(self.workers, cpu_count(), len(expressions))
        if max_workers <= 1:
            return [evaluate_expression(expr) for expr in expressions]

        logger.info(f"👷 Evaluating {len(expressions)} expressions with {max_workers} workers")
        with Pool(processes=max_workers) as pool:
            return pool.map(evaluate_expression, expressions)

    def run(self) -> List[OperationOutcome]:
        """
        Evaluate every expression and write one result line per expression.

        :return: Outcomes in input order
        :rtype: List[OperationOutcome]
        :raises ValueError: If the input archive is unsupported or holds no .txt file
        """
        expressions: List[str] = load_expressions(self.input_file)
        logger.info(f"📄 Loaded {len(expressions)} expressions from {self.input_file}")

        outcomes = self._evaluate_all(expressions)

        with self.output_file.open("w", encoding="utf-8") as f_out:
            for line_number, outcome in enumerate(outcomes, start=1):
                if not isinstance(outcome, OperationResult):
                    logger.warning(f"👷❌ Line {line_number} failed: {outcome.expression!r}: {outcome.message}")
                f_out.write(format_line(outcome) + "\n")

        failures = sum(1 for outcome in outcomes if not isinstance(outcome, OperationResult))
        logger.info(f"✅ Wrote {len(outcomes)} results to {self.output_file} ({failures} errors)")
        return outcomes
