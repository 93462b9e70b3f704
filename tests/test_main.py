"""Test the command-line entrypoint."""
import json
from pathlib import Path

import pytest

from arithmetic_evaluator.main import CliArgs, main, parse_args


def test_parse_args_expression() -> None:
    """A positional expression is accepted on its own."""
    args = parse_args(["2 + 3"])
    assert args.expression == "2 + 3"
    assert args.file_path is None
    assert args.workers == 1


def test_parse_args_requires_one_source(tmp_path: Path) -> None:
    """Giving neither or both sources exits with a usage error."""
    ops = tmp_path / "ops.txt"
    ops.write_text("1+1\n")

    with pytest.raises(SystemExit):
        parse_args([])
    with pytest.raises(SystemExit):
        parse_args(["1+1", "--file", str(ops)])


def test_parse_args_missing_file(tmp_path: Path) -> None:
    """A file that does not exist is rejected."""
    with pytest.raises(SystemExit):
        parse_args(["--file", str(tmp_path / "missing.txt")])


def test_cli_args_validation() -> None:
    """CliArgs enforces exactly one source."""
    with pytest.raises(ValueError):
        CliArgs()


def test_main_expression_success(capsys) -> None:
    """A valid expression prints its value and exits with 0."""
    assert main(["2+3*4"]) == 0
    assert capsys.readouterr().out.strip() == "14.0"


def test_main_expression_failure(capsys) -> None:
    """An invalid expression prints the error and exits with 1."""
    assert main(["5/0"]) == 1
    assert capsys.readouterr().out.strip() == "Division by zero"


def test_main_json(capsys) -> None:
    """--json prints the structured outcome."""
    assert main(["1+a", "--json"]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "status": "error",
        "expression": "1+a",
        "kind": "lex",
        "message": "Unknown character: a",
    }


def test_main_file(tmp_path: Path, capsys) -> None:
    """--file writes the results next to the input by default."""
    ops = tmp_path / "ops.txt"
    ops.write_text("1+1\n2*(3+4)\n")

    assert main(["--file", str(ops)]) == 0

    results = tmp_path / "ops_txt_results.txt"
    assert capsys.readouterr().out.strip() == str(results)
    assert results.read_text().splitlines() == ["1+1 = 2.0", "2*(3+4) = 14.0"]


def test_main_file_with_errors(tmp_path: Path) -> None:
    """Any failed line makes the exit code 1."""
    ops = tmp_path / "ops.txt"
    ops.write_text("1+1\n1 2\n")
    output = tmp_path / "out.txt"

    assert main(["--file", str(ops), "--output", str(output)]) == 1
    assert output.read_text().splitlines() == ["1+1 = 2.0", "1 2 -> ERROR: Invalid expression"]


def test_main_file_unsupported_format(tmp_path: Path) -> None:
    """An unsupported archive exits with 2."""
    ops = tmp_path / "ops.rar"
    ops.write_text("1+1")

    assert main(["--file", str(ops)]) == 2


def test_main_file_corrupt_archive(tmp_path: Path) -> None:
    """A corrupt archive exits with 2 instead of raising."""
    ops = tmp_path / "ops.zip"
    ops.write_bytes(b"not a zip")

    assert main(["--file", str(ops)]) == 2


def test_main_expression_after_double_dash(capsys) -> None:
    """Expressions starting with '-' are passed after '--' and reported as expression errors."""
    assert main(["--", "-1+2"]) == 1
    assert capsys.readouterr().out.strip() == "Not enough operands for '-'"
