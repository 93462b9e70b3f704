"""Test the host-facing entry points."""
import logging

import pytest

from arithmetic_evaluator.calculator import calculate, evaluate_expression
from arithmetic_evaluator.common.operations import OperationError, OperationResult


@pytest.mark.parametrize("expr,expected", [
    ("1+2", "3.0"),
    ("(1+2)", "3.0"),
    (" 1 + 2 ", "3.0"),
    ("2+3*4", "14.0"),
    ("8-3-2", "3.0"),
    ("8/4/2", "1.0"),
    ("1.5+2.5", "4.0"),
    ("1/4", "0.25"),
])
def test_calculate_success(expr, expected):
    """calculate returns the formatted number."""
    assert calculate(expr) == expected


@pytest.mark.parametrize("expr,message", [
    ("5/0", "Division by zero"),
    ("1+a", "Unknown character: a"),
    ("(1+2", "Unclosed parentheses"),
    ("1+2)", "Unbalanced parentheses: unmatched ')'"),
    ("1.2.3", "Invalid number: 1.2.3"),
    ("1 2", "Invalid expression"),
    ("+", "Not enough operands for '+'"),
])
def test_calculate_failure_returns_message(expr, message):
    """calculate returns the error text of the failing stage."""
    assert calculate(expr) == message


def test_evaluate_expression_success():
    """A valid expression gives an OperationResult."""
    outcome = evaluate_expression("2 * (3 + 4)")
    assert isinstance(outcome, OperationResult)
    assert outcome.expression == "2 * (3 + 4)"
    assert outcome.result == 14.0


@pytest.mark.parametrize("expr,kind", [
    ("1+a", "lex"),
    ("1\t+ 2", "lex"),
    ("(1+2", "syntax"),
    ("1+2)", "syntax"),
    ("5/0", "eval"),
    ("", "eval"),
])
def test_evaluate_expression_failure_kind(expr, kind):
    """Failures are reported with the stage that raised them, never raised."""
    outcome = evaluate_expression(expr)
    assert isinstance(outcome, OperationError)
    assert outcome.kind == kind
    assert outcome.expression == expr


def test_evaluate_expression_calls_are_independent():
    """A failing call does not affect the next one."""
    assert isinstance(evaluate_expression("(1+"), OperationError)
    assert calculate("1+1") == "2.0"


def test_calculate_never_returns_nan():
    """Huge literals are reported as errors rather than formatted as nan."""
    literal = "9" * 400
    outcome = evaluate_expression(f"{literal}-{literal}")
    assert isinstance(outcome, OperationError)
    assert outcome.kind == "lex"
    assert calculate(f"{literal}-{literal}").startswith("Invalid number:")


def test_evaluate_expression_logs_failures_at_debug(caplog):
    """Failed evaluations do not log above DEBUG."""
    with caplog.at_level(logging.DEBUG, logger="arithmetic_evaluator"):
        evaluate_expression("5/0")
    assert caplog.records
    assert all(record.levelno == logging.DEBUG for record in caplog.records)
