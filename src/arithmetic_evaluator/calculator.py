"""Host-facing entry points: a structured outcome and a string adapter."""
from arithmetic_evaluator.common.errors import ExpressionError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.operations import (
    OperationError,
    OperationOutcome,
    OperationRequest,
    OperationResult,
)
from arithmetic_evaluator.common.parser import ExpressionParser


def evaluate_expression(expression: str) -> OperationOutcome:
    """
    Evaluate an expression and describe the outcome without raising.

    :param str expression: Arithmetic expression

    :return: ``OperationResult`` on success, ``OperationError`` otherwise
    :rtype: OperationOutcome
    :raises pydantic.ValidationError: If ``expression`` is not a string
    """
    request = OperationRequest(expression=expression)
    try:
        result = ExpressionParser.evaluate(request.expression)
    except ExpressionError as exc:
        logger.debug(f"🧮❌ Could not evaluate {request.expression!r}: {exc}")
        return OperationError(expression=request.expression, kind=exc.kind, message=str(exc))

    logger.debug(f"🧮✅ {request.expression!r} = {result}")
    return OperationResult(expression=request.expression, result=result)


def calculate(expression: str) -> str:
    """
    Evaluate an expression and flatten the outcome into a single string.

    Kept for hosts that can only exchange strings: the returned text is the
    formatted number on success and the error message on failure.

    :param str expression: Arithmetic expression

    :return: Formatted result or error message
    :rtype: str
    """
    return evaluate_expression(expression).to_text()
