"""Errors raised by the expression pipeline, one per stage."""
from typing import Literal


class ExpressionError(ValueError):
    """Base class for every error the pipeline can raise."""

    kind: str = "expression"


class LexError(ExpressionError):
    """
    Invalid character or unparsable numeric literal.

    :param str message: Human-readable description
    :param str text: Offending character or literal
    """

    kind = "lex"

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class ExpressionSyntaxError(ExpressionError):
    """
    Unbalanced parentheses.

    ``imbalance`` is ``"unclosed"`` for a '(' that is never closed and
    ``"unmatched_close"`` for a ')' without an opening partner.
    """

    kind = "syntax"

    def __init__(self, message: str, imbalance: Literal["unclosed", "unmatched_close"]) -> None:
        super().__init__(message)
        self.imbalance = imbalance


class EvalError(ExpressionError):
    """Arithmetic or structural problem found while evaluating postfix tokens."""

    kind = "eval"
