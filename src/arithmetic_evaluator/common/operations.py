"""Pydantic models for arithmetic operation requests and outcomes."""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class OperationRequest(BaseModel):
    """Represents a single arithmetic expression to evaluate."""

    expression: str = Field(..., description="Arithmetic expression as a string")


class OperationResult(BaseModel):
    """Represents the successful evaluation of an arithmetic expression."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
    expression: str = Field(..., description="Original arithmetic expression")
    result: float = Field(..., description="Evaluated numeric result of the expression")

    def to_text(self) -> str:
        """Format the result the way the string-only interface returns it."""
        return format_result(self.result)


class OperationError(BaseModel):
    """Represents a failed evaluation, tagged with the stage that failed."""

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    expression: str = Field(..., description="Original arithmetic expression")
    kind: Literal["lex", "syntax", "eval"] = Field(..., description="Stage that rejected the expression")
    message: str = Field(..., description="Human-readable error message")

    def to_text(self) -> str:
        return self.message


OperationOutcome = Annotated[
    Union[OperationResult, OperationError],
    Field(discriminator="status"),
]


def format_result(value: float) -> str:
    """
    Convert a float to text using Python's shortest round-trip form.

    :param float value: Computed value

    :return: Text such as ``3.0`` or ``0.30000000000000004``
    :rtype: str
    """
    return repr(float(value))
