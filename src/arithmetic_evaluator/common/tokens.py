"""Token models and operator table."""
from collections.abc import Callable as ABCCallable
import operator
from typing import Annotated, Callable, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Mapping of operator symbols to (precedence, function)
OPERATORS: dict[str, Tuple[int, OperatorFn]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, operator.truediv),
}

OperatorSymbol = Literal["+", "-", "*", "/"]


def precedence(symbol: str) -> int:
    """
    Return the binding rank of an operator symbol.

    :param str symbol: Operator symbol

    :return: 1 for additive, 2 for multiplicative, 0 for anything else
    :rtype: int
    """
    return OPERATORS.get(symbol, (0,))[0]


class NumberToken(BaseModel):
    """Floating-point literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: float = Field(..., description="Parsed numeric value")

    def __str__(self) -> str:
        return repr(self.value)


class OperatorToken(BaseModel):
    """Binary arithmetic operator."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["operator"] = "operator"
    symbol: OperatorSymbol = Field(..., description="Operator character")

    @property
    def precedence(self) -> int:
        return precedence(self.symbol)

    def apply(self, a: float, b: float) -> float:
        """Apply the operator to the left operand ``a`` and the right operand ``b``."""
        return OPERATORS[self.symbol][1](a, b)

    def __str__(self) -> str:
        return self.symbol


class LeftParen(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["lparen"] = "lparen"

    def __str__(self) -> str:
        return "("


class RightParen(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rparen"] = "rparen"

    def __str__(self) -> str:
        return ")"


Token = Annotated[
    Union[NumberToken, OperatorToken, LeftParen, RightParen],
    Field(discriminator="kind"),
]
