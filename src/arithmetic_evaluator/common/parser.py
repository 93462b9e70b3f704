"""Tokenize, convert and evaluate arithmetic expressions."""
import math
from typing import List

from arithmetic_evaluator.common.errors import EvalError, ExpressionSyntaxError, LexError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.tokens import (
    OPERATORS,
    LeftParen,
    NumberToken,
    OperatorToken,
    RightParen,
    Token,
)

NUMBER_CHARS = frozenset("0123456789.")


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Each call is independent, no state is kept between calls

    Algorithm:
        1. Scan the text into typed tokens
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack

    The Shunting-yard algorithm converts an infix expression into Reverse Polish Notation (RPN), allowing safe, stack-based evaluation without parentheses.
    It handles operator precedence by temporarily storing operators on a stack and outputting them in the correct order.

    Examples:
        - Infix expression (standard notation): (3 + 4) * 2
        - Corresponding Reverse Polish Notation (RPN): 3 4 + 2 *

    """

    @staticmethod
    def tokenize(expr: str) -> List[Token]:
        """
        Split an arithmetic expression into tokens.

        Spaces are optional (e.g., "3+4*2" and "3 + 4 * 2" are equivalent).
        Only the space character is skipped; tabs and newlines are rejected.

        :param str expr: Arithmetic expression as a string

        :return: List of tokens in source order
        :rtype: List[Token]
        :raises LexError: On an unknown character or a malformed number
        """
        tokens: List[Token] = []
        i = 0
        n = len(expr)

        while i < n:
            ch = expr[i]

            if ch in NUMBER_CHARS:
                # Digits and dots are read greedily, validity is left to float()
                start = i
                while i < n and expr[i] in NUMBER_CHARS:
                    i += 1
                literal = expr[start:i]
                try:
                    value = float(literal)
                except ValueError:
                    raise LexError(f"Invalid number: {literal}", text=literal) from None
                if math.isinf(value):
                    raise LexError(f"Invalid number: {literal} is too large", text=literal)
                tokens.append(NumberToken(value=value))
                continue

            if ch in OPERATORS:
                tokens.append(OperatorToken(symbol=ch))
            elif ch == "(":
                tokens.append(LeftParen())
            elif ch == ")":
                tokens.append(RightParen())
            elif ch != " ":
                raise LexError(f"Unknown character: {ch}", text=ch)
            i += 1

        return tokens

    @staticmethod
    def to_rpn(tokens: List[Token]) -> List[Token]:
        """
        Convert a list of tokens into Reverse Polish Notation (RPN) using the Shunting-yard algorithm.

        Only parenthesis balance is checked here; operand counts are checked by :meth:`evaluate_rpn`.

        :param List[Token] tokens: Tokens in infix order

        :return: List of tokens in RPN order
        :rtype: List[Token]
        :raises ExpressionSyntaxError: If parentheses are unbalanced
        """
        output: List[Token] = []
        stack: List[Token] = []

        for token in tokens:
            if isinstance(token, NumberToken):
                # Numbers are added directly to the output
                output.append(token)
            elif isinstance(token, OperatorToken):
                # Operator: pop operators from stack with higher or equal precedence
                while (
                    stack
                    and isinstance(stack[-1], OperatorToken)
                    and stack[-1].precedence >= token.precedence
                ):
                    output.append(stack.pop())
                stack.append(token)
            elif isinstance(token, LeftParen):
                stack.append(token)
            else:
                # Closing paren: unwind to the matching '(' which is dropped
                while True:
                    if not stack:
                        raise ExpressionSyntaxError(
                            "Unbalanced parentheses: unmatched ')'", imbalance="unmatched_close"
                        )
                    top = stack.pop()
                    if isinstance(top, LeftParen):
                        break
                    output.append(top)

        # Append remaining operators in reverse order (stack top first)
        while stack:
            top = stack.pop()
            if isinstance(top, LeftParen):
                raise ExpressionSyntaxError("Unclosed parentheses", imbalance="unclosed")
            output.append(top)

        return output

    @staticmethod
    def evaluate_rpn(rpn: List[Token]) -> float:
        """
        Evaluate tokens in Reverse Polish Notation.

        :param List[Token] rpn: Tokens in RPN order

        :return: Computed result as float
        :rtype: float
        :raises EvalError: On missing operands, division by zero, overflow, a parenthesis token or leftover operands
        """
        stack: List[float] = []
        for token in rpn:
            if isinstance(token, NumberToken):
                stack.append(token.value)
            elif isinstance(token, OperatorToken):
                # Operator requires two operands
                if len(stack) < 2:
                    raise EvalError(f"Not enough operands for '{token.symbol}'")
                b: float = stack.pop()
                a: float = stack.pop()
                if token.symbol == "/" and b == 0:
                    raise EvalError("Division by zero")
                result = token.apply(a, b)
                if not math.isfinite(result):
                    raise EvalError(f"Numeric overflow in '{token.symbol}'")
                stack.append(result)
            else:
                raise EvalError(f"Invalid token: {token}")

        if len(stack) != 1:
            raise EvalError("Invalid expression")

        return stack[0]

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate an arithmetic expression safely.

        :param str expr: Arithmetic expression string

        :return: Computed result as float
        :rtype: float
        :raises ExpressionError: If expression is invalid or malformed
        """
        tokens: List[Token] = ExpressionParser.tokenize(expr)
        logger.debug(f"🔤 Tokens for {expr!r}: {' '.join(map(str, tokens))}")

        rpn: List[Token] = ExpressionParser.to_rpn(tokens)
        logger.debug(f"🔁 RPN for {expr!r}: {' '.join(map(str, rpn))}")

        return ExpressionParser.evaluate_rpn(rpn)
