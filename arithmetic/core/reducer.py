"""Reduction of a postfix token sequence to a single value.

WHY: A postfix sequence is an evaluation plan; this module executes it.
Collapsing the leftmost operand-operand-operator window repeatedly gives
the same result as a classic operand stack, while keeping every
intermediate state a valid sequence that can be inspected in tests.

HOW: Each pass finds the first non-operand token, checks the two tokens
before it are operands, applies the operator and replaces the three-token
window with one operand holding the result text.

RULES:
- + - * are exact integer arithmetic (arbitrary precision)
- / gives an exact integer when it divides evenly, else a float; never
  truncated
- Integral floats below 2**53 in magnitude render without ".0"
- Division by zero and float overflow are ExpressionErrors, never inf
  or nan
- Each pass shrinks the sequence by exactly two tokens
- A single remaining operand is the result; anything else is an error
"""

from __future__ import annotations

import math
import re
from typing import Optional

from arithmetic.core.errors import ExpressionError
from arithmetic.core.tokens import (
    ARITHMETIC_OPERATORS,
    Number,
    OperatorTable,
    PostfixSequence,
    Token,
)

_INTEGER = re.compile(r"-?[0-9]+")

# Largest magnitude at which every integer is exactly representable as a float.
_EXACT_FLOAT_LIMIT = 2 ** 53


def to_number(text: str) -> Number:
    """Read operand text as an int, or as a float for fractional results."""
    if _INTEGER.fullmatch(text):
        return int(text)
    return float(text)


def format_number(value: Number) -> str:
    """Render a result as decimal operand text."""
    if isinstance(value, float) and value.is_integer() and abs(value) < _EXACT_FLOAT_LIMIT:
        return str(int(value))
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _describe(sequence: PostfixSequence) -> str:
    return " ".join(sequence.texts())


def reduce_sequence(
    sequence: PostfixSequence,
    operators: OperatorTable = ARITHMETIC_OPERATORS,
    expression: Optional[str] = None,
) -> str:
    """Fold a postfix sequence into its decimal result.

    Args:
        sequence: Postfix tokens, e.g. from parse_infix or parse_postfix.
            Not modified; reduction works on a copy.
        operators: Operator functions to apply.
        expression: Original input, used in error messages. Defaults to
            the sequence's own text.

    Returns:
        The result as a decimal string, e.g. ``"15"`` or ``"2.5"``.

    Raises:
        ExpressionError: If the sequence is empty, an operator lacks two
            preceding operands, operands are left without an operator,
            a divisor is zero, a result overflows, or the window
            invariant breaks.
    """
    source = expression if expression is not None else _describe(sequence)
    queue = PostfixSequence(sequence)

    if not len(queue):
        raise ExpressionError("Empty expression", source)

    while len(queue) > 1:
        count = len(queue)
        i = 0
        while i < count and queue[i].is_operand:
            i += 1

        if (
            i >= count
            or i < 2
            or not queue[i].is_operator
            or queue[i].text not in operators
            or not queue[i - 1].is_operand
            or not queue[i - 2].is_operand
        ):
            raise ExpressionError("Error while reducing expression", source)

        left = to_number(queue[i - 2].text)
        right = to_number(queue[i - 1].text)
        try:
            result = operators[queue[i].text].apply(left, right)
        except ZeroDivisionError:
            raise ExpressionError("Division by zero in expression", source) from None
        except OverflowError:
            raise ExpressionError("Numeric overflow in expression", source) from None
        if isinstance(result, float) and not math.isfinite(result):
            raise ExpressionError("Numeric overflow in expression", source)

        queue.replace_window(i - 2, i + 1, Token.operand(format_number(result)))

        if len(queue) != count - 2:
            raise ExpressionError("Error while reducing stack on expression", source)

    if not queue[0].is_operand:
        raise ExpressionError("Error while reducing expression", source)
    return queue[0].text
