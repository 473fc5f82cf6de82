"""Conversion of infix and postfix strings into postfix token sequences.

WHY: The reducer only understands Reverse Polish order. Infix input has
to be reordered by precedence and parentheses first; postfix input only
has to be split into operand and operator tokens.

HOW: parse_infix implements the shunting-yard algorithm
(https://en.wikipedia.org/wiki/Shunting-yard_algorithm) over pieces
produced by splitting on operator and parenthesis characters.
parse_postfix scans character by character, filling numbered slots:
digits accumulate in the current slot, a delimiter or operator advances
to the next slot.

RULES:
- Infix pieces must be digit runs, operators or parentheses; there is no
  whitespace stripping, so "10 + 5" is rejected
- An operator pops stack entries of greater or equal precedence
- A ")" without a matching "(" is rejected
- A "(" that is never closed is emitted as a GROUP token; the reducer
  rejects it
- Postfix slots advance only when the previous character is not a space,
  and the previous character of position 0 is the last character
- Nothing is evaluated here
"""

from __future__ import annotations

import re
from typing import List, Optional

from arithmetic.core.errors import ExpressionError
from arithmetic.core.tokens import (
    ARITHMETIC_OPERATORS,
    OperatorTable,
    PostfixSequence,
    Token,
)

DELIMITER = " "
"""Separator between postfix terms."""

_DIGITS = re.compile(r"[0-9]+")


def _is_digits(text: str) -> bool:
    return _DIGITS.fullmatch(text) is not None


def _split_infix(expression: str, operators: OperatorTable) -> List[str]:
    symbols = "".join(re.escape(symbol) for symbol in operators.symbols)
    pieces = re.split("([{}()])".format(symbols), expression)
    return [piece for piece in pieces if piece]


# ---------------------------------------------------------------------------
# Infix
# ---------------------------------------------------------------------------


def parse_infix(
    expression: str,
    operators: OperatorTable = ARITHMETIC_OPERATORS,
) -> PostfixSequence:
    """Reorder an infix expression into a postfix token sequence.

    Args:
        expression: Infix expression, e.g. ``"(12+4)*3"``.
        operators: Operator symbols and precedences to recognise.

    Returns:
        The postfix sequence, e.g. ``12 4 + 3 *``.

    Raises:
        ExpressionError: On a character outside the infix alphabet or a
            closing parenthesis without a matching opening one.
    """
    output = PostfixSequence()
    op_stack: List[str] = []

    for symbol in _split_infix(expression, operators):
        if _is_digits(symbol):
            output.append(Token.operand(symbol))
        elif symbol in operators:
            while (
                op_stack
                and op_stack[-1] != "("
                and operators.precedence(op_stack[-1]) >= operators.precedence(symbol)
            ):
                output.append(Token.operator(op_stack.pop()))
            op_stack.append(symbol)
        elif symbol == "(":
            op_stack.append(symbol)
        elif symbol == ")":
            while op_stack and op_stack[-1] != "(":
                output.append(Token.operator(op_stack.pop()))
            if not op_stack:
                raise ExpressionError("Unbalanced parenthesis in expression", expression)
            op_stack.pop()
        else:
            raise ExpressionError("Unallowed character in expression", expression)

    while op_stack:
        symbol = op_stack.pop()
        output.append(Token.group(symbol) if symbol == "(" else Token.operator(symbol))

    return output


# ---------------------------------------------------------------------------
# Postfix
# ---------------------------------------------------------------------------


def parse_postfix(
    expression: str,
    operators: OperatorTable = ARITHMETIC_OPERATORS,
) -> PostfixSequence:
    """Split a space-delimited postfix expression into tokens.

    Args:
        expression: Postfix expression, e.g. ``"12 4 + 3 *"``.
        operators: Operator symbols to recognise.

    Returns:
        The postfix sequence in input order.

    Raises:
        ExpressionError: On a character that is not a digit, the
            delimiter or an operator, or when the slots cannot be read
            as a clean token list (a leading delimiter leaves slot 0
            empty; digits written straight after an operator share its
            slot).
    """
    slots: List[Optional[Token]] = []
    index = 0

    def _write(token: Token) -> None:
        while len(slots) <= index:
            slots.append(None)
        slots[index] = token

    for i, char in enumerate(expression):
        if char == DELIMITER or char in operators:
            if expression[i - 1] != DELIMITER:
                index += 1
            if char in operators:
                _write(Token.operator(char))
            continue
        if _is_digits(char):
            current = slots[index] if index < len(slots) else None
            if current is None:
                _write(Token.operand(char))
            elif current.is_operand:
                _write(Token.operand(current.text + char))
            else:
                raise ExpressionError("Operand joined to operator in expression", expression)
            continue
        raise ExpressionError("Unallowed character in expression", expression)

    if any(token is None for token in slots):
        raise ExpressionError("Empty term in expression", expression)

    return PostfixSequence(slots)
