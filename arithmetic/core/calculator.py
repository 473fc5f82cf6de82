"""Single entry point combining parsing and reduction.

WHY: Callers pick a notation and want a result string back. One
Calculator serves both notations; the operator table is configuration
data rather than a reason for a second class.

HOW: Calculator holds an OperatorTable and dispatches to parse_infix or
parse_postfix, then to reduce_sequence. Module-level functions delegate
to a shared default instance, which is safe because the Calculator
keeps no state between calls.

RULES:
- calculate_* returns the decimal result text or raises ExpressionError
- Error messages echo the original input, not the postfix sequence
- An unknown notation name raises ValueError (configuration error)
"""

from __future__ import annotations

from typing import Union

from arithmetic.core.parser import parse_infix, parse_postfix
from arithmetic.core.reducer import reduce_sequence
from arithmetic.core.tokens import (
    ARITHMETIC_OPERATORS,
    Notation,
    OperatorTable,
    PostfixSequence,
)


def resolve_notation(notation: Union[Notation, str]) -> Notation:
    """Coerce a notation name to Notation, raising ValueError if unknown."""
    try:
        return Notation(notation)
    except ValueError:
        available = ", ".join(n.value for n in Notation)
        raise ValueError(
            "No notation defined for '{}'. Available: {}".format(notation, available)
        ) from None


class Calculator:
    """Parse and calculate simple arithmetic expressions."""

    def __init__(self, operators: OperatorTable = ARITHMETIC_OPERATORS) -> None:
        self.operators = operators

    def parse(self, expression: str, notation: Union[Notation, str]) -> PostfixSequence:
        """Return the postfix token sequence for ``expression``."""
        if resolve_notation(notation) is Notation.INFIX:
            return parse_infix(expression, self.operators)
        return parse_postfix(expression, self.operators)

    def calculate(self, expression: str, notation: Union[Notation, str]) -> str:
        sequence = self.parse(expression, notation)
        return reduce_sequence(sequence, self.operators, expression=expression)

    def calculate_infix(self, expression: str) -> str:
        return self.calculate(expression, Notation.INFIX)

    def calculate_postfix(self, expression: str) -> str:
        return self.calculate(expression, Notation.POSTFIX)


_default_calculator = Calculator()


def calculate(expression: str, notation: Union[Notation, str] = Notation.INFIX) -> str:
    return _default_calculator.calculate(expression, notation)


def calculate_infix(expression: str) -> str:
    return _default_calculator.calculate_infix(expression)


def calculate_postfix(expression: str) -> str:
    return _default_calculator.calculate_postfix(expression)
