"""Arithmetic expression evaluator: infix and postfix notations.

WHY: Text fields that hold small arithmetic expressions ("12-(4*3)",
"10 5 3 * +") need to be displayed as their calculated value. This
package turns such a string into a postfix evaluation plan and reduces
that plan to a single decimal result.

HOW: Three-stage pipeline: parse (infix via shunting-yard, or postfix
regrouping), reduce (leftmost operand-operand-operator collapse), render
(hosting surfaces: display renderer, formatters, CLI, HTTP API). Each
stage is independently testable.

RULES:
- Operands are non-negative integer literals; operators are + - * /
- Every failure in the core is an ExpressionError carrying the input
- The core holds no state between calls
"""

from arithmetic.core.calculator import (
    Calculator,
    calculate,
    calculate_infix,
    calculate_postfix,
)
from arithmetic.core.errors import ExpressionError
from arithmetic.core.tokens import Notation

__version__ = "0.1.0"

__all__ = [
    "Calculator",
    "ExpressionError",
    "Notation",
    "calculate",
    "calculate_infix",
    "calculate_postfix",
]
