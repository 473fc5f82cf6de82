"""The single error kind raised by the parser and the reducer."""

from __future__ import annotations


class ExpressionError(ValueError):
    """Raised when an expression cannot be parsed or reduced.

    WHY: Callers render any failure as one user-facing message and log
    the detail, so they need exactly one error type to catch.

    RULES:
    - ``expression`` is the original input string, kept for diagnostics
    - ``str(error)`` is the detail message and always echoes the input
    """

    def __init__(self, message: str, expression: str) -> None:
        super().__init__("{} {}".format(message, expression))
        self.message = message
        self.expression = expression
