"""Display renderer: calculated values for stored expression strings.

WHY: A page that shows a text field holding "12-(4*3)" wants to show "0"
next to it, and a malformed value must never break the page. This is the
thin caller around the core: it picks the notation, catches the single
error kind, substitutes a placeholder and logs the detail.

HOW: CalculatedValueRenderer is configured once with a notation (default
from config) and renders each stored value to a CalculatedValue holding
the source, the displayed result and the error detail if any.

RULES:
- Only ExpressionError is caught; anything else propagates
- Failed values show MALFORMED_PLACEHOLDER and are logged at ERROR
- An unknown notation fails at construction with ValueError
- Items are independent: one failure does not affect the others
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from arithmetic.config import MALFORMED_PLACEHOLDER, load_default_notation
from arithmetic.core.calculator import Calculator, resolve_notation
from arithmetic.core.errors import ExpressionError
from arithmetic.core.tokens import Notation

logger = logging.getLogger(__name__)


@dataclass
class CalculatedValue:
    """One rendered value.

    Attributes:
        source: The stored expression string, unchanged.
        result: The calculated value, or the placeholder on failure.
        notation: Notation name used to read ``source``.
        error: The ExpressionError detail, or None on success.
    """

    source: str
    result: str
    notation: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CalculatedValueRenderer:
    """Render expression strings as their calculated values."""

    def __init__(
        self,
        notation: Union[Notation, str, None] = None,
        calculator: Optional[Calculator] = None,
        placeholder: Optional[str] = None,
    ) -> None:
        self.notation = load_default_notation() if notation is None else resolve_notation(notation)
        self.calculator = calculator if calculator is not None else Calculator()
        self.placeholder = placeholder if placeholder is not None else MALFORMED_PLACEHOLDER

    def render(self, source: str) -> CalculatedValue:
        try:
            result = self.calculator.calculate(source, self.notation)
        except ExpressionError as exc:
            logger.error("%s", exc)
            return CalculatedValue(
                source=source,
                result=self.placeholder,
                notation=self.notation.value,
                error=str(exc),
            )
        return CalculatedValue(source=source, result=result, notation=self.notation.value)

    def view_elements(self, values: Iterable[str]) -> List[CalculatedValue]:
        """Render every stored value, in order."""
        return [self.render(value) for value in values]
