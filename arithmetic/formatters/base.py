"""Abstract base formatter and output container.

WHY: The CLI and the API both turn a list of calculated values into
text for a reader or another program. A shared interface lets them work
with any output format generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; current formatters return one item
- ``suffix`` starts with a hyphen, e.g. ``"-results.json"``
- Formatters never evaluate expressions; they receive rendered values
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from arithmetic.render import CalculatedValue


@dataclass
class FormatterOutput:
    """One output document produced by a formatter.

    Attributes:
        suffix: File suffix appended to a caller-chosen stem,
                e.g. ``"-results.json"``.
        content: The document text.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain text'."""

    @abstractmethod
    def format(self, values: list[CalculatedValue]) -> list[FormatterOutput]:
        """Convert rendered values into one or more output documents.

        Args:
            values: Rendered values, successes and failures alike.

        Returns:
            List of FormatterOutput objects.
        """
