"""Output formatter registry.

WHY: The CLI and API layers need a single lookup to find the right
formatter by name.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API requests)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from arithmetic.formatters.json_results import JSONResultsFormatter
from arithmetic.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from arithmetic.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "plain_text": PlainTextFormatter,
    "json": JSONResultsFormatter,
}
