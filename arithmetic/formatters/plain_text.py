"""Plain text formatter: one "source = result" line per value.

RULES:
- One line per value, in input order, "{source} = {result}"
- Failed values show the placeholder as their result
- Trailing newline after the last line; empty input gives ""
- Output suffix: "-results.txt", media type: "text/plain"
"""

from __future__ import annotations

from arithmetic.formatters.base import BaseFormatter, FormatterOutput
from arithmetic.render import CalculatedValue


class PlainTextFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Plain text"

    def format(self, values: list[CalculatedValue]) -> list[FormatterOutput]:
        lines = ["{} = {}".format(value.source, value.result) for value in values]
        content = "\n".join(lines) + "\n" if lines else ""
        return [
            FormatterOutput(
                suffix="-results.txt",
                content=content,
                media_type="text/plain",
            )
        ]
