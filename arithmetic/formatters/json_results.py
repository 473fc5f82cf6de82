"""JSON formatter for calculated values, schema-validated.

WHY: Programs consuming results (the HTTP API's clients, scripts piping
the CLI) need a machine-readable document that says which values
failed and why, not just the placeholder text.

HOW: Builds a dict with one entry per value plus a failure count,
validates it with jsonschema against calculated_values_schema.json
(bundled next to this module), then serializes it.

RULES:
- Every result entry has: source, result, notation, ok, error
- ``error`` is null for successful values
- ``failed`` counts entries with ok == false
- Validate output against the schema before returning; raise on failure
- Output suffix: "-results.json", media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from arithmetic.formatters.base import BaseFormatter, FormatterOutput
from arithmetic.render import CalculatedValue

_SCHEMA_PATH = Path(__file__).resolve().parent / "calculated_values_schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _value_to_dict(value: CalculatedValue) -> dict[str, Any]:
    return {
        "source": value.source,
        "result": value.result,
        "notation": value.notation,
        "ok": value.ok,
        "error": value.error,
    }


class JSONResultsFormatter(BaseFormatter):
    """Formatter producing a validated JSON document of results."""

    @property
    def name(self) -> str:
        return "JSON results"

    def format(self, values: list[CalculatedValue]) -> list[FormatterOutput]:
        """Convert rendered values into a JSON document.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not
                conform to the bundled schema.
        """
        output: dict[str, Any] = {
            "results": [_value_to_dict(value) for value in values],
            "failed": sum(1 for value in values if not value.ok),
        }

        jsonschema.validate(instance=output, schema=_get_schema())

        return [
            FormatterOutput(
                suffix="-results.json",
                content=json.dumps(output, indent=2, ensure_ascii=False),
                media_type="application/json",
            )
        ]
