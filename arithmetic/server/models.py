"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint pair (request + response) has its own model. The
Notation enum from the core is reused so only known notations pass
validation. All models include Field descriptions for the /docs UI.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- notation is optional in requests; the configured default applies
- Response models never expose internal implementation details
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from arithmetic.core.tokens import Notation


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ExpressionRequest(BaseModel):
    """A single expression to parse or calculate."""

    expression: str = Field(description="Expression text, e.g. '12-(4*3)' or '12 4 3 * -'.")
    notation: Optional[Notation] = Field(
        default=None,
        description="Notation of the expression. Defaults to the server's configured notation.",
    )

    model_config = {"json_schema_extra": {
        "examples": [{"expression": "15/3-(2+(6-4))", "notation": "infix"}]
    }}


class RenderRequest(BaseModel):
    """A batch of stored values to render for display."""

    values: List[str] = Field(description="Expression strings, rendered in order.")
    notation: Optional[Notation] = Field(
        default=None,
        description="Notation of every value. Defaults to the server's configured notation.",
    )
    format: str = Field(
        default="json",
        description="Output formatter key (see GET /formats).",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class CalculationResponse(BaseModel):
    """Result of a successful calculation."""

    expression: str = Field(description="The expression as submitted.")
    notation: Notation = Field(description="Notation used to read the expression.")
    result: str = Field(description="Calculated value as a decimal string.")

    model_config = {"json_schema_extra": {
        "examples": [{"expression": "10 5 3 * +", "notation": "postfix", "result": "25"}]
    }}


class ParseResponse(BaseModel):
    """Postfix token sequence for an expression."""

    expression: str = Field(description="The expression as submitted.")
    notation: Notation = Field(description="Notation used to read the expression.")
    tokens: List[str] = Field(description="Postfix tokens in evaluation order.")


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    media_type: str = Field(description="MIME type of the formatted document.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
