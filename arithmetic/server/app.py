"""FastAPI application exposing the calculator over HTTP.

WHY: Display layers that are not written in Python (templates, other
services) need the calculated value of a stored expression. A small
HTTP API lets them call the core without embedding it.

HOW: A single FastAPI app exposes five endpoints grouped by tags.
Calculation and parsing run the core inline in the request handler; the
core is pure and fast, so there is no background work. /render applies
the display renderer's placeholder semantics and returns the formatter
document directly.

RULES:
- ExpressionError maps to 422 with the detail message
- /render never fails for bad expressions; failed values carry the
  placeholder and their error detail
- Unknown formatter keys are rejected with 400
- Requests without a notation use the configured default; an invalid
  configured default is a 500 with a clear detail
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from arithmetic import __version__
from arithmetic.config import API_HOST, API_PORT, load_default_notation
from arithmetic.core.calculator import Calculator
from arithmetic.core.errors import ExpressionError
from arithmetic.core.tokens import Notation
from arithmetic.formatters import FORMATTERS
from arithmetic.render import CalculatedValueRenderer
from arithmetic.server.models import (
    CalculationResponse,
    ErrorResponse,
    ExpressionRequest,
    FormatInfo,
    HealthResponse,
    ParseResponse,
    RenderRequest,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

calculator = Calculator()

app = FastAPI(
    title="Arithmetic Expression API",
    description=(
        "Calculate arithmetic expressions written in infix or postfix "
        "notation, inspect their postfix token sequence, and render "
        "batches of stored values for display."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _resolve(notation: Optional[Notation]) -> Notation:
    if notation is not None:
        return notation
    try:
        return load_default_notation()
    except ValueError as exc:
        logger.error("Invalid server configuration: %s", exc)
        raise HTTPException(
            status_code=500,
            detail="Server misconfigured: {}".format(exc),
        ) from None


def _reject(exc: ExpressionError) -> HTTPException:
    logger.info("Rejected expression: %s", exc)
    return HTTPException(status_code=422, detail=str(exc))


# ---------------------------------------------------------------------------
# Endpoints: Calculations
# ---------------------------------------------------------------------------


@app.post(
    "/calculations",
    response_model=CalculationResponse,
    tags=["calculations"],
    summary="Calculate an expression",
    description="Parse the expression in the given notation and reduce it to a single value.",
    responses={
        422: {"model": ErrorResponse, "description": "Malformed expression or invalid request"},
        500: {"model": ErrorResponse, "description": "Invalid configured default notation"},
    },
)
async def create_calculation(request: ExpressionRequest) -> CalculationResponse:
    notation = _resolve(request.notation)
    try:
        result = calculator.calculate(request.expression, notation)
    except ExpressionError as exc:
        raise _reject(exc)
    return CalculationResponse(expression=request.expression, notation=notation, result=result)


@app.post(
    "/parse",
    response_model=ParseResponse,
    tags=["calculations"],
    summary="Parse an expression into postfix tokens",
    description="Return the postfix token sequence the calculator would reduce.",
    responses={
        422: {"model": ErrorResponse, "description": "Malformed expression or invalid request"},
        500: {"model": ErrorResponse, "description": "Invalid configured default notation"},
    },
)
async def parse_expression(request: ExpressionRequest) -> ParseResponse:
    notation = _resolve(request.notation)
    try:
        sequence = calculator.parse(request.expression, notation)
    except ExpressionError as exc:
        raise _reject(exc)
    return ParseResponse(expression=request.expression, notation=notation, tokens=sequence.texts())


@app.post(
    "/render",
    tags=["calculations"],
    summary="Render stored values for display",
    description=(
        "Calculate every value, substituting the placeholder for malformed "
        "ones, and return the chosen formatter's document."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Unknown output format"},
        500: {"model": ErrorResponse, "description": "Invalid configured default notation"},
    },
)
async def render_values(request: RenderRequest) -> Response:
    if request.format not in FORMATTERS:
        available = ", ".join(sorted(FORMATTERS.keys()))
        raise HTTPException(
            status_code=400,
            detail="Unknown output format '{}'. Available: {}".format(request.format, available),
        )

    renderer = CalculatedValueRenderer(notation=_resolve(request.notation), calculator=calculator)
    values = renderer.view_elements(request.values)
    output = FORMATTERS[request.format]().format(values)[0]
    return Response(content=output.content, media_type=output.media_type)


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        # An empty batch is enough to learn the media type
        outputs = formatter.format([])
        result.append(FormatInfo(key=key, name=formatter.name, media_type=outputs[0].media_type))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api() -> None:
    """Entry point for the arithmetic-api console script."""
    import uvicorn

    uvicorn.run(app, host=API_HOST, port=API_PORT)
