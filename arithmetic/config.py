"""Configuration constants and .env loading.

WHY: The hosting surfaces (renderer, CLI, API) share a few settings: the
default notation, the text shown in place of a malformed expression,
the log level and where the API binds. Keeping them here as plain
module-level values makes them easy to find and override.

HOW: python-dotenv loads the .env file on import. Each value reads its
environment variable with a default. load_default_notation() validates
the notation setting and gives a clear error when it is wrong.

RULES:
- ARITHMETIC_NOTATION is "infix" or "postfix" (default "infix")
- ARITHMETIC_PLACEHOLDER is shown to users instead of error details
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from arithmetic.core.tokens import Notation

# Load .env from the working directory (where the command is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Notation
# ---------------------------------------------------------------------------

NOTATIONS: list[str] = [notation.value for notation in Notation]
"""Accepted notation names, in display order."""

DEFAULT_NOTATION = os.getenv("ARITHMETIC_NOTATION", Notation.INFIX.value).strip().lower()


def load_default_notation() -> Notation:
    """Return the configured default notation.

    RULES:
    - Raises ValueError if ARITHMETIC_NOTATION is not a known notation
    - Never falls back silently to another notation
    """
    if DEFAULT_NOTATION not in NOTATIONS:
        raise ValueError(
            "ARITHMETIC_NOTATION must be one of {}, got '{}'.".format(
                ", ".join(NOTATIONS), DEFAULT_NOTATION
            )
        )
    return Notation(DEFAULT_NOTATION)


# ---------------------------------------------------------------------------
# Display and logging
# ---------------------------------------------------------------------------

MALFORMED_PLACEHOLDER = os.getenv("ARITHMETIC_PLACEHOLDER", "Malformed expression.")
"""User-facing text rendered in place of a result that failed."""

LOG_LEVEL = os.getenv("ARITHMETIC_LOG_LEVEL", "WARNING").upper()

# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

API_HOST = os.getenv("ARITHMETIC_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("ARITHMETIC_API_PORT", "8000"))
