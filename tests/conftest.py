"""Shared test fixtures for the arithmetic test suite.

WHY: Several test modules check the same reference expressions (the
ones every notation must agree on) and the same malformed inputs.
Centralizing them here keeps the expected values in one place.

HOW: Module-level tables hold (expression, expected) pairs; fixtures
provide a fresh Calculator and renderers pinned to each notation so
tests never depend on the ARITHMETIC_NOTATION environment variable.

RULES:
- Expected results are written as the exact strings the core returns
- Renderer fixtures pass the notation explicitly
"""

from typing import List, Tuple

import pytest

from arithmetic.core.calculator import Calculator
from arithmetic.render import CalculatedValueRenderer


# ---------------------------------------------------------------------------
# Reference expressions
# ---------------------------------------------------------------------------

INFIX_RESULTS: List[Tuple[str, str]] = [
    ("10+5", "15"),
    ("12-(4*3)", "0"),
    ("15/3-(2+(6-4))", "1"),
    ("2+3*4", "14"),
    ("2*3+4", "10"),
    ("10-4-3", "3"),
    ("100/10/5", "2"),
    ("2*(3+4)*5", "70"),
]

POSTFIX_RESULTS: List[Tuple[str, str]] = [
    ("10 5 +", "15"),
    ("12 4 + 3 *", "48"),
    ("10 5 3 * +", "25"),
    ("2 3 4 * + 5 -", "9"),
]

MALFORMED: List[str] = ["10++4*", "A+12", "((7+2)*3"]


@pytest.fixture
def calculator():
    return Calculator()


@pytest.fixture
def infix_renderer():
    return CalculatedValueRenderer(notation="infix", placeholder="Malformed expression.")


@pytest.fixture
def postfix_renderer():
    return CalculatedValueRenderer(notation="postfix", placeholder="Malformed expression.")
