"""Token, postfix sequence and operator table types.

WHY: Parsing and reduction pass expressions around as ordered token
lists. Keeping the token kind explicit (operand vs operator) means the
reducer never has to guess what a piece of text is, and keeping the
operator set as data means one calculator serves every notation.

HOW: Token is a frozen dataclass tagged with a TokenKind. PostfixSequence
is a thin ordered container with the two mutations the algorithms need
(append, replace a window). OperatorTable maps each operator symbol to
its precedence and binary function.

RULES:
- Operand text is kept exactly as written ("007" stays "007")
- A token is never both an operand and an operator
- GROUP tokens only appear when an infix "(" is never closed
- Precedence: * and / (1) outrank + and - (0); ties pop left-to-right
"""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Union

Number = Union[int, float]


class Notation(str, enum.Enum):
    """Input notations understood by the calculator."""

    INFIX = "infix"
    POSTFIX = "postfix"


class TokenKind(str, enum.Enum):
    OPERAND = "operand"
    OPERATOR = "operator"
    GROUP = "group"


@dataclass(frozen=True)
class Token:
    """One symbol of a postfix sequence."""

    kind: TokenKind
    text: str

    @classmethod
    def operand(cls, text: str) -> "Token":
        return cls(TokenKind.OPERAND, text)

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        return cls(TokenKind.OPERATOR, symbol)

    @classmethod
    def group(cls, symbol: str = "(") -> "Token":
        return cls(TokenKind.GROUP, symbol)

    @property
    def is_operand(self) -> bool:
        return self.kind is TokenKind.OPERAND

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    def __str__(self) -> str:
        return self.text


class PostfixSequence:
    """Ordered list of tokens in Reverse Polish order.

    Supports exactly the operations the parser and reducer use: append
    at the end, and replace a contiguous window with a single token.
    Compares equal to another PostfixSequence with the same tokens.
    """

    def __init__(self, tokens: Optional[Iterable[Token]] = None) -> None:
        self._tokens: List[Token] = list(tokens) if tokens is not None else []

    def append(self, token: Token) -> None:
        self._tokens.append(token)

    def replace_window(self, start: int, stop: int, token: Token) -> None:
        """Replace tokens ``[start, stop)`` with ``token``, closing the gap."""
        self._tokens[start:stop] = [token]

    def texts(self) -> List[str]:
        return [token.text for token in self._tokens]

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PostfixSequence):
            return NotImplemented
        return self._tokens == other._tokens

    def __repr__(self) -> str:
        return "PostfixSequence({!r})".format(self.texts())

    def __str__(self) -> str:
        return " ".join(self.texts())


# ---------------------------------------------------------------------------
# Operator table
# ---------------------------------------------------------------------------


def _divide(left: Number, right: Number) -> Number:
    """Exact integer quotient when it divides evenly, else a float quotient.

    Raises ZeroDivisionError for a zero divisor.
    """
    if isinstance(left, int) and isinstance(right, int) and left % right == 0:
        return left // right
    return left / right


@dataclass(frozen=True)
class OperatorSpec:
    symbol: str
    precedence: int
    apply: Callable[[Number, Number], Number]


class OperatorTable:
    """Operator symbols with their precedence and binary function."""

    def __init__(self, specs: Iterable[OperatorSpec]) -> None:
        self._specs: Dict[str, OperatorSpec] = {spec.symbol: spec for spec in specs}

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._specs

    def __getitem__(self, symbol: str) -> OperatorSpec:
        return self._specs[symbol]

    @property
    def symbols(self) -> List[str]:
        return list(self._specs)

    def precedence(self, symbol: str) -> int:
        return self._specs[symbol].precedence


ARITHMETIC_OPERATORS = OperatorTable([
    OperatorSpec("-", 0, operator.sub),
    OperatorSpec("+", 0, operator.add),
    OperatorSpec("/", 1, _divide),
    OperatorSpec("*", 1, operator.mul),
])
"""The four basic operators. Order matches the infix split pattern."""
