"""Parsing and reduction of arithmetic expressions.

WHY: The core package is the only part with algorithmic content:
tokenization, shunting-yard reordering and postfix reduction. Hosting
surfaces (renderer, formatters, CLI, API) only call into it.

HOW: tokens.py defines the token, sequence and operator-table types,
parser.py builds postfix sequences from either notation, reducer.py
folds a sequence into a result, calculator.py ties them together.

RULES:
- Everything here is pure and synchronous, no I/O, no logging side effects
- ExpressionError is the only error raised for bad input
"""
