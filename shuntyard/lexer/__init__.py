"""
shuntyard Lexer Package

Turns raw expression text into a list of tokens: decimal integer
literals, the binary operators + - * / ^, unary negation and
parentheses.

Author: xwest
"""

from .tokens import (
    Token, TokenType, Operator, Unary, Paren, SourceLocation,
    PRECEDENCE, RIGHT_ASSOCIATIVE, OPERATOR_SYMBOLS, UNARY_SYMBOLS,
    INT64_MIN, INT64_MAX, wrap_int64,
)
from .lexer import Lexer, tokenize
from .errors import LexError, UnexpectedCharacterError

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenType",
    "Operator",
    "Unary",
    "Paren",
    "SourceLocation",
    "PRECEDENCE",
    "RIGHT_ASSOCIATIVE",
    "OPERATOR_SYMBOLS",
    "UNARY_SYMBOLS",
    "INT64_MIN",
    "INT64_MAX",
    "wrap_int64",
    "LexError",
    "UnexpectedCharacterError",
]
