"""
Token definitions for the shuntyard lexer.

A token is a tagged value with exactly one active variant:
- NUMBER: a signed 64-bit integer
- BINARY_OPERATOR: one of + - * / ^
- UNARY_OPERATOR: negation
- PARENTHESIS: ( or )

Precedence, associativity and display symbols live in module-level
lookup tables keyed by the payload enums. They are never mutated.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Dict, Optional, Union


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def wrap_int64(value: int) -> int:
    """Wrap an arbitrary Python int into the signed 64-bit range."""
    return ((value - INT64_MIN) & 0xFFFFFFFFFFFFFFFF) + INT64_MIN


class TokenType(Enum):
    """Which variant of the token is active."""
    NUMBER = auto()                 # 42
    BINARY_OPERATOR = auto()        # + - * / ^
    UNARY_OPERATOR = auto()         # unary -
    PARENTHESIS = auto()            # ( )


class Operator(Enum):
    """Binary operators."""
    ADD = auto()                    # +
    SUB = auto()                    # -
    MUL = auto()                    # *
    DIV = auto()                    # /
    POW = auto()                    # ^


class Unary(Enum):
    """Unary operators."""
    NEGATE = auto()                 # -n


class Paren(Enum):
    """Parenthesis sides."""
    OPEN = auto()                   # (
    CLOSE = auto()                  # )


TokenValue = Union[int, Operator, Unary, Paren]


@dataclass(frozen=True)
class SourceLocation:
    """
    Position of a token inside the expression text.

    Expressions are a single line, so only the column is tracked.
    """
    source: str
    column: int
    offset: int  # Character offset from start of the expression

    def __str__(self) -> str:
        return f"{self.source}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.source!r}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Two tokens compare equal when type and value match; the location is
    carried for diagnostics only.
    """
    type: TokenType
    value: TokenValue
    location: Optional[SourceLocation] = field(default=None, compare=False)

    @classmethod
    def number(cls, value: int, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.NUMBER, wrap_int64(value), location)

    @classmethod
    def operator(cls, op: Operator, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.BINARY_OPERATOR, op, location)

    @classmethod
    def unary(cls, op: Unary, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.UNARY_OPERATOR, op, location)

    @classmethod
    def paren(cls, side: Paren, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.PARENTHESIS, side, location)

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return str(self.value)
        if self.type == TokenType.BINARY_OPERATOR:
            return OPERATOR_SYMBOLS[self.value]
        if self.type == TokenType.UNARY_OPERATOR:
            return UNARY_SYMBOLS[self.value]
        return PAREN_SYMBOLS[self.value]

    def __repr__(self) -> str:
        value = self.value if self.type == TokenType.NUMBER else self.value.name
        return f"Token({self.type.name}, {value!r})"

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        """Check if this token is a binary or unary operator."""
        return self.type in (TokenType.BINARY_OPERATOR, TokenType.UNARY_OPERATOR)

    @property
    def is_open_paren(self) -> bool:
        return self.type == TokenType.PARENTHESIS and self.value == Paren.OPEN

    @property
    def is_close_paren(self) -> bool:
        return self.type == TokenType.PARENTHESIS and self.value == Paren.CLOSE


# Lookup tables
# Operators sharing a precedence level must share associativity.

PRECEDENCE: Dict[Operator, int] = {
    Operator.ADD: 0,
    Operator.SUB: 0,
    Operator.MUL: 1,
    Operator.DIV: 1,
    Operator.POW: 2,
}

RIGHT_ASSOCIATIVE: Dict[Operator, bool] = {
    Operator.ADD: False,
    Operator.SUB: False,
    Operator.MUL: False,
    Operator.DIV: False,
    Operator.POW: True,
}

OPERATOR_SYMBOLS: Dict[Operator, str] = {
    Operator.ADD: "+",
    Operator.SUB: "-",
    Operator.MUL: "*",
    Operator.DIV: "/",
    Operator.POW: "^",
}

UNARY_SYMBOLS: Dict[Unary, str] = {
    Unary.NEGATE: "(-)",
}

PAREN_SYMBOLS: Dict[Paren, str] = {
    Paren.OPEN: "(",
    Paren.CLOSE: ")",
}

# Single characters that map 1:1 onto a token. '-' is listed as
# subtraction; the lexer reclassifies it as negation by context.
CHAR_TOKENS: Dict[str, Token] = {
    "+": Token.operator(Operator.ADD),
    "-": Token.operator(Operator.SUB),
    "*": Token.operator(Operator.MUL),
    "/": Token.operator(Operator.DIV),
    "^": Token.operator(Operator.POW),
    "(": Token.paren(Paren.OPEN),
    ")": Token.paren(Paren.CLOSE),
}
