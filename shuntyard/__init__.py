"""
shuntyard

Infix arithmetic to postfix conversion with Dijkstra's shunting-yard
algorithm, plus a stack-machine evaluator for the postfix result.

Architecture:
    shuntyard/
    ├── lexer/           # Text to tokens, unary minus detection
    ├── converter/       # Infix tokens to postfix tokens
    ├── evaluator/       # Postfix tokens to a 64-bit integer
    ├── formatting.py    # Token sequences as text
    ├── pipeline.py      # The three stages chained together
    └── cli.py           # shuntyard / shunt / shunteval commands

Usage:
    >>> from shuntyard import tokenize, convert, evaluate
    >>> evaluate(convert(tokenize("2^3^2")))
    512

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .errors import ShuntingError, Diagnostic
from .lexer import (
    Lexer, tokenize, Token, TokenType, Operator, Unary, Paren, SourceLocation,
    LexError, UnexpectedCharacterError,
)
from .converter import (
    ShuntingYard, convert, ConvertError, UnmatchedOpenParenError, UnmatchedCloseParenError,
)
from .evaluator import (
    PostfixEvaluator, evaluate, EvalError, StackUnderflowError, TrailingOperandsError,
    DivisionByZeroError, UnknownOperatorError,
)
from .formatting import format_tokens
from .pipeline import to_postfix, evaluate_expression

__all__ = [
    # Pipeline stages
    "Lexer",
    "tokenize",
    "ShuntingYard",
    "convert",
    "PostfixEvaluator",
    "evaluate",
    "to_postfix",
    "evaluate_expression",
    "format_tokens",

    # Token model
    "Token",
    "TokenType",
    "Operator",
    "Unary",
    "Paren",
    "SourceLocation",

    # Errors
    "ShuntingError",
    "Diagnostic",
    "LexError",
    "UnexpectedCharacterError",
    "ConvertError",
    "UnmatchedOpenParenError",
    "UnmatchedCloseParenError",
    "EvalError",
    "StackUnderflowError",
    "TrailingOperandsError",
    "DivisionByZeroError",
    "UnknownOperatorError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
