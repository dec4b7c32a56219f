"""
shuntyard Converter Package

Rewrites infix token sequences into postfix order using the
shunting-yard algorithm.

Author: xwest
"""

from .converter import ShuntingYard, convert
from .errors import ConvertError, UnmatchedOpenParenError, UnmatchedCloseParenError

__all__ = [
    "ShuntingYard",
    "convert",
    "ConvertError",
    "UnmatchedOpenParenError",
    "UnmatchedCloseParenError",
]
