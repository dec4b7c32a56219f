"""
Composition of the three stages: text -> tokens -> postfix -> value.
"""

from typing import List

from .lexer import Token, tokenize
from .converter import convert
from .evaluator import evaluate


def to_postfix(source: str) -> List[Token]:
    """Tokenize an infix expression and convert it to postfix order."""
    return convert(tokenize(source))


def evaluate_expression(source: str) -> int:
    """Evaluate an infix expression, e.g. evaluate_expression("2+3*4") == 14."""
    return evaluate(convert(tokenize(source)))
