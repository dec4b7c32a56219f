"""
Human-readable rendering of token sequences.

Debugging aid only; the output is not meant to be parsed back.
"""

from typing import Iterable

from .lexer.tokens import Token


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens space-separated: numbers in decimal, operators by symbol, negation as '(-)'."""
    return " ".join(str(token) for token in tokens)
