"""
Error handling for the shuntyard lexer.

Author: xwest
"""

from typing import Optional

from ..errors import ShuntingError
from .tokens import SourceLocation


class LexError(ShuntingError):
    """Raised when the lexer cannot turn the input into tokens."""


class UnexpectedCharacterError(LexError):
    """A character that is neither a digit nor one of + - * / ^ ( )."""

    def __init__(self, message: str, char: str, location: SourceLocation, help_text: Optional[str] = None):
        super().__init__(message, code="L001", location=location, help_text=help_text)
        self.char = char


ERROR_CODES = {
    "L001": "Unexpected character",
}


def create_unexpected_character_error(char: str, location: SourceLocation) -> UnexpectedCharacterError:
    """Create an error for a character the lexer does not recognise."""
    if char.isspace():
        help_text = "Whitespace is not allowed; write the expression without spaces."
    elif char.isprintable():
        help_text = "Expressions may only contain digits and the characters + - * / ^ ( )."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnexpectedCharacterError(
        message=f"Unexpected character: {char!r}",
        char=char,
        location=location,
        help_text=help_text
    )
