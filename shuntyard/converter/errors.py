"""
Error handling for the shunting-yard converter.

Author: xwest
"""

from typing import Optional

from ..errors import ShuntingError
from ..lexer.tokens import SourceLocation


class ConvertError(ShuntingError):
    """Raised when an infix token sequence cannot be rewritten to postfix."""


class UnmatchedOpenParenError(ConvertError):
    """An '(' that is never closed."""

    def __init__(self, message: str, location: Optional[SourceLocation] = None, help_text: Optional[str] = None):
        super().__init__(message, code="C001", location=location, help_text=help_text)


class UnmatchedCloseParenError(ConvertError):
    """A ')' with no '(' before it."""

    def __init__(self, message: str, location: Optional[SourceLocation] = None, help_text: Optional[str] = None):
        super().__init__(message, code="C002", location=location, help_text=help_text)


ERROR_CODES = {
    "C001": "Unmatched opening parenthesis",
    "C002": "Unmatched closing parenthesis",
}


def create_unmatched_open_paren_error(location: Optional[SourceLocation]) -> UnmatchedOpenParenError:
    return UnmatchedOpenParenError(
        message="Unmatched opening parenthesis",
        location=location,
        help_text="Add a closing ')' or remove the extra '('."
    )


def create_unmatched_close_paren_error(location: Optional[SourceLocation]) -> UnmatchedCloseParenError:
    return UnmatchedCloseParenError(
        message="Unmatched closing parenthesis",
        location=location,
        help_text="Add an opening '(' or remove the extra ')'."
    )
