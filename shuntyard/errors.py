"""
Shared error handling for the shuntyard pipeline.

Every stage raises a subclass of ShuntingError. Each error carries a
Diagnostic with a stable code, an optional source location and a help
line, so the command-line front end can render them uniformly.

Author: xwest
"""

from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from .lexer.tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single error report produced by one of the pipeline stages."""
    message: str
    code: Optional[str] = None
    location: Optional["SourceLocation"] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        prefix = f"error[{self.code}]" if self.code else "error"
        result = f"{prefix}: {self.message}"
        if self.location is not None:
            result += f"\n  --> {self.location}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class ShuntingError(Exception):
    """
    Root of every error raised by the lexer, converter and evaluator.

    Errors abort the current call immediately; there is no recovery and
    no partial result.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        location: Optional["SourceLocation"] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            code=code,
            location=location,
            help_text=help_text
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> Optional["SourceLocation"]:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)
