"""
Error handling for the postfix evaluator.

Author: xwest
"""

from typing import Optional

from ..errors import ShuntingError
from ..lexer.tokens import SourceLocation, Token


class EvalError(ShuntingError):
    """Raised when a postfix sequence cannot be reduced to a single value."""


class StackUnderflowError(EvalError):
    """An operator found fewer operands than it needs, or nothing was left to return."""

    def __init__(self, message: str, location: Optional[SourceLocation] = None, help_text: Optional[str] = None):
        super().__init__(message, code="E001", location=location, help_text=help_text)


class TrailingOperandsError(EvalError):
    """More than one value remained after the last token."""

    def __init__(self, message: str, remaining: int, help_text: Optional[str] = None):
        super().__init__(message, code="E002", help_text=help_text)
        self.remaining = remaining


class DivisionByZeroError(EvalError):
    """Division by zero, or zero raised to a negative power."""

    def __init__(self, message: str, location: Optional[SourceLocation] = None, help_text: Optional[str] = None):
        super().__init__(message, code="E003", location=location, help_text=help_text)


class UnknownOperatorError(EvalError):
    """A token the evaluator has no rule for, such as a stray parenthesis."""

    def __init__(self, message: str, token: Token, help_text: Optional[str] = None):
        super().__init__(message, code="E004", location=token.location, help_text=help_text)
        self.token = token


ERROR_CODES = {
    "E001": "Stack underflow",
    "E002": "Trailing operands",
    "E003": "Division by zero",
    "E004": "Unknown operator",
}


def create_stack_underflow_error(token: Optional[Token] = None) -> StackUnderflowError:
    """Create an error for an operator (or the final result) with no operand available."""
    if token is None:
        return StackUnderflowError(
            message="Stack empty: the expression produced no value",
            help_text="The expression is empty or consists only of operators."
        )
    return StackUnderflowError(
        message=f"Stack empty: operator '{token}' is missing an operand",
        location=token.location,
        help_text="Every operator needs a number on each side (or after it, for negation)."
    )


def create_trailing_operands_error(remaining: int) -> TrailingOperandsError:
    return TrailingOperandsError(
        message=f"Remaining operands: {remaining} values left on the stack",
        remaining=remaining,
        help_text="Two numbers are next to each other without an operator between them."
    )


def create_division_by_zero_error(token: Optional[Token] = None) -> DivisionByZeroError:
    return DivisionByZeroError(
        message="Division by zero",
        location=token.location if token is not None else None
    )


def create_unknown_operator_error(token: Token) -> UnknownOperatorError:
    return UnknownOperatorError(
        message=f"Unknown operator: {token!r}",
        token=token,
        help_text="Postfix sequences may only contain numbers and operators."
    )
