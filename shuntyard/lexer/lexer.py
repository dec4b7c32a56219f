"""
shuntyard lexer - turns an infix expression into tokens

Scans left to right. A maximal run of digits becomes one NUMBER token,
every other recognised character maps straight onto a token through
CHAR_TOKENS. A '-' is negation whenever an operand is expected next
(start of input, after an operator, after '('), subtraction otherwise.

Author: xwest
"""

from typing import List

from .tokens import (
    Token, TokenType, SourceLocation, Operator, Unary, CHAR_TOKENS
)
from .errors import create_unexpected_character_error


class Lexer:
    """
    Arithmetic expression lexer.

    Holds the scan position for a single pass over one expression.
    Fails on the first unrecognised character.
    """

    def __init__(self, source: str, source_name: str = "<expression>"):
        """
        Initialize the lexer with an expression.

        Args:
            source: Infix expression text
            source_name: Name used for the input in diagnostics
        """
        self.source = source
        self.source_name = source_name
        self.pos = 0
        self.tokens: List[Token] = []

        # True while the next token should be an operand
        self.expecting_operand = True

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire expression.

        Returns:
            List of tokens in left-to-right order

        Raises:
            UnexpectedCharacterError: On any character outside 0-9 + - * / ^ ( )
        """
        self.pos = 0
        self.tokens = []
        self.expecting_operand = True

        while self.pos < len(self.source):
            token = self._next_token()
            self.tokens.append(token)

        return self.tokens

    def _next_token(self) -> Token:
        """Read one token starting at the current position."""
        current_char = self.source[self.pos]
        location = self._location()

        if current_char in "0123456789":
            return self._tokenize_number(location)

        template = CHAR_TOKENS.get(current_char)
        if template is None:
            raise create_unexpected_character_error(current_char, location)
        self.pos += 1

        if template.type == TokenType.BINARY_OPERATOR:
            if template.value == Operator.SUB and self.expecting_operand:
                # Stays True: "--3" is double negation
                return Token.unary(Unary.NEGATE, location)
            self.expecting_operand = True
            return Token.operator(template.value, location)

        # Parenthesis
        self.expecting_operand = template.is_open_paren
        return Token.paren(template.value, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize a run of decimal digits. Values outside 64 bits wrap."""
        value = 0
        while self.pos < len(self.source) and self.source[self.pos] in "0123456789":
            value = value * 10 + (ord(self.source[self.pos]) - ord("0"))
            self.pos += 1

        self.expecting_operand = False
        return Token.number(value, location)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.source_name, self.pos + 1, self.pos)


def tokenize(source: str, source_name: str = "<expression>") -> List[Token]:
    """
    Convenience function to tokenize an expression string.

    Args:
        source: Infix expression text
        source_name: Name used for the input in diagnostics

    Returns:
        List of tokens

    Raises:
        UnexpectedCharacterError: If lexing fails
    """
    return Lexer(source, source_name).tokenize()
