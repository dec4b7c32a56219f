"""
Shunting-yard conversion from infix to postfix (Reverse Polish) order.

Dijkstra's algorithm with one operator stack. Numbers go straight to the
output; operators wait on the stack until an operator that binds less
tightly, a closing parenthesis or the end of input releases them.

Author: xwest
"""

from typing import List

from ..lexer.tokens import Token, TokenType, PRECEDENCE, RIGHT_ASSOCIATIVE
from .errors import (
    create_unmatched_open_paren_error, create_unmatched_close_paren_error
)


class ShuntingYard:
    """
    Infix to postfix converter.

    The operator stack holds binary operators, unary operators and open
    parentheses. It lives for a single call to convert() only.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize the converter with an infix token sequence.

        Args:
            tokens: Tokens in infix order, as produced by the lexer
        """
        self.tokens = tokens
        self.output: List[Token] = []
        self.stack: List[Token] = []

    def convert(self) -> List[Token]:
        """
        Rewrite the infix tokens into postfix order.

        Returns:
            New list of tokens in postfix order, parentheses removed

        Raises:
            UnmatchedCloseParenError: A ')' has no matching '('
            UnmatchedOpenParenError: A '(' is still open at end of input
        """
        self.output = []
        self.stack = []

        for token in self.tokens:
            if token.type == TokenType.NUMBER:
                self.output.append(token)
            elif token.type == TokenType.BINARY_OPERATOR:
                self._shunt_operator(token)
            elif token.type == TokenType.UNARY_OPERATOR:
                # Prefix operator: nothing to its left can be released yet
                self.stack.append(token)
            elif token.is_open_paren:
                self.stack.append(token)
            else:
                self._close_paren(token)

        # Drain what is left
        while self.stack:
            top = self.stack.pop()
            if top.is_open_paren:
                raise create_unmatched_open_paren_error(top.location)
            self.output.append(top)

        return self.output

    def _shunt_operator(self, token: Token):
        """Release operators that bind at least as tightly, then push."""
        while self.stack and self._releases(self.stack[-1], token):
            self.output.append(self.stack.pop())
        self.stack.append(token)

    @staticmethod
    def _releases(top: Token, incoming: Token) -> bool:
        """Check whether the stack top must be output before `incoming` is pushed."""
        if top.type == TokenType.UNARY_OPERATOR:
            # Negation binds tighter than every binary operator
            return True
        if top.type != TokenType.BINARY_OPERATOR:
            return False

        top_prec = PRECEDENCE[top.value]
        incoming_prec = PRECEDENCE[incoming.value]
        if top_prec > incoming_prec:
            return True
        return top_prec == incoming_prec and not RIGHT_ASSOCIATIVE[incoming.value]

    def _close_paren(self, token: Token):
        """Pop operators to the output until the matching '(' is found."""
        while self.stack and not self.stack[-1].is_open_paren:
            self.output.append(self.stack.pop())

        if not self.stack:
            raise create_unmatched_close_paren_error(token.location)

        # Discard the '('
        self.stack.pop()


def convert(tokens: List[Token]) -> List[Token]:
    """
    Convenience function to convert infix tokens to postfix.

    Args:
        tokens: Tokens in infix order

    Returns:
        Tokens in postfix order

    Raises:
        ConvertError: On unbalanced parentheses
    """
    return ShuntingYard(tokens).convert()
