"""
Stack-machine evaluation of postfix token sequences.

Numbers are pushed; an operator pops its operands and pushes the result.
For binary operators the first pop is the right operand. Exactly one
value must remain at the end.

Author: xwest
"""

from typing import Callable, Dict, List

from ..lexer.tokens import Token, TokenType, Operator, Unary
from . import arithmetic
from .errors import (
    create_stack_underflow_error, create_trailing_operands_error,
    create_division_by_zero_error, create_unknown_operator_error
)


BINARY_FUNCTIONS: Dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: arithmetic.add,
    Operator.SUB: arithmetic.subtract,
    Operator.MUL: arithmetic.multiply,
    Operator.DIV: arithmetic.truncating_divide,
    Operator.POW: arithmetic.integer_power,
}

UNARY_FUNCTIONS: Dict[Unary, Callable[[int], int]] = {
    Unary.NEGATE: arithmetic.negate,
}


class PostfixEvaluator:
    """
    Postfix (Reverse Polish) evaluator.

    The value stack exists for a single call to evaluate() only.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize the evaluator with a postfix token sequence.

        Args:
            tokens: Tokens in postfix order, as produced by the converter
        """
        self.tokens = tokens
        self.stack: List[int] = []

    def evaluate(self) -> int:
        """
        Reduce the postfix sequence to a single integer.

        Returns:
            The value of the expression

        Raises:
            StackUnderflowError: An operator has too few operands, or no value is left
            TrailingOperandsError: More than one value is left
            DivisionByZeroError: Division by zero, or zero to a negative power
            UnknownOperatorError: A token of a kind the evaluator cannot handle
        """
        self.stack = []

        for token in self.tokens:
            if token.type == TokenType.NUMBER:
                self.stack.append(token.value)
            elif token.type == TokenType.BINARY_OPERATOR:
                self._apply_binary(token)
            elif token.type == TokenType.UNARY_OPERATOR:
                self._apply_unary(token)
            else:
                raise create_unknown_operator_error(token)

        if not self.stack:
            raise create_stack_underflow_error()
        if len(self.stack) > 1:
            raise create_trailing_operands_error(len(self.stack))

        return self.stack.pop()

    def _apply_binary(self, token: Token):
        function = BINARY_FUNCTIONS.get(token.value)
        if function is None:
            raise create_unknown_operator_error(token)
        if len(self.stack) < 2:
            raise create_stack_underflow_error(token)

        # remember to first pop b then a
        b = self.stack.pop()
        a = self.stack.pop()
        try:
            self.stack.append(function(a, b))
        except arithmetic.DivideByZero as exc:
            raise create_division_by_zero_error(token) from exc

    def _apply_unary(self, token: Token):
        function = UNARY_FUNCTIONS.get(token.value)
        if function is None:
            raise create_unknown_operator_error(token)
        if not self.stack:
            raise create_stack_underflow_error(token)

        self.stack.append(function(self.stack.pop()))


def evaluate(tokens: List[Token]) -> int:
    """
    Convenience function to evaluate a postfix token sequence.

    Args:
        tokens: Tokens in postfix order

    Returns:
        The integer result

    Raises:
        EvalError: If the sequence is malformed or divides by zero
    """
    return PostfixEvaluator(tokens).evaluate()
