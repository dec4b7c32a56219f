"""
Test suite for the shunting-yard converter.

Tests cover:
- Precedence and associativity
- Parenthesis handling and errors
- Unary negation placement

Author: xwest
"""

import unittest
from collections import Counter
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from shuntyard.lexer import tokenize, Token, TokenType
from shuntyard.converter import (
    ShuntingYard, convert, ConvertError, UnmatchedOpenParenError, UnmatchedCloseParenError
)
from shuntyard.formatting import format_tokens


class TestShuntingYard(unittest.TestCase):
    """Test cases for convert()."""

    def _postfix(self, expression: str) -> str:
        """Helper to convert an expression and render the result."""
        return format_tokens(convert(tokenize(expression)))

    def test_single_number(self):
        self.assertEqual(self._postfix("42"), "42")

    def test_empty(self):
        self.assertEqual(convert([]), [])

    def test_precedence(self):
        self.assertEqual(self._postfix("2+3*4"), "2 3 4 * +")
        self.assertEqual(self._postfix("2*3+4"), "2 3 * 4 +")

    def test_left_associativity(self):
        self.assertEqual(self._postfix("8-3-2"), "8 3 - 2 -")
        self.assertEqual(self._postfix("8/4/2"), "8 4 / 2 /")

    def test_right_associativity(self):
        self.assertEqual(self._postfix("2^3^2"), "2 3 2 ^ ^")

    def test_power_binds_tighter_than_multiply(self):
        self.assertEqual(self._postfix("2*3^2"), "2 3 2 ^ *")
        self.assertEqual(self._postfix("2^3*2"), "2 3 ^ 2 *")

    def test_parentheses_override_precedence(self):
        self.assertEqual(self._postfix("(2+3)*4"), "2 3 + 4 *")

    def test_nested_parentheses(self):
        self.assertEqual(self._postfix("((1+2)*(3-4))^2"), "1 2 + 3 4 - * 2 ^")

    def test_leading_negation(self):
        self.assertEqual(self._postfix("-3+5"), "3 (-) 5 +")

    def test_negation_after_operator(self):
        self.assertEqual(self._postfix("4*-2"), "4 2 (-) *")

    def test_negation_of_group(self):
        self.assertEqual(self._postfix("-(2+3)"), "2 3 + (-)")

    def test_double_negation(self):
        self.assertEqual(self._postfix("--3"), "3 (-) (-)")

    def test_negation_binds_tighter_than_power(self):
        self.assertEqual(self._postfix("-2^2"), "2 (-) 2 ^")

    def test_parentheses_are_consumed(self):
        postfix = convert(tokenize("(1+(2))"))
        self.assertFalse(any(t.type == TokenType.PARENTHESIS for t in postfix))

    def test_same_tokens_in_output(self):
        """Numbers and operators pass through unchanged, only reordered."""
        for expression in ["1+2*3-4/5^6", "(1+2)*-(3^4)", "--7-(8)"]:
            infix = tokenize(expression)
            postfix = convert(infix)
            expected = Counter(t for t in infix if t.type != TokenType.PARENTHESIS)
            self.assertEqual(Counter(postfix), expected, expression)

    def test_input_is_not_mutated(self):
        infix = tokenize("(1+2)*3")
        snapshot = list(infix)
        convert(infix)
        self.assertEqual(infix, snapshot)

    def test_repeatable(self):
        converter = ShuntingYard(tokenize("1+2*3"))
        self.assertEqual(converter.convert(), converter.convert())


class TestConverterErrors(unittest.TestCase):
    """Test cases for unbalanced parentheses."""

    def test_unmatched_open_paren(self):
        with self.assertRaises(UnmatchedOpenParenError) as ctx:
            convert(tokenize("(2+3"))
        self.assertEqual(ctx.exception.code, "C001")
        self.assertEqual(ctx.exception.location.offset, 0)

    def test_unmatched_close_paren(self):
        with self.assertRaises(UnmatchedCloseParenError) as ctx:
            convert(tokenize("2+3)"))
        self.assertEqual(ctx.exception.code, "C002")
        self.assertEqual(ctx.exception.location.offset, 3)

    def test_close_before_open(self):
        with self.assertRaises(UnmatchedCloseParenError):
            convert(tokenize(")("))

    def test_inner_open_left_unclosed(self):
        with self.assertRaises(UnmatchedOpenParenError):
            convert(tokenize("(1+(2)"))

    def test_errors_share_base_class(self):
        for expression in ["(1", "1)"]:
            with self.assertRaises(ConvertError):
                convert(tokenize(expression))


if __name__ == '__main__':
    unittest.main()
