"""
Tests for the shuntyard command-line front end.

Author: xwest
"""

import unittest
import sys
import os

from click.testing import CliRunner

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from shuntyard import __version__
from shuntyard.cli import cli, shunt_command, shunteval_command


class TestCli(unittest.TestCase):
    """Test the convert and eval commands."""

    def setUp(self):
        self.runner = CliRunner()

    def test_convert(self):
        result = self.runner.invoke(cli, ["convert", "2+3*4"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("input:  2 + 3 * 4", result.output)
        self.assertIn("output: 2 3 4 * +", result.output)
        self.assertNotIn("result:", result.output)

    def test_eval(self):
        result = self.runner.invoke(cli, ["eval", "(2+3)*4"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("output: 2 3 + 4 *", result.output)
        self.assertIn("result: 20", result.output)

    def test_eval_quiet(self):
        result = self.runner.invoke(cli, ["eval", "--quiet", "2^3^2"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "512")

    def test_expression_starting_with_minus(self):
        result = self.runner.invoke(cli, ["eval", "-3+5"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("input:  (-) 3 + 5", result.output)
        self.assertIn("result: 2", result.output)

    def test_double_dash_separator(self):
        result = self.runner.invoke(cli, ["eval", "-q", "--", "-7/2"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "-3")

    def test_lex_error_exits_non_zero(self):
        result = self.runner.invoke(cli, ["eval", "2+x"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unexpected character", result.output)

    def test_convert_error_exits_non_zero(self):
        result = self.runner.invoke(cli, ["convert", "(2+3"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unmatched opening parenthesis", result.output)
        # The input line is printed before conversion fails
        self.assertIn("input:  ( 2 + 3", result.output)

    def test_eval_error_exits_non_zero(self):
        result = self.runner.invoke(cli, ["eval", "1/0"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Division by zero", result.output)

    def test_missing_expression_is_usage_error(self):
        result = self.runner.invoke(cli, ["eval"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Usage", result.output)

    def test_verbose_flag(self):
        result = self.runner.invoke(cli, ["--verbose", "eval", "1+1"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("result: 2", result.output)

    def test_version(self):
        result = self.runner.invoke(cli, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)


class TestStandaloneCommands(unittest.TestCase):
    """Test the shunt and shunteval entry points."""

    def setUp(self):
        self.runner = CliRunner()

    def test_shunt(self):
        result = self.runner.invoke(shunt_command, ["8-3-2"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("output: 8 3 - 2 -", result.output)

    def test_shunteval(self):
        result = self.runner.invoke(shunteval_command, ["8-3-2"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("result: 3", result.output)

    def test_shunteval_trailing_operands(self):
        result = self.runner.invoke(shunteval_command, ["(1)(2)"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Remaining operands", result.output)


if __name__ == '__main__':
    unittest.main()
