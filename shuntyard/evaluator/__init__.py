"""
shuntyard Evaluator Package

Evaluates postfix token sequences on a value stack using signed 64-bit
integer arithmetic.

Author: xwest
"""

from .evaluator import PostfixEvaluator, evaluate
from .errors import (
    EvalError, StackUnderflowError, TrailingOperandsError,
    DivisionByZeroError, UnknownOperatorError
)

__all__ = [
    "PostfixEvaluator",
    "evaluate",
    "EvalError",
    "StackUnderflowError",
    "TrailingOperandsError",
    "DivisionByZeroError",
    "UnknownOperatorError",
]
