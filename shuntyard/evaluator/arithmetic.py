"""
Signed 64-bit integer arithmetic.

Python ints are unbounded, so every result is wrapped back into the
64-bit two's-complement range the way a machine integer would.

Author: xwest
"""

from ..lexer.tokens import wrap_int64


class DivideByZero(ArithmeticError):
    """Raised by the helpers below; the evaluator turns it into a DivisionByZeroError."""


def add(a: int, b: int) -> int:
    return wrap_int64(a + b)


def subtract(a: int, b: int) -> int:
    return wrap_int64(a - b)


def multiply(a: int, b: int) -> int:
    return wrap_int64(a * b)


def negate(a: int) -> int:
    # -INT64_MIN wraps back to INT64_MIN
    return wrap_int64(-a)


def truncating_divide(a: int, b: int) -> int:
    """
    Integer division rounding toward zero.

    Python's // floors, so 7 // -2 would be -4 where -3 is wanted.
    INT64_MIN / -1 wraps to INT64_MIN.
    """
    if b == 0:
        raise DivideByZero("division by zero")

    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return wrap_int64(quotient)


def integer_power(base: int, exponent: int) -> int:
    """
    Raise base to an integer power by repeated squaring.

    Negative exponents give the truncated real result: 1 for base 1,
    +/-1 for base -1, 0 for any other non-zero base. Zero to a negative
    power raises DivideByZero.
    """
    if exponent < 0:
        if base == 0:
            raise DivideByZero("zero raised to a negative power")
        if base == 1:
            return 1
        if base == -1:
            return -1 if exponent % 2 else 1
        return 0

    result = 1
    base = wrap_int64(base)
    while exponent:
        if exponent & 1:
            result = wrap_int64(result * base)
        base = wrap_int64(base * base)
        exponent >>= 1
    return result
