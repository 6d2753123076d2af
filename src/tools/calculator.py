"""Calculator tools implementation."""

import math
from typing import Optional, Union

from .errors import (
    DivisionByZeroError,
    InvalidFactorialArgumentError,
    NegativeRadicandError,
)

Number = Union[int, float]

# Largest n whose factorial is finite as a float
MAX_FINITE_FACTORIAL = 170


class CalculatorTools:
    """Calculator operations for the MCP server."""

    def __init__(self, factorial_limit: Optional[int] = None):
        self.factorial_limit = factorial_limit

    def add(self, a: Number, b: Number) -> Number:
        """Add two numbers together."""
        return a + b

    def subtract(self, a: Number, b: Number) -> Number:
        """Subtract second number from first."""
        return a - b

    def multiply(self, a: Number, b: Number) -> Number:
        """Multiply two numbers."""
        return a * b

    def divide(self, a: Number, b: Number) -> float:
        """Divide first number by second."""
        if b == 0:
            raise DivisionByZeroError("Division by zero is not allowed")
        return a / b

    def power(self, a: Number, b: Number) -> float:
        """Raise a to the power b.

        Follows IEEE float semantics instead of raising: overflow gives an
        infinity and an undefined result (e.g. a negative base with a
        fractional exponent) gives NaN.
        """
        try:
            return math.pow(a, b)
        except OverflowError:
            negative = a < 0 and float(b).is_integer() and int(b) % 2 == 1
            return -math.inf if negative else math.inf
        except ValueError:
            # math.pow rejects 0 ** negative; IEEE gives infinity there
            if a == 0 and b < 0:
                return math.inf
            return math.nan

    def sqrt(self, a: Number) -> float:
        """Non-negative square root of a."""
        if a < 0:
            raise NegativeRadicandError("Cannot take the square root of a negative number")
        return math.sqrt(a)

    def factorial(self, n: Number) -> Number:
        """Product 1..n, with 0! == 1.

        Exact up to 170!, past that the result overflows to infinity like a
        float would. No upper bound unless factorial_limit is set.
        """
        if isinstance(n, float) and not n.is_integer():
            raise InvalidFactorialArgumentError("Factorial is only defined for non-negative integers")
        if n < 0:
            raise InvalidFactorialArgumentError("Factorial is only defined for non-negative integers")
        if self.factorial_limit is not None and n > self.factorial_limit:
            raise InvalidFactorialArgumentError(
                f"Factorial input must not exceed {self.factorial_limit}, got: {format_number(n)}"
            )
        if n > MAX_FINITE_FACTORIAL:
            return math.inf
        return math.factorial(int(n))


def format_number(value: Number) -> str:
    """Render a number for result text.

    Integral floats drop the trailing ``.0`` so ``10 / 2`` reads ``5``.
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
    return repr(value)
