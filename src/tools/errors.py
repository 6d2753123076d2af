"""Error types raised while validating and computing calculator operations."""


class CalculatorError(Exception):
    """Base class for per-invocation failures reported back to the client."""


class ValidationError(CalculatorError):
    """An argument is missing or is not a number."""


class DivisionByZeroError(CalculatorError):
    """Divisor is zero."""


class NegativeRadicandError(CalculatorError):
    """Square root of a negative number."""


class InvalidFactorialArgumentError(CalculatorError):
    """Factorial input is negative, not an integer, or above a configured limit."""


class UnknownOperationError(CalculatorError):
    def __init__(self, name: str):
        super().__init__(f"unknown tool: {name}")
        self.name = name
