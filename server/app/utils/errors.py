"""
Error types raised by the number-theory functions and the analysis service.
"""


class NumberTheoryError(Exception):
    """Base class for all calculator errors."""


class InvalidInputError(NumberTheoryError):
    """Raw user input is blank, non-numeric, not positive or out of range."""


class DomainError(NumberTheoryError, ValueError):
    """A function was called with an argument outside its mathematical domain."""


class FactorialTooLargeError(DomainError):
    """Factorial argument exceeds the configured computation limit."""

    def __init__(self, n: int, limit: int):
        self.n = n
        self.limit = limit
        super().__init__(f"Factorial is too large to compute for n > {limit}.")
