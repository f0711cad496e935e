"""Errors raised by the calculator engine.

Every error is fatal to the single evaluation that raised it. Malformed or
blank tokens are not errors; they count as zero.
"""

from __future__ import annotations

from typing import Iterable, List


class CalculatorError(Exception):
    """Base class for rejected evaluations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnclosedBracketError(CalculatorError):
    def __init__(self, section: str) -> None:
        super().__init__(f"Custom delimiter is missing a closing ']': {section}")
        self.section = section


class DelimiterTooLongError(CalculatorError):
    def __init__(self, delimiter: str, max_length: int) -> None:
        super().__init__(f"Custom delimiter exceeds maximum length of {max_length}")
        self.delimiter = delimiter
        self.max_length = max_length


class NegativeNumbersDisallowedError(CalculatorError):
    """Carries every offending value in the order it was encountered."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values: List[int] = list(values)
        super().__init__(f"Negative numbers are not allowed: {', '.join(map(str, self.values))}")


class TooManyNumbersError(CalculatorError):
    def __init__(self, limit: int, count: int) -> None:
        super().__init__(f"No more than {limit} numbers are allowed")
        self.limit = limit
        self.count = count


class DivideByZeroError(CalculatorError):
    def __init__(self) -> None:
        super().__init__("Division by zero is not allowed")
