"""Calculator operations (core domain).

All four operations share the parsing pipeline in core.parser and differ
only in the final fold and the operator symbol shown in the formula.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Dict, Sequence

from core.config import CalculatorSettings
from core.errors import CalculatorError, DivideByZeroError
from core.models import Evaluation, EvaluationResult
from core.parser import parse_numbers

LOGGER = logging.getLogger(__name__)


def _truncating_divide(dividend: int, divisor: int) -> int:
    # Python's // floors; the calculator truncates toward zero.
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def _sum(numbers: Sequence[int]) -> int:
    return sum(numbers)


def _difference(numbers: Sequence[int]) -> int:
    return numbers[0] - sum(numbers[1:])


def _product(numbers: Sequence[int]) -> int:
    return reduce(lambda left, right: left * right, numbers, 1)


def _quotient(numbers: Sequence[int]) -> int:
    divisors = numbers[1:]
    if any(divisor == 0 for divisor in divisors):
        raise DivideByZeroError()
    return reduce(_truncating_divide, divisors, numbers[0])


@dataclass(frozen=True)
class Operation:
    """A named fold plus the symbol used to render it."""

    name: str
    symbol: str
    fold: Callable[[Sequence[int]], int]


OPERATIONS: Dict[str, Operation] = {
    "add": Operation("add", "+", _sum),
    "subtract": Operation("subtract", "-", _difference),
    "multiply": Operation("multiply", "*", _product),
    "divide": Operation("divide", "/", _quotient),
}


def format_formula(numbers: Sequence[int], symbol: str, result: int) -> str:
    """Render "a <op> b <op> c = result"; a single number renders as "a = a"."""

    return f" {symbol} ".join(str(number) for number in numbers) + f" = {result}"


class Calculator:
    """Evaluates delimited number strings against one settings object."""

    def __init__(self, settings: CalculatorSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> CalculatorSettings:
        return self._settings

    def add(self, raw: str) -> EvaluationResult:
        return self._apply(OPERATIONS["add"], raw)

    def subtract(self, raw: str) -> EvaluationResult:
        return self._apply(OPERATIONS["subtract"], raw)

    def multiply(self, raw: str) -> EvaluationResult:
        return self._apply(OPERATIONS["multiply"], raw)

    def divide(self, raw: str) -> EvaluationResult:
        """Left-to-right integer division, truncating toward zero.

        Raises DivideByZeroError when any number after the first is zero.
        """

        return self._apply(OPERATIONS["divide"], raw)

    def evaluate(self, operation: str, raw: str) -> Evaluation:
        """Run one operation and report the outcome instead of raising.

        Only calculator errors are captured; an unknown operation name is a
        programming error and raises ValueError.
        """

        if operation not in OPERATIONS:
            raise ValueError(f"Unsupported operation: {operation}")
        try:
            result = self._apply(OPERATIONS[operation], raw)
        except CalculatorError as exc:
            LOGGER.info("Rejected %s for %r: %s", operation, raw, exc.message)
            return Evaluation(operation=operation, error=exc)
        return Evaluation(operation=operation, result=result)

    def _apply(self, operation: Operation, raw: str) -> EvaluationResult:
        numbers = parse_numbers(raw, self._settings)
        # The same sequence feeds the fold and the formula.
        result = operation.fold(numbers)
        return EvaluationResult(
            formula=format_formula(numbers, operation.symbol, result),
            result=result,
        )
