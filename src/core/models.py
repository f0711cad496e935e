"""Core domain models.

These dataclasses are shared between the engine and the host so neither
side depends on the other's internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from core.errors import CalculatorError


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of one successful operation."""

    formula: str
    result: int


@dataclass(frozen=True)
class ParsedNumbers:
    """Numbers after zero substitution, plus raw negatives for error reporting."""

    numbers: Tuple[int, ...]
    negatives: Tuple[int, ...]


@dataclass(frozen=True)
class Evaluation:
    """Either a result or the error that rejected the input."""

    operation: str
    result: Optional[EvaluationResult] = None
    error: Optional[CalculatorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
