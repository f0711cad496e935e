"""Interactive read-eval-print loop for the calculator.

Each line read from the console is evaluated with every operation in turn.
A rejected input prints one error line and the loop carries on; the loop
only ends when the console reports end of input.
"""

from __future__ import annotations

import logging
from typing import List

from adapters.display_formatting import (
    HEADER,
    RESULT_LABELS,
    RULE,
    format_delimiter_hint,
    format_error,
    format_prompt,
    format_result_line,
)
from core.calculator import Calculator
from core.models import Evaluation
from core.ports import ConsolePort

LOGGER = logging.getLogger(__name__)


def evaluate_all(calculator: Calculator, raw: str) -> List[Evaluation]:
    """Run every operation in display order, stopping at the first error."""

    evaluations: List[Evaluation] = []
    for operation, _ in RESULT_LABELS:
        evaluation = calculator.evaluate(operation, raw)
        evaluations.append(evaluation)
        if not evaluation.ok:
            break
    return evaluations


def render_evaluations(evaluations: List[Evaluation]) -> List[str]:
    labels = dict(RESULT_LABELS)
    lines: List[str] = []
    for evaluation in evaluations:
        if evaluation.ok:
            lines.append(format_result_line(labels[evaluation.operation], evaluation.result))
        else:
            lines.append(format_error(evaluation.error))
    return lines


class InteractiveSession:
    """Drives the calculator from a ConsolePort."""

    def __init__(self, calculator: Calculator, console: ConsolePort) -> None:
        self._calculator = calculator
        self._console = console

    def run(self) -> int:
        """Loop until end of input; return the number of inputs handled."""

        settings = self._calculator.settings
        self._console.write_line(HEADER)
        self._console.write_line(RULE)
        hint = format_delimiter_hint(settings.custom_delimiter)
        if hint:
            self._console.write_line(hint)
        self._console.write_line("")

        prompt = format_prompt(settings.separators)
        handled = 0
        while True:
            self._console.write(prompt)
            raw = self._console.read_line()
            if raw is None:
                LOGGER.info("End of input after %s entries", handled)
                return handled

            for line in render_evaluations(evaluate_all(self._calculator, raw)):
                self._console.write_line(line)
            handled += 1
            self._console.write_line("")
