from __future__ import annotations

from typing import Optional

from core.calculator import Calculator
from core.config import CalculatorSettings
from session import InteractiveSession, evaluate_all, render_evaluations


class FakeConsole:
    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.output: list[str] = []
        self.prompts: list[str] = []

    def write_line(self, message: str) -> None:
        self.output.append(message)

    def write(self, message: str) -> None:
        self.prompts.append(message)

    def read_line(self) -> Optional[str]:
        if not self._lines:
            return None
        return self._lines.pop(0)

    def clear(self) -> None:
        self.output.clear()


def test_session_prints_all_operations() -> None:
    console = FakeConsole(["10,2"])
    handled = InteractiveSession(Calculator(CalculatorSettings()), console).run()

    assert handled == 1
    assert "Addition:       10 + 2 = 12" in console.output
    assert "Subtraction:    10 - 2 = 8" in console.output
    assert "Multiplication: 10 * 2 = 20" in console.output
    assert "Division:       10 / 2 = 5" in console.output


def test_session_header_and_prompt() -> None:
    console = FakeConsole([])
    InteractiveSession(Calculator(CalculatorSettings()), console).run()

    assert console.output[0] == "Console Calculator"
    assert console.output[1].startswith("===")
    assert console.output[2].startswith("Custom delimiter: //")
    assert console.prompts == ["Enter numbers separated by: , or \\n: "]


def test_session_reports_error_and_keeps_going() -> None:
    settings = CalculatorSettings(allow_negative_numbers=False)
    console = FakeConsole(["1,-2", "4,2"])
    handled = InteractiveSession(Calculator(settings), console).run()

    assert handled == 2
    assert "Error: Negative numbers are not allowed: -2" in console.output
    assert not any(line.startswith("Addition:       1") for line in console.output)
    assert "Addition:       4 + 2 = 6" in console.output
    assert len(console.prompts) == 3


def test_divide_by_zero_stops_after_other_operations() -> None:
    evaluations = evaluate_all(Calculator(CalculatorSettings()), "10,0")
    lines = render_evaluations(evaluations)

    assert [evaluation.operation for evaluation in evaluations] == [
        "add",
        "subtract",
        "multiply",
        "divide",
    ]
    assert lines[-1] == "Error: Division by zero is not allowed"
    assert lines[0] == "Addition:       10 + 0 = 10"


def test_error_stops_remaining_operations() -> None:
    evaluations = evaluate_all(Calculator(CalculatorSettings(max_numbers_allowed=1)), "1,2")
    assert len(evaluations) == 1
    assert not evaluations[0].ok
