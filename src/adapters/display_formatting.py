"""Shared display helpers for the console host.

Keeping the wording here lets the interactive session and the one-shot CLI
print identical lines.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from core.config import CustomDelimiterSettings
from core.errors import CalculatorError
from core.models import EvaluationResult

HEADER = "Console Calculator"
RULE = "==========================="

# Operation order and labels for the result block; labels are padded so the
# formulas line up.
RESULT_LABELS: List[Tuple[str, str]] = [
    ("add", "Addition:       "),
    ("subtract", "Subtraction:    "),
    ("multiply", "Multiplication: "),
    ("divide", "Division:       "),
]


def escape_newlines(value: str) -> str:
    """Show real newlines as the two characters backslash-n."""

    return value.replace("\n", "\\n")


def format_prompt(separators: Iterable[str]) -> str:
    shown = " or ".join(escape_newlines(separator) for separator in separators)
    return f"Enter numbers separated by: {shown}: "


def format_delimiter_hint(delimiter_settings: CustomDelimiterSettings) -> Optional[str]:
    """Describe the custom delimiter syntax, or None when it is disabled."""

    if not delimiter_settings.prefix:
        return None
    prefix = escape_newlines(delimiter_settings.prefix)
    hint = f"Custom delimiter: {prefix}<delimiter>\\n<numbers>"
    if delimiter_settings.support_brackets:
        hint += f" or {prefix}[<delimiter>][<delimiter>]\\n<numbers>"
    if delimiter_settings.max_length > 0:
        hint += f" (max {delimiter_settings.max_length} characters)"
    return hint


def format_result_line(label: str, result: EvaluationResult) -> str:
    return f"{label}{result.formula}"


def format_error(error: CalculatorError) -> str:
    return f"Error: {error.message}"
