"""Input parsing and validation (core domain).

The pipeline runs in a fixed order:
1) Turn literal "\\n" sequences into real newlines
2) Pull an optional custom delimiter section off the front of the input
3) Split on the effective separators (exact literal matching)
4) Convert tokens to integers; blank or malformed tokens count as zero
5) Reject disallowed negatives, then oversized inputs
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from core.config import CalculatorSettings, CustomDelimiterSettings
from core.errors import (
    DelimiterTooLongError,
    NegativeNumbersDisallowedError,
    TooManyNumbersError,
    UnclosedBracketError,
)
from core.models import ParsedNumbers

LOGGER = logging.getLogger(__name__)

ESCAPED_NEWLINE = "\\n"
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def normalize_input(raw: str) -> str:
    """Replace the two-character sequence backslash-n with a newline."""

    return raw.replace(ESCAPED_NEWLINE, "\n")


def _bracketed_delimiters(section: str) -> List[str]:
    """Return the contents of every [...] block, left to right."""

    delimiters: List[str] = []
    position = 0
    while True:
        start = section.find("[", position)
        if start == -1:
            return delimiters
        end = section.find("]", start + 1)
        if end == -1:
            raise UnclosedBracketError(section)
        delimiters.append(section[start + 1 : end])
        position = end + 1


def extract_custom_delimiters(
    text: str, delimiter_settings: CustomDelimiterSettings
) -> Tuple[List[str], str]:
    """Split a leading delimiter section off the input.

    Returns (custom_delimiters, remaining_input). When no section is present
    the list is empty and the input comes back unchanged.
    """

    prefix = delimiter_settings.prefix
    if not prefix or not text.startswith(prefix):
        return [], text

    newline_index = text.find("\n")
    if newline_index <= len(prefix):
        return [], text

    section = text[len(prefix) : newline_index]
    remainder = text[newline_index + 1 :]

    if delimiter_settings.support_brackets and "[" in section:
        bracketed = _bracketed_delimiters(section)
        if bracketed:
            return bracketed, remainder

    max_length = delimiter_settings.max_length
    if max_length > 0 and len(section) > max_length:
        raise DelimiterTooLongError(section, max_length)
    return [section], remainder


def split_tokens(text: str, separators: Sequence[str]) -> List[str]:
    """Split on any of the separators, keeping empty tokens between them.

    At each position the first separator in order that matches wins.
    Empty separators are ignored.
    """

    usable = [separator for separator in separators if separator]
    if not usable:
        return [text]
    pattern = "|".join(re.escape(separator) for separator in usable)
    return re.split(pattern, text)


def parse_integer(token: str) -> Optional[int]:
    """Return the token as a 32-bit int, or None when it is not one."""

    trimmed = token.strip()
    if not _INTEGER_RE.fullmatch(trimmed):
        return None
    # More than ten significant digits never fits in 32 bits.
    if len(trimmed.lstrip("+-").lstrip("0")) > 10:
        return None
    value = int(trimmed)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def convert_tokens(tokens: Sequence[str], settings: CalculatorSettings) -> ParsedNumbers:
    """Map tokens to the number sequence used by every operation."""

    numbers: List[int] = []
    negatives: List[int] = []
    threshold = settings.skip_numbers_greater_than

    for token in tokens:
        value = parse_integer(token)
        if value is None:
            numbers.append(0)
            continue

        # Disallowed negatives are recorded but still flow into the sequence.
        if value < 0 and not settings.allow_negative_numbers:
            negatives.append(value)

        if threshold > 0 and value > threshold:
            numbers.append(0)
        else:
            numbers.append(value)

    return ParsedNumbers(numbers=tuple(numbers), negatives=tuple(negatives))


def validate(parsed: ParsedNumbers, settings: CalculatorSettings) -> None:
    """Raise when the parsed numbers break a configured rule."""

    if not settings.allow_negative_numbers and parsed.negatives:
        raise NegativeNumbersDisallowedError(parsed.negatives)

    limit = settings.max_numbers_allowed
    if limit > 0 and len(parsed.numbers) > limit:
        raise TooManyNumbersError(limit, len(parsed.numbers))


def parse_numbers(raw: str, settings: CalculatorSettings) -> Tuple[int, ...]:
    """Run the full parsing pipeline and return the validated numbers."""

    text = normalize_input(raw)
    custom, text = extract_custom_delimiters(text, settings.custom_delimiter)
    separators = list(settings.separators) + custom
    LOGGER.debug("Splitting on separators %r", separators)

    parsed = convert_tokens(split_tokens(text, separators), settings)
    validate(parsed, settings)
    LOGGER.debug("Parsed numbers %s", parsed.numbers)
    return parsed.numbers
