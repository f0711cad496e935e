"""Core configuration dataclasses.

Parsing config.json happens in settings.py; these dataclasses define the
shape the engine expects so the host can build them once and share them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

DEFAULT_SEPARATORS: Tuple[str, ...] = (",", "\n")
DEFAULT_PREFIX = "//"


@dataclass(frozen=True)
class CustomDelimiterSettings:
    """How a per-input delimiter section is recognized."""

    prefix: str = DEFAULT_PREFIX
    # 0 means unlimited.
    max_length: int = 0
    support_brackets: bool = True


@dataclass(frozen=True)
class CalculatorSettings:
    """Settings for one calculator; never mutated after load."""

    # 0 means unlimited.
    max_numbers_allowed: int = 0
    separators: Tuple[str, ...] = DEFAULT_SEPARATORS
    allow_negative_numbers: bool = True
    # 0 means no limit.
    skip_numbers_greater_than: int = 0
    custom_delimiter: CustomDelimiterSettings = field(default_factory=CustomDelimiterSettings)
