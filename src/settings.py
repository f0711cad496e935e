"""Configuration loading for consolecalc.

All user-editable settings (separators, limits, custom delimiter syntax,
logging) live in a single JSON file so behaviour can change without
touching Python.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional

from core.config import (
    DEFAULT_PREFIX,
    DEFAULT_SEPARATORS,
    CalculatorSettings,
    CustomDelimiterSettings,
)

LOGGER = logging.getLogger(__name__)

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Default location; overridden by --config or the CONSOLECALC_CONFIG variable.
CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")
CONFIG_ENV = "CONSOLECALC_CONFIG"


def resolve_config_path(cli_path: Optional[str] = None) -> str:
    """Pick the config file: command line first, then environment, then default."""

    if cli_path:
        return cli_path
    return os.getenv(CONFIG_ENV) or CONFIG_PATH


def load_json_config(path: str) -> dict:
    """Load the config file as a dict."""

    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Config file is not valid JSON: {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return data


def _non_negative_int(section: dict, key: str, default: int) -> int:
    value = section.get(key, default)
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{key} must be 0 or greater, got {value}")
    return value


def _bool(section: dict, key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def _separators(section: dict) -> tuple[str, ...]:
    raw = section.get("Separators", list(DEFAULT_SEPARATORS))
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ValueError(f"Separators must be a list of strings, got {raw!r}")
    separators = tuple(item for item in raw if item)
    if len(separators) != len(raw):
        LOGGER.warning("Ignoring empty entries in Separators")
    return separators


def build_calculator_settings(config: dict[str, Any]) -> CalculatorSettings:
    """Validate the CalculatorSettings section and build the frozen settings."""

    section = config.get("CalculatorSettings", {})
    if not isinstance(section, dict):
        raise ValueError("CalculatorSettings must be an object")

    delimiter_section = section.get("CustomDelimiter", {})
    if not isinstance(delimiter_section, dict):
        raise ValueError("CustomDelimiter must be an object")
    prefix = delimiter_section.get("Prefix", DEFAULT_PREFIX)
    if prefix is None:
        prefix = ""
    if not isinstance(prefix, str):
        raise ValueError(f"Prefix must be a string, got {prefix!r}")

    return CalculatorSettings(
        max_numbers_allowed=_non_negative_int(section, "MaxNumbersAllowed", 0),
        separators=_separators(section),
        allow_negative_numbers=_bool(section, "AllowNegativeNumbers", True),
        skip_numbers_greater_than=_non_negative_int(section, "SkipNumbersGreaterThan", 0),
        custom_delimiter=CustomDelimiterSettings(
            prefix=prefix,
            max_length=_non_negative_int(delimiter_section, "MaxLength", 0),
            support_brackets=_bool(delimiter_section, "SupportBrackets", True),
        ),
    )


def load_settings(path: str) -> tuple[CalculatorSettings, dict]:
    """Return (calculator settings, logging section) from one config file."""

    config = load_json_config(path)
    logging_config = config.get("logging", {}) or {}
    return build_calculator_settings(config), logging_config
