"""Application entry point for consolecalc."""

from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from dotenv import load_dotenv

import settings
from adapters.console import StdConsole
from core.calculator import Calculator
from session import InteractiveSession, evaluate_all, render_evaluations

NAME = "CONSOLECALC"
FONT = "standard"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging(config: dict, verbose: bool = False) -> None:
    if verbose:
        config = {**config, "enabled": True, "level": "DEBUG", "console": True}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        # StreamHandler defaults to stderr, keeping stdout for results.
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/consolecalc.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 3))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers, force=True)


def _evaluate_once(calculator: Calculator, raw: str) -> int:
    evaluations = evaluate_all(calculator, raw)
    for line in render_evaluations(evaluations):
        print(line)
    return 0 if all(evaluation.ok for evaluation in evaluations) else 1


def _run(calculator: Calculator) -> int:
    console = StdConsole()
    console.clear()
    _print_banner()
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive session")

    try:
        InteractiveSession(calculator, console).run()
    except KeyboardInterrupt:
        # Ctrl-C is the normal way out of the loop.
        console.write_line("")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="consolecalc")
    parser.add_argument("--config", help="Path to config.json")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Start the interactive calculator")
    eval_parser = subparsers.add_parser("eval", help="Evaluate one input and exit")
    eval_parser.add_argument("input", help='Numbers to evaluate, e.g. "1,2,3" or "//;\\n1;2"')

    args = parser.parse_args(argv)

    load_dotenv()
    config_path = settings.resolve_config_path(args.config)
    try:
        calculator_settings, logging_config = settings.load_settings(config_path)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    _configure_logging(logging_config, verbose=args.verbose)
    logging.getLogger(__name__).debug("Loaded settings from %s: %s", config_path, calculator_settings)

    calculator = Calculator(calculator_settings)
    if args.command == "eval":
        return _evaluate_once(calculator, args.input)
    return _run(calculator)


if __name__ == "__main__":
    raise SystemExit(main())
