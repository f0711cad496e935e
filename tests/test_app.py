from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest

import app


def _write_config(tmp_path, calculator_settings: dict) -> str:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"CalculatorSettings": calculator_settings}), encoding="utf-8")
    return str(path)


def test_eval_prints_results(tmp_path, capsys) -> None:
    config = _write_config(tmp_path, {"Separators": [",", "\n"]})
    exit_code = app.main(["--config", config, "eval", "1\\n2,3"])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert out == [
        "Addition:       1 + 2 + 3 = 6",
        "Subtraction:    1 - 2 - 3 = -4",
        "Multiplication: 1 * 2 * 3 = 6",
        "Division:       1 / 2 / 3 = 0",
    ]


def test_eval_reports_error_with_exit_code(tmp_path, capsys) -> None:
    config = _write_config(tmp_path, {"AllowNegativeNumbers": False})
    exit_code = app.main(["--config", config, "eval", "1,-2,3,-5,-7"])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert out.strip() == "Error: Negative numbers are not allowed: -2, -5, -7"


def test_missing_config_is_a_usage_error(tmp_path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        app.main(["--config", str(tmp_path / "missing.json"), "eval", "1"])
    assert exc_info.value.code == 2


def test_configure_logging_writes_to_rotating_file(tmp_path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_path = tmp_path / "logs" / "calc.log"
    try:
        app._configure_logging(
            {
                "enabled": True,
                "level": "DEBUG",
                "console": False,
                "file": {"enabled": True, "path": str(log_path)},
            }
        )
        logging.getLogger("core.calculator").debug("hello from the engine")
        for handler in root.handlers:
            handler.flush()
        assert any(isinstance(handler, RotatingFileHandler) for handler in root.handlers)
        assert "DEBUG core.calculator: hello from the engine" in log_path.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_configure_logging_disabled_installs_nothing() -> None:
    root = logging.getLogger()
    before = root.handlers[:]
    app._configure_logging({"enabled": False})
    assert root.handlers == before


class _ClearRecordingConsole:
    def __init__(self) -> None:
        self.cleared = False
        self.output: list[str] = []

    def write_line(self, message: str) -> None:
        self.output.append(message)

    def write(self, message: str) -> None:
        self.output.append(message)

    def read_line(self):
        return None

    def clear(self) -> None:
        self.cleared = True


def test_run_clears_screen_before_session(monkeypatch) -> None:
    console = _ClearRecordingConsole()
    monkeypatch.setattr(app, "StdConsole", lambda: console)
    monkeypatch.setattr(app, "_print_banner", lambda: None)

    assert app._run(app.Calculator(app.settings.build_calculator_settings({}))) == 0
    assert console.cleared
    assert console.output[0] == "Console Calculator"
