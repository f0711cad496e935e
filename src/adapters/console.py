"""Console adapter backed by stdin/stdout."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

CLEAR_SCREEN = "\033[2J\033[H"


class StdConsole:
    """ConsolePort implementation for a real terminal."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def write_line(self, message: str) -> None:
        self._stdout.write(f"{message}\n")
        self._stdout.flush()

    def write(self, message: str) -> None:
        self._stdout.write(message)
        self._stdout.flush()

    def read_line(self) -> Optional[str]:
        line = self._stdin.readline()
        # readline() returns "" only at end of input; a blank line is "\n".
        if not line:
            return None
        return line.rstrip("\r\n")

    def clear(self) -> None:
        if self._stdout.isatty():
            self.write(CLEAR_SCREEN)
