"""Ports (interfaces) used by the interactive host.

The engine itself has no I/O; the session talks to the terminal only
through this contract so tests can drive it with a fake.
"""

from __future__ import annotations

from typing import Optional, Protocol


class ConsolePort(Protocol):
    """Line-oriented text interface."""

    def write_line(self, message: str) -> None:
        ...

    def write(self, message: str) -> None:
        ...

    def read_line(self) -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        ...

    def clear(self) -> None:
        ...
