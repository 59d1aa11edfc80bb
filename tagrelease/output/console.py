"""Console output abstraction.

Services report progress through ``ConsoleProtocol`` so they never touch a
terminal directly: ``RichConsole`` renders with Rich, ``MockConsole``
captures messages for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    DIM = auto()
    DEBUG = auto()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print
            style: The style to apply
        """
        ...

    def success(self, message: str) -> None: ...

    def debug(self, message: str) -> None:
        """Print a diagnostic line; dropped unless debug output is enabled."""
        ...

    def raw(self, message: str) -> None:
        """Print text exactly as given (workflow commands, outputs)."""
        ...


class RichConsole:
    """Console implementation using Rich.

    Diagnostics go to stderr by default so stdout carries only what a
    command is asked to print (the tag name, ``name=value`` outputs).
    """

    def __init__(self, *, stderr: bool = True, debug: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console(stderr=stderr, highlight=False, emoji=False)
        self._out = Console(highlight=False, soft_wrap=True, emoji=False)
        self._debug = debug
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.DIM: "dim",
            Style.DEBUG: "dim italic",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def success(self, message: str) -> None:
        self._console.print(f"[green]OK[/green] {_escape(message)}")

    def debug(self, message: str) -> None:
        if self._debug:
            self.print(f"debug: {message}", Style.DEBUG)

    def raw(self, message: str) -> None:
        self._out.print(message, markup=False, highlight=False)


def _escape(message: str) -> str:
    from rich.markup import escape

    return escape(message)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)
    show_debug: bool = True

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def debug(self, message: str) -> None:
        if self.show_debug:
            self.outputs.append(OutputRecord(f"debug: {message}", Style.DEBUG))

    def raw(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.DEFAULT))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
