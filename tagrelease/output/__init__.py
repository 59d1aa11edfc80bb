"""Output layer: console, step outputs, error presentation."""

from .actions import GithubOutputFile, MemoryOutputs, OutputSink, project_release
from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
    "GithubOutputFile",
    "MemoryOutputs",
    "OutputSink",
    "project_release",
]
