"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagrelease.core.config import ConfigError
from tagrelease.core.errors import ErrorCode
from tagrelease.output.actions import set_failed
from tagrelease.output.console import Style
from tagrelease.release.errors import (
    InvalidPatternError,
    NoMatchError,
    OutputWriteError,
    RefFormatError,
    ReleaseNotFoundError,
    RunError,
    TransportError,
)

if TYPE_CHECKING:
    from tagrelease.output.console import ConsoleProtocol

__all__ = ["ActionError", "print_run_error", "run_error_exit_code"]

ActionError = RunError | ConfigError


def print_run_error(error: ActionError, console: ConsoleProtocol) -> None:
    """Report a failure: one ``::error::`` line plus a hint where useful."""
    set_failed(console, error.message)
    match error:
        case RefFormatError():
            console.print(
                "hint: trigger on a tag push, or set the match/exclude inputs",
                Style.DIM,
            )
        case NoMatchError(pages=pages):
            console.print(f"scanned {pages} page(s) of tags", Style.DIM)
        case TransportError(status=401 | 403):
            console.print("hint: check that the token can read this repository", Style.DIM)
        case ConfigError(key=key) if key:
            console.print(f"hint: set {key}", Style.DIM)
        case _:
            pass


def run_error_exit_code(error: ActionError) -> int:
    match error:
        case RefFormatError() | InvalidPatternError():
            return int(ErrorCode.USER_ERROR)
        case ConfigError():
            return int(ErrorCode.ENV_ERROR)
        case NoMatchError():
            return int(ErrorCode.RESOLVE_ERROR)
        case TransportError():
            return int(ErrorCode.NETWORK_ERROR)
        case OutputWriteError():
            return int(ErrorCode.IO_ERROR)
        case ReleaseNotFoundError():
            return int(ErrorCode.NOT_FOUND)
    # Fallback for exhaustiveness
    return int(ErrorCode.USER_ERROR)
