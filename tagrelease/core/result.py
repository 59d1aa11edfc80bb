"""Result type for explicit error handling.

Every fallible step of the action (reading inputs, fetching a page of tags,
looking up a release, writing outputs) returns a ``Result`` instead of
raising. The CLI is the only place where an ``Err`` turns into an exit code.

Usage:
    def strip_marker(ref: str) -> Result[str, str]:
        if "refs/tags/" not in ref:
            return Err(f"not a tag ref: {ref}")
        return Ok(ref.replace("refs/tags/", "", 1))

    match strip_marker("refs/tags/v1.2.3"):
        case Ok(tag):
            print(tag)
        case Err(error):
            print(f"error: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
