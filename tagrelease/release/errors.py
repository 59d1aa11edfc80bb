"""Error types for tag resolution and release lookup.

Each kind is a frozen dataclass with a ``message`` property; unions group
them by the stage that can produce them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TransportKind = Literal["http", "network", "invalid_response"]


@dataclass(frozen=True, slots=True)
class RefFormatError:
    """The trigger ref does not name a tag."""

    ref: str

    @property
    def message(self) -> str:
        return f"Could not resolve tag from context. Ref is: {self.ref}"


@dataclass(frozen=True, slots=True)
class InvalidPatternError:
    """A match/exclude input is not a valid regular expression."""

    input: Literal["match", "exclude"]
    pattern: str
    reason: str

    @property
    def message(self) -> str:
        return f"Invalid {self.input} pattern '{self.pattern}': {self.reason}"


@dataclass(frozen=True, slots=True)
class NoMatchError:
    """The tag listing was exhausted without a qualifying tag."""

    include: str | None
    exclude: str | None
    pages: int

    @property
    def message(self) -> str:
        return "Could not find tag matching the specified input patterns."


@dataclass(frozen=True, slots=True)
class ReleaseNotFoundError:
    """The releases API answered 404 for the tag; ``detail`` is its message."""

    repo: str
    tag: str
    detail: str | None = None

    @property
    def message(self) -> str:
        text = f"No release found for tag '{self.tag}' in {self.repo}"
        if self.detail:
            return f"{text} ({self.detail})"
        return text


@dataclass(frozen=True, slots=True)
class TransportError:
    """Network, auth, rate-limit or payload failure talking to the API."""

    kind: TransportKind
    url: str
    status: int
    detail: str

    @property
    def message(self) -> str:
        if self.status:
            return f"{self.detail} (HTTP {self.status}, {self.url})"
        return f"{self.detail} ({self.url})"


@dataclass(frozen=True, slots=True)
class OutputWriteError:
    path: str
    reason: str

    @property
    def message(self) -> str:
        return f"Could not write outputs to {self.path}: {self.reason}"


ResolveError = RefFormatError | InvalidPatternError | NoMatchError | TransportError

ReleaseLookupError = ReleaseNotFoundError | TransportError

RunError = ResolveError | ReleaseNotFoundError | OutputWriteError
