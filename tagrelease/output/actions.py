"""Step outputs and workflow commands.

Maps a ``ReleaseRecord`` onto the action's output names and writes them
where GitHub Actions reads them (the ``GITHUB_OUTPUT`` file). Values are
serialised like the Actions toolkit does: strings verbatim, ``None`` as an
empty string, anything else as JSON.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from tagrelease.core.result import Err, Ok, Result
from tagrelease.release.errors import OutputWriteError
from tagrelease.release.model import ReleaseRecord

if TYPE_CHECKING:
    from tagrelease.output.console import ConsoleProtocol

__all__ = [
    "OUTPUT_NAMES",
    "OutputSink",
    "GithubOutputFile",
    "MemoryOutputs",
    "to_output_value",
    "project_release",
    "release_summary",
    "escape_command_data",
    "set_failed",
]

OUTPUT_NAMES: tuple[str, ...] = (
    "id",
    "html_url",
    "upload_url",
    "tag_name",
    "name",
    "body",
    "draft",
    "prerelease",
    "author",
)


def to_output_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def project_release(record: ReleaseRecord, tag: str) -> dict[str, str]:
    """Map a release onto the output names, in ``OUTPUT_NAMES`` order.

    ``tag_name`` is the resolved tag, not the payload field; the two only
    differ if the API normalised the name.
    """
    values: dict[str, object] = {
        "id": record.id,
        "html_url": record.html_url,
        "upload_url": record.upload_url,
        "tag_name": tag,
        "name": record.name,
        "body": record.body,
        "draft": record.draft,
        "prerelease": record.prerelease,
        "author": record.author,
    }
    return {name: to_output_value(values[name]) for name in OUTPUT_NAMES}


def _text(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def release_summary(record: ReleaseRecord) -> str:
    fields = (
        record.id,
        record.html_url,
        record.upload_url,
        record.name,
        record.draft,
        record.prerelease,
        record.body,
        record.author_login,
    )
    return "Got release info: " + ", ".join(f"'{_text(v)}'" for v in fields)


class OutputSink(Protocol):
    def write_all(self, outputs: Mapping[str, str]) -> Result[None, OutputWriteError]:
        """Write every output in one go, or none of them."""
        ...


def _delimiter(outputs: Mapping[str, str]) -> str:
    while True:
        delim = f"ghadelimiter_{uuid.uuid4()}"
        if not any(delim in k or delim in v for k, v in outputs.items()):
            return delim


@dataclass(frozen=True, slots=True)
class GithubOutputFile:
    """The ``GITHUB_OUTPUT`` file of the current step.

    Each output is appended as a heredoc record so multi-line values (a
    release body) survive intact.
    """

    path: Path

    def render(self, outputs: Mapping[str, str]) -> str:
        delim = _delimiter(outputs)
        return "".join(f"{name}<<{delim}\n{value}\n{delim}\n" for name, value in outputs.items())

    def write_all(self, outputs: Mapping[str, str]) -> Result[None, OutputWriteError]:
        text = self.render(outputs)
        try:
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(text)
        except OSError as e:
            return Err(OutputWriteError(path=str(self.path), reason=e.strerror or str(e)))
        return Ok(None)


def _empty_values() -> dict[str, str]:
    return {}


@dataclass
class MemoryOutputs:
    """Outputs kept in memory (tests, and runs outside a workflow)."""

    values: dict[str, str] = field(default_factory=_empty_values)

    def write_all(self, outputs: Mapping[str, str]) -> Result[None, OutputWriteError]:
        self.values.update(outputs)
        return Ok(None)

    def lines(self) -> list[str]:
        return [f"{name}={value}" for name, value in self.values.items()]


def escape_command_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(console: ConsoleProtocol, message: str) -> None:
    """Emit the ``::error::`` workflow command; the caller sets the exit code."""
    console.raw(f"::error::{escape_command_data(message)}")
