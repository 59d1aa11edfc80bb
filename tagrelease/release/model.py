from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tagrelease.core.structured import StrDict, as_str_dict, get_bool, get_int, get_str

TAG_REF_MARKER = "refs/tags/"


@dataclass(frozen=True, slots=True)
class RepoId:
    owner: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def parse(cls, value: str) -> RepoId | None:
        """Parse ``owner/name`` (the GITHUB_REPOSITORY format)."""
        parts = value.strip().split("/")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            return None
        return cls(owner=parts[0], name=parts[1])

    def __str__(self) -> str:
        return self.slug


@dataclass(frozen=True, slots=True)
class TriggerContext:
    """What the triggering event tells us: the ref and the repository."""

    ref: str
    repo: RepoId


@dataclass(frozen=True, slots=True)
class MatchRule:
    """Optional include/exclude regular expressions.

    An unset action input reads as an empty string, so empty patterns are
    normalised to None.
    """

    include: str | None = None
    exclude: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "include", self.include or None)
        object.__setattr__(self, "exclude", self.exclude or None)

    @property
    def is_empty(self) -> bool:
        return self.include is None and self.exclude is None


@dataclass(frozen=True, slots=True)
class Direct:
    """Take the tag straight from the trigger ref."""

    ref: str


@dataclass(frozen=True, slots=True)
class Pattern:
    """Search the tag listing with include/exclude patterns."""

    include: str | None
    exclude: str | None


ResolutionMode = Direct | Pattern


def select_mode(context: TriggerContext, rule: MatchRule) -> ResolutionMode:
    if rule.is_empty:
        return Direct(ref=context.ref)
    return Pattern(include=rule.include, exclude=rule.exclude)


@dataclass(frozen=True, slots=True)
class ReleaseRecord:
    """A published release, as returned by the releases API."""

    id: int
    html_url: str
    upload_url: str
    tag_name: str
    name: str | None
    body: str | None
    draft: bool
    prerelease: bool
    author: dict[str, Any] | None

    @classmethod
    def from_api(cls, data: StrDict) -> ReleaseRecord | None:
        """Build from a release payload; None if required fields are missing."""
        release_id = get_int(data, "id")
        html_url = get_str(data, "html_url")
        upload_url = get_str(data, "upload_url")
        if release_id is None or html_url is None or upload_url is None:
            return None

        author = as_str_dict(data.get("author"))
        return cls(
            id=release_id,
            html_url=html_url,
            upload_url=upload_url,
            tag_name=get_str(data, "tag_name") or "",
            name=get_str(data, "name"),
            body=get_str(data, "body"),
            draft=get_bool(data, "draft"),
            prerelease=get_bool(data, "prerelease"),
            author=dict(author) if author is not None else None,
        )

    @property
    def author_login(self) -> str | None:
        if self.author is None:
            return None
        login = self.author.get("login")
        return login if isinstance(login, str) else None
