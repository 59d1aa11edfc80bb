"""GitHub REST API calls used by the action.

Pure functions over an ``HttpClient``:
- list_tags: one page of the repository tag listing
- get_release_by_tag: the release published against a tag

Both are read-only and never retry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from tagrelease.core.result import Err, Ok, Result
from tagrelease.core.structured import as_obj_list, as_str_dict, get_str
from tagrelease.github.http import HttpError, build_url
from tagrelease.release.errors import (
    ReleaseLookupError,
    ReleaseNotFoundError,
    TransportError,
)
from tagrelease.release.model import ReleaseRecord, RepoId

if TYPE_CHECKING:
    from tagrelease.github.http import HttpClient

__all__ = ["list_tags", "get_release_by_tag", "transport_error"]


def transport_error(error: HttpError) -> TransportError:
    return TransportError(
        kind="http" if error.status else "network",
        url=error.url,
        status=error.status,
        detail=error.message,
    )


def _invalid(url: str, detail: str) -> TransportError:
    return TransportError(kind="invalid_response", url=url, status=0, detail=detail)


def list_tags(
    http: HttpClient,
    api_url: str,
    repo: RepoId,
    *,
    page: int,
    per_page: int,
) -> Result[list[str], TransportError]:
    """Fetch one page of tag names, in the API's default order.

    Args:
        http: HTTP client to use
        api_url: API base URL (e.g. "https://api.github.com")
        repo: Repository to list
        page: 1-based page number
        per_page: Page size

    Returns:
        Ok with the tag names of that page (possibly empty), or Err with
        TransportError
    """
    url = build_url(
        api_url,
        f"repos/{repo.owner}/{repo.name}/tags",
        {"per_page": per_page, "page": page},
    )
    result = http.get_json(url)
    if isinstance(result, Err):
        return Err(transport_error(result.error))

    items = as_obj_list(result.value)
    if items is None:
        return Err(_invalid(url, "Expected JSON array of tags"))

    names: list[str] = []
    for item in items:
        entry = as_str_dict(item)
        name = get_str(entry, "name") if entry is not None else None
        if name is None:
            return Err(_invalid(url, "Tag entry without a name"))
        names.append(name)
    return Ok(names)


def get_release_by_tag(
    http: HttpClient,
    api_url: str,
    repo: RepoId,
    tag: str,
) -> Result[ReleaseRecord, ReleaseLookupError]:
    """Fetch the release published against ``tag``.

    A 404 means no release exists for the tag (drafts are invisible to
    tokens without push access, so they also land here).
    """
    url = build_url(
        api_url,
        f"repos/{repo.owner}/{repo.name}/releases/tags/{quote(tag, safe='')}",
    )
    result = http.get_json(url)
    if isinstance(result, Err):
        if result.error.status == 404:
            return Err(
                ReleaseNotFoundError(repo=repo.slug, tag=tag, detail=result.error.message)
            )
        return Err(transport_error(result.error))

    data = as_str_dict(result.value)
    if data is None:
        return Err(_invalid(url, "Expected JSON object for release"))

    record = ReleaseRecord.from_api(data)
    if record is None:
        return Err(_invalid(url, "Release payload is missing id, html_url or upload_url"))
    return Ok(record)
