"""Tag resolution.

Two modes, chosen once by ``select_mode``:

- Direct: the trigger ref must contain ``refs/tags/``; the tag is what
  follows the marker.
- Pattern: walk the tag listing page by page (10 per page, API order) and
  take the first name that matches ``include`` and does not match
  ``exclude``. A short page ends the listing. A full page always leads to
  another fetch, so a listing whose size is a multiple of the page size
  costs one extra, empty request before giving up.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import Literal

from tagrelease.core.result import Err, Ok, Result
from tagrelease.release.errors import (
    InvalidPatternError,
    NoMatchError,
    RefFormatError,
    ResolveError,
    TransportError,
)
from tagrelease.release.model import (
    TAG_REF_MARKER,
    Direct,
    MatchRule,
    Pattern,
    TriggerContext,
    select_mode,
)

__all__ = [
    "PAGE_SIZE",
    "TagPageFetcher",
    "iter_tag_pages",
    "is_candidate",
    "resolve",
    "tag_from_ref",
]

PAGE_SIZE = 10

# (page, per_page) -> tag names of that page
TagPageFetcher = Callable[[int, int], Result[list[str], TransportError]]

PageCallback = Callable[[int, list[str]], None]


def tag_from_ref(ref: str) -> Result[str, RefFormatError]:
    """Return the part of ``ref`` after the tag marker, verbatim."""
    if TAG_REF_MARKER not in ref:
        return Err(RefFormatError(ref=ref))
    return Ok(ref.replace(TAG_REF_MARKER, "", 1))


def _compile(
    which: Literal["match", "exclude"], pattern: str | None
) -> Result[re.Pattern[str] | None, InvalidPatternError]:
    if pattern is None:
        return Ok(None)
    try:
        return Ok(re.compile(pattern))
    except re.error as e:
        return Err(InvalidPatternError(input=which, pattern=pattern, reason=str(e)))


def is_candidate(
    name: str,
    include: re.Pattern[str] | None,
    exclude: re.Pattern[str] | None,
) -> bool:
    """True if ``name`` matches include (if set) and not exclude (if set)."""
    if include is not None and include.search(name) is None:
        return False
    if exclude is not None and exclude.search(name) is not None:
        return False
    return True


def iter_tag_pages(
    fetch: TagPageFetcher,
    per_page: int = PAGE_SIZE,
) -> Iterator[Result[list[str], TransportError]]:
    """Yield tag pages lazily, starting at page 1.

    A page is only requested when the consumer asks for it. The iterator
    stops after a short page or after the first error.
    """
    page = 1
    while True:
        result = fetch(page, per_page)
        yield result
        if isinstance(result, Err) or len(result.value) < per_page:
            return
        page += 1


def _search(
    fetch: TagPageFetcher,
    mode: Pattern,
    on_page: PageCallback | None,
) -> Result[str, ResolveError]:
    include = _compile("match", mode.include)
    if isinstance(include, Err):
        return include
    exclude = _compile("exclude", mode.exclude)
    if isinstance(exclude, Err):
        return exclude

    pages = 0
    for result in iter_tag_pages(fetch):
        if isinstance(result, Err):
            return result
        pages += 1
        if on_page is not None:
            on_page(pages, result.value)
        for name in result.value:
            if is_candidate(name, include.value, exclude.value):
                return Ok(name)

    return Err(NoMatchError(include=mode.include, exclude=mode.exclude, pages=pages))


def resolve(
    context: TriggerContext,
    rule: MatchRule,
    fetch: TagPageFetcher,
    *,
    on_page: PageCallback | None = None,
) -> Result[str, ResolveError]:
    """Resolve exactly one tag name for this invocation.

    Args:
        context: Trigger ref and repository
        rule: Optional include/exclude patterns; both empty selects direct mode
        fetch: Page fetcher for the tag listing (unused in direct mode)
        on_page: Called with (page number, names) after each page is fetched

    Returns:
        Ok with the tag name, or Err with the reason no tag could be chosen
    """
    match select_mode(context, rule):
        case Direct(ref=ref):
            return tag_from_ref(ref)
        case Pattern() as mode:
            return _search(fetch, mode, on_page)
