from __future__ import annotations

from tagrelease.cli.commands._helpers import (
    API_URL_OPTION,
    EXCLUDE_OPTION,
    MATCH_OPTION,
    REF_OPTION,
    REPO_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
    exit_on_error,
    make_overrides,
)
from tagrelease.cli.context import build_context
from tagrelease.core.result import Ok
from tagrelease.release.service import resolve_tag


def tag(
    token: str | None = TOKEN_OPTION,
    match: str | None = MATCH_OPTION,
    exclude: str | None = EXCLUDE_OPTION,
    ref: str | None = REF_OPTION,
    repo: str | None = REPO_OPTION,
    api_url: str | None = API_URL_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Resolve the tag only and print it (no release lookup, no outputs)."""
    ctx = build_context(
        make_overrides(
            token=token,
            match=match,
            exclude=exclude,
            ref=ref,
            repo=repo,
            api_url=api_url,
            verbose=verbose,
        )
    )

    result = resolve_tag(config=ctx.config, http=ctx.http, console=ctx.console)
    exit_on_error(result, ctx)
    if isinstance(result, Ok):
        ctx.console.raw(result.value)
