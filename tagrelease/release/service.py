from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from tagrelease.core.config import ActionConfig
from tagrelease.core.result import Err, Ok, Result
from tagrelease.github.api import get_release_by_tag, list_tags
from tagrelease.github.http import HttpClient
from tagrelease.output.actions import OutputSink, project_release, release_summary
from tagrelease.output.console import ConsoleProtocol, Style
from tagrelease.release.errors import ResolveError, RunError, TransportError
from tagrelease.release.model import Pattern, ReleaseRecord, select_mode
from tagrelease.release.resolver import resolve


@dataclass(frozen=True, slots=True)
class RunOutcome:
    tag: str
    release: ReleaseRecord
    outputs: dict[str, str]


def resolve_tag(
    *,
    config: ActionConfig,
    http: HttpClient,
    console: ConsoleProtocol,
) -> Result[str, ResolveError]:
    context = config.context
    mode = select_mode(context, config.rule)
    if isinstance(mode, Pattern):
        console.print(
            f"searching tags of {context.repo} "
            f"(match: {mode.include or '-'}, exclude: {mode.exclude or '-'})",
            Style.DIM,
        )
    else:
        console.print(f"resolving tag from ref {context.ref}", Style.DIM)

    def on_page(page: int, names: list[str]) -> None:
        console.debug(f"tags page {page}: {', '.join(names) or '(empty)'}")

    fetch = partial(_fetch_page, http, config)
    result = resolve(context, config.rule, fetch, on_page=on_page)
    if isinstance(result, Ok):
        console.print(f"tag: {result.value}", Style.DIM)
    return result


def _fetch_page(
    http: HttpClient, config: ActionConfig, page: int, per_page: int
) -> Result[list[str], TransportError]:
    return list_tags(http, config.api_url, config.context.repo, page=page, per_page=per_page)


def run_action(
    *,
    config: ActionConfig,
    http: HttpClient,
    console: ConsoleProtocol,
    sink: OutputSink,
) -> Result[RunOutcome, RunError]:
    """Resolve the tag, look up its release and write the step outputs.

    Outputs are written only once every earlier step succeeded, in a single
    write, so a failed run leaves no outputs behind.
    """
    tag = resolve_tag(config=config, http=http, console=console)
    if isinstance(tag, Err):
        return tag

    release = get_release_by_tag(http, config.api_url, config.context.repo, tag.value)
    if isinstance(release, Err):
        return release

    console.print(release_summary(release.value))

    outputs = project_release(release.value, tag.value)
    written = sink.write_all(outputs)
    if isinstance(written, Err):
        return written

    return Ok(RunOutcome(tag=tag.value, release=release.value, outputs=outputs))
