from __future__ import annotations

from pathlib import Path

import typer

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
from tagrelease.core.result import Err
from tagrelease.output.actions import GithubOutputFile, MemoryOutputs, OutputSink
from tagrelease.release.service import run_action

OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    help="File to append outputs to (env: GITHUB_OUTPUT); printed as name=value when unset",
)


def run(
    token: str | None = TOKEN_OPTION,
    match: str | None = MATCH_OPTION,
    exclude: str | None = EXCLUDE_OPTION,
    ref: str | None = REF_OPTION,
    repo: str | None = REPO_OPTION,
    api_url: str | None = API_URL_OPTION,
    output: Path | None = OUTPUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Resolve the tag, fetch its release and set the step outputs."""
    ctx = build_context(
        make_overrides(
            token=token,
            match=match,
            exclude=exclude,
            ref=ref,
            repo=repo,
            api_url=api_url,
            verbose=verbose,
            output_path=output,
        )
    )

    path = ctx.config.output_path
    sink: OutputSink = GithubOutputFile(path) if path is not None else MemoryOutputs()

    result = run_action(config=ctx.config, http=ctx.http, console=ctx.console, sink=sink)
    exit_on_error(result, ctx)
    if isinstance(result, Err):
        return

    if isinstance(sink, MemoryOutputs):
        for line in sink.lines():
            ctx.console.raw(line)

    outcome = result.value
    ctx.console.success(f"release {outcome.release.id} for tag {outcome.tag}")
