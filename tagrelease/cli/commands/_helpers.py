"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from tagrelease.core.config import ConfigOverrides
from tagrelease.core.result import Err, Result
from tagrelease.output.errors import ActionError, print_run_error, run_error_exit_code

if TYPE_CHECKING:
    from tagrelease.cli.context import CLIContext


TOKEN_OPTION = typer.Option(
    None, "--token", help="GitHub token (env: INPUT_TOKEN, GITHUB_TOKEN)"
)
MATCH_OPTION = typer.Option(
    None, "--match", help="Regex a tag must match (env: INPUT_MATCH)"
)
EXCLUDE_OPTION = typer.Option(
    None, "--exclude", help="Regex a tag must not match (env: INPUT_EXCLUDE)"
)
REF_OPTION = typer.Option(None, "--ref", help="Trigger ref (env: GITHUB_REF)")
REPO_OPTION = typer.Option(None, "--repo", help="owner/name (env: GITHUB_REPOSITORY)")
API_URL_OPTION = typer.Option(
    None, "--api-url", help="API base URL (env: GITHUB_API_URL)"
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Print each fetched tag page.")


def make_overrides(
    *,
    token: str | None,
    match: str | None,
    exclude: str | None,
    ref: str | None,
    repo: str | None,
    api_url: str | None,
    verbose: bool,
    output_path: Path | None = None,
) -> ConfigOverrides:
    return ConfigOverrides(
        token=token,
        match=match,
        exclude=exclude,
        ref=ref,
        repo=repo,
        api_url=api_url,
        output_path=output_path,
        verbose=verbose,
    )


def exit_on_error[T](result: Result[T, ActionError], ctx: CLIContext) -> None:
    """Report and exit if result is Err, otherwise return.

    The error is printed as a ``::error::`` workflow command and mapped to
    its ErrorCode.
    """
    if isinstance(result, Err):
        error = result.error
        print_run_error(error, ctx.console)
        raise typer.Exit(code=run_error_exit_code(error))
