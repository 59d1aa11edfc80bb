from __future__ import annotations

import typer

from tagrelease import __version__
from tagrelease.cli.commands.run_cmd import run
from tagrelease.cli.commands.tag_cmd import tag

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    invoke_without_command=True,
    rich_markup_mode="rich",
    help="Resolve a tag to its GitHub release and expose it as step outputs.",
)


# Commands
app.command()(run)
app.command()(tag)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def main() -> None:
    app()
