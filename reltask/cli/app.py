from __future__ import annotations

from pathlib import Path

import typer

from reltask import __version__
from reltask.cli.commands.release_cmd import PassthroughCommand, release, release_hook
from reltask.cli.context import GlobalOptions


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Tasks
app.command("release", cls=PassthroughCommand, add_help_option=False)(release)
app.command("release-hook")(release_hook)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    workspace: Path | None = typer.Option(
        None,
        "--workspace",
        help="Working tree root (overrides auto detection)",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print each step before running it."
    ),
) -> None:
    ctx.obj = GlobalOptions(workspace=workspace, verbose=verbose)


def main() -> None:
    app()
