from __future__ import annotations

from typing import NoReturn

import click
import typer
from typer.core import TyperCommand

from reltask.cli.context import CLIContext, GlobalOptions, build_context
from reltask.core.result import Err
from reltask.git.repository import Repository
from reltask.output.errors import print_release_error, release_error_exit_code
from reltask.release.errors import ReleaseError
from reltask.release.model import HookRequest, ReleaseRequest
from reltask.release.tasks import release as run_release_task
from reltask.release.tasks import release_hook as run_release_hook_task
from reltask.release.tools import ProcessReleaseTools


_RAW_ARGS_KEY = "reltask.raw_args"


class PassthroughCommand(TyperCommand):
    """Command whose whole argument list is kept unparsed.

    Click would otherwise consume a `--` separator; the release tool must
    see every token exactly as given.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[_RAW_ARGS_KEY] = tuple(args)
        return super().parse_args(ctx, [])


def _options(ctx: typer.Context) -> GlobalOptions:
    obj = ctx.find_object(GlobalOptions)
    return obj if obj is not None else GlobalOptions()


def _tools(cli: CLIContext) -> ProcessReleaseTools:
    return ProcessReleaseTools(
        cwd=cli.workspace.root,
        release_tool=cli.settings.release_tool,
        changelog_tool=cli.settings.changelog_tool,
    )


def _fail(error: ReleaseError, cli: CLIContext) -> NoReturn:
    print_release_error(error, cli.console)
    raise typer.Exit(code=release_error_exit_code(error))


def release(ctx: typer.Context) -> None:
    """Discard local CHANGELOG.md edits, then run the release tool.

    Every argument after `release` is passed to the release tool unchanged,
    including ones that look like options.

    [bold]Destructive:[/bold] uncommitted edits to the changelog are
    overwritten with the committed version and cannot be recovered by reltask.
    """
    cli = build_context(_options(ctx))
    request = ReleaseRequest(args=ctx.meta.get(_RAW_ARGS_KEY, ()))

    result = run_release_task(
        request,
        settings=cli.settings,
        repo=Repository(cli.workspace.root),
        tools=_tools(cli),
        console=cli.announcer,
    )
    if isinstance(result, Err):
        _fail(result.error, cli)


def release_hook(
    ctx: typer.Context,
    tag: str = typer.Option(
        "",
        "--tag",
        envvar="NEW_VERSION",
        show_envvar=True,
        help="Version to tag unreleased entries with (passed through unchecked).",
    ),
) -> None:
    """Regenerate the changelog for the version being released."""
    cli = build_context(_options(ctx))

    result = run_release_hook_task(
        HookRequest(version=tag),
        settings=cli.settings,
        tools=_tools(cli),
        console=cli.announcer,
    )
    if isinstance(result, Err):
        _fail(result.error, cli)
