from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from reltask.core.config import Config, load_config_or_default
from reltask.core.errors import ErrorCode
from reltask.core.result import Err
from reltask.core.workspace import Workspace, detect_workspace, is_workspace_root
from reltask.output.console import ConsoleProtocol, RichConsole
from reltask.release.model import ReleaseSettings


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Options given before the task name, stored on the click context."""

    workspace: Path | None = None
    verbose: bool = False


@dataclass(frozen=True, slots=True)
class CLIContext:
    workspace: Workspace
    config: Config
    settings: ReleaseSettings
    console: ConsoleProtocol
    verbose: bool = False

    @property
    def announcer(self) -> ConsoleProtocol | None:
        """Console for step announcements, only when --verbose was given."""
        return self.console if self.verbose else None


def _resolve_workspace(options: GlobalOptions) -> Workspace:
    if options.workspace is not None:
        try:
            root = options.workspace.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --workspace: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir() or not is_workspace_root(root):
            typer.echo(
                f"error: --workspace '{root}' is not a git working tree (missing .git)",
                err=True,
            )
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        return Workspace(root=root)

    workspace_result = detect_workspace()
    if isinstance(workspace_result, Err):
        typer.echo(f"error: {workspace_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
    return workspace_result.value


def build_context(options: GlobalOptions | None = None) -> CLIContext:
    options = options or GlobalOptions()
    workspace = _resolve_workspace(options)

    config_result = load_config_or_default(workspace.config_path)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    config = config_result.value

    return CLIContext(
        workspace=workspace,
        config=config,
        settings=ReleaseSettings.from_config(config),
        console=RichConsole(),
        verbose=options.verbose,
    )
