"""Working tree detection.

The workspace is the root of the git working tree that holds the changelog.
It is the nearest directory (starting from cwd) containing a `.git` entry,
unless `RELTASK_WORKSPACE` points somewhere explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import CONFIG_FILENAME
from .result import Err, Ok, Result

__all__ = [
    "WORKSPACE_ENV",
    "Workspace",
    "WorkspaceError",
    "detect_workspace",
    "find_workspace_upward",
    "is_workspace_root",
]

WORKSPACE_ENV = "RELTASK_WORKSPACE"


@dataclass(frozen=True)
class WorkspaceError:
    """Error when the working tree cannot be detected."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Workspace:
    """A git working tree that reltask operates on."""

    root: Path

    @property
    def config_path(self) -> Path:
        """Path to reltask.toml."""
        return self.root / CONFIG_FILENAME


def is_workspace_root(path: Path) -> bool:
    """True if path holds a `.git` directory, or a `.git` file (worktrees)."""
    marker = path / ".git"
    return marker.is_dir() or marker.is_file()


def find_workspace_upward(start: Path) -> Path | None:
    """Walk from start up to the filesystem root looking for a working tree."""
    current = start.resolve()
    for candidate in (current, *current.parents):
        if is_workspace_root(candidate):
            return candidate
    return None


def detect_workspace(start: Path | None = None) -> Result[Workspace, WorkspaceError]:
    """Detect the working tree.

    Resolution order:
    1. RELTASK_WORKSPACE environment variable
    2. nearest parent of `start` (default: cwd) containing `.git`
    """
    env = os.environ.get(WORKSPACE_ENV)
    if env:
        root = Path(env).expanduser().resolve()
        if not is_workspace_root(root):
            return Err(
                WorkspaceError(
                    f"{WORKSPACE_ENV}={env} is not a git working tree",
                    searched_from=root,
                )
            )
        return Ok(Workspace(root=root))

    origin = start or Path.cwd()
    found = find_workspace_upward(origin)
    if found is None:
        return Err(
            WorkspaceError(
                "not inside a git working tree",
                searched_from=origin,
            )
        )
    return Ok(Workspace(root=found))
