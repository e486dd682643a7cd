"""External release collaborators: the release tool and the changelog generator.

Both run with their output streaming to the terminal and are waited on
synchronously. Arguments are passed as an argv list, never through a shell.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from reltask.core.result import Result
from reltask.platform.process import ProcessError, run_silent

__all__ = [
    "ProcessReleaseTools",
    "ReleaseTools",
    "changelog_command",
    "release_command",
]


def release_command(tool: Sequence[str], args: Sequence[str]) -> list[str]:
    """argv for the release tool: the configured prefix, then args in order."""
    return [*tool, *args]


def changelog_command(tool: Sequence[str], tag: str, output_path: str) -> list[str]:
    """argv for the changelog generator (git-cliff flag layout)."""
    return [*tool, "-t", tag, "-o", output_path]


class ReleaseTools(Protocol):
    def run_release(self, args: Sequence[str]) -> Result[None, ProcessError]: ...

    def run_changelog(self, tag: str, output_path: str) -> Result[None, ProcessError]: ...


class ProcessReleaseTools:
    """Runs the configured tools as child processes in the working tree."""

    def __init__(
        self,
        *,
        cwd: Path,
        release_tool: Sequence[str],
        changelog_tool: Sequence[str],
    ) -> None:
        self._cwd = cwd
        self._release_tool = tuple(release_tool)
        self._changelog_tool = tuple(changelog_tool)

    def run_release(self, args: Sequence[str]) -> Result[None, ProcessError]:
        return run_silent(release_command(self._release_tool, args), cwd=self._cwd)

    def run_changelog(self, tag: str, output_path: str) -> Result[None, ProcessError]:
        return run_silent(
            changelog_command(self._changelog_tool, tag, output_path),
            cwd=self._cwd,
        )
