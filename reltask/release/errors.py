"""Error types for the release workflow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from reltask.git.repository import GitError
from reltask.platform.process import ProcessError

ReleaseErrorKind = Literal[
    "not_found",
    "collaborator_failed",
    "tool_missing",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """A failed step of a release task.

    Attributes:
        kind: What went wrong.
        step: Which collaborator failed ("git", "release tool", "changelog generator").
        message: Short description for display.
        returncode: The collaborator's exit code (negative when killed by a
            signal), or None if it never started.
        detail: Diagnostic text captured from the collaborator, if any. Empty
            when the collaborator streamed its own output to the terminal.
    """

    kind: ReleaseErrorKind
    step: str
    message: str
    returncode: int | None
    detail: str = ""

    @classmethod
    def from_git(cls, error: GitError) -> ReleaseError:
        if error.returncode is None:
            return cls(
                kind="tool_missing",
                step="git",
                message="git could not be started",
                returncode=None,
                detail=error.message,
            )
        return cls(
            kind="not_found" if error.not_found else "collaborator_failed",
            step="git",
            message=f"git {error.command} failed (exit {error.returncode})",
            returncode=error.returncode,
            detail=error.message,
        )

    @classmethod
    def from_process(cls, step: str, error: ProcessError) -> ReleaseError:
        if error.launch_failed:
            return cls(
                kind="tool_missing",
                step=step,
                message=f"{step} could not be started: {error.command[0]}",
                returncode=None,
                detail=error.stderr,
            )
        return cls(
            kind="collaborator_failed",
            step=step,
            message=str(error),
            returncode=error.returncode,
            detail=error.stderr,
        )
