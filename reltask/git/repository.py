"""Git repository abstraction.

Only the operations the release workflow needs are wrapped here. All of them
return Result types.

Usage:
    repo = Repository(Path("/path/to/repo"))

    match repo.checkout("HEAD", "CHANGELOG.md"):
        case Ok(_):
            print("restored")
        case Err(e) if e.not_found:
            print(f"no baseline: {e.message}")
        case Err(e):
            print(f"checkout failed: {e.message}")
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from reltask.core.result import Err, Ok, Result
from reltask.platform.process import ProcessError
from reltask.platform.process import run as run_process

# git reports a missing ref or pathspec with one of these diagnostics.
_NOT_FOUND_PATTERNS = re.compile(
    r"did not match any file"
    r"|invalid reference"
    r"|unknown revision"
    r"|bad revision"
    r"|not a valid object name"
    r"|does not exist in"
    r"|not a tree object",
    re.IGNORECASE,
)

__all__ = [
    "Checkout",
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message (git's own stderr when available)
        returncode: Process return code, None if git could not be started
        not_found: True if the ref or path did not exist
    """

    command: str
    message: str
    returncode: int | None = 1
    not_found: bool = False


class Checkout(Protocol):
    """Restores a path in the working tree to its content at a ref."""

    def checkout(self, ref: str, path: str) -> Result[None, GitError]: ...


class Repository:
    """Git repository abstraction.

    Attributes:
        path: Path to the working tree root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def checkout(self, ref: str, path: str) -> Result[None, GitError]:
        """Overwrite `path` with its content at `ref`.

        Runs `git checkout <ref> -- <path>`. Uncommitted edits to the path
        are destroyed; nothing is stashed or merged.

        Returns:
            Ok(None) on success
            Err(GitError) with not_found=True if the ref or the path is unknown
        """
        command = f"checkout {ref} -- {path}"
        result = self._run(["checkout", ref, "--", path])
        match result:
            case Err(e):
                message = e.stderr.strip() or e.stdout.strip() or "git checkout failed"
                return Err(
                    GitError(
                        command=command,
                        message=message,
                        returncode=e.returncode,
                        not_found=bool(_NOT_FOUND_PATTERNS.search(message)),
                    )
                )
            case Ok(_):
                return Ok(None)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path)
