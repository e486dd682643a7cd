"""Error presentation utilities.

Collaborators print their own diagnostics; reltask only re-emits text it
captured (git) and explains failures where no collaborator got to speak.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reltask.core.errors import ErrorCode
from reltask.release.errors import ReleaseError

if TYPE_CHECKING:
    from reltask.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a release error without decorating collaborator output."""
    match error:
        case ReleaseError(kind="tool_missing", message=message, detail=detail):
            console.error(message)
            if detail:
                console.print(detail)
        case ReleaseError(step="git", detail=detail) if detail:
            console.print(detail)
        case _:
            # Streamed collaborators already reported the failure themselves.
            pass


def release_error_exit_code(error: ReleaseError) -> int:
    """Get exit code for a release error."""
    if error.returncode is None:
        return int(ErrorCode.ENV_ERROR)
    if error.returncode < 0:
        # Killed by a signal: report it the way a shell would.
        return 128 - error.returncode
    return error.returncode
