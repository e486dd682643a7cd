"""Subprocess execution with Result-based error handling.

This is the only module that talks to `subprocess`. Commands are always
passed as argv lists; nothing is ever handed to a shell, so arguments reach
the child process byte for byte. There is no timeout: every call blocks
until the child exits.

Usage:
    result = run(["git", "rev-parse", "HEAD"], cwd=root)
    match result:
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from reltask.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run", "run_silent"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process (negative when killed by a
            signal), or None if the process was never started.
        stdout: Standard output (empty when output was streamed).
        stderr: Standard error (empty when output was streamed).
    """

    command: tuple[str, ...]
    returncode: int | None
    stdout: str
    stderr: str

    @property
    def launch_failed(self) -> bool:
        """True if the process never started (missing executable, bad cwd)."""
        return self.returncode is None

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        if self.returncode is None:
            return f"{cmd_str} could not be started"
        return f"{cmd_str} failed (exit {self.returncode})"


def _launch_error(cmd: list[str], error: OSError) -> Err[ProcessError]:
    return Err(
        ProcessError(
            command=tuple(cmd),
            returncode=None,
            stdout="",
            stderr=str(error),
        )
    )


def run(cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
    """Execute a command and return stdout or error.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.

    Returns:
        Ok(stdout) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return _launch_error(cmd, e)

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run_silent(cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
    """Execute a command with output streaming to the terminal.

    Used for the release tool and the changelog generator, which print their
    own progress and diagnostics.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.

    Returns:
        Ok(None) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(cmd, cwd=str(cwd), check=False)
    except OSError as e:
        return _launch_error(cmd, e)

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout="",
                stderr="",
            )
        )

    return Ok(None)
