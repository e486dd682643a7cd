"""The two release tasks.

`release` discards local edits to the changelog and then hands over to the
release tool. `release_hook` regenerates the changelog; the release tool is
expected to call it mid-release with NEW_VERSION set.

Both tasks are strictly sequential and stop at the first failing step. No
error is retried or reinterpreted: the failing collaborator's exit code is
carried in the returned ReleaseError.
"""

from __future__ import annotations

import shlex

from reltask.core.result import Err, Ok, Result
from reltask.git.repository import Checkout
from reltask.output.console import ConsoleProtocol
from reltask.release.errors import ReleaseError
from reltask.release.model import HookRequest, ReleaseRequest, ReleaseSettings
from reltask.release.tools import ReleaseTools, changelog_command, release_command

__all__ = ["release", "release_hook"]


def release(
    request: ReleaseRequest,
    *,
    settings: ReleaseSettings,
    repo: Checkout,
    tools: ReleaseTools,
    console: ConsoleProtocol | None = None,
) -> Result[None, ReleaseError]:
    """Restore the changelog to its baseline, then run the release tool.

    This is destructive: uncommitted edits to the changelog are gone as soon
    as the checkout succeeds. If the baseline ref or the changelog is unknown
    to git, the release tool is never started.
    """
    if console is not None:
        console.info(f"git checkout {settings.baseline_ref} -- {settings.changelog}")

    match repo.checkout(settings.baseline_ref, settings.changelog):
        case Err(e):
            return Err(ReleaseError.from_git(e))
        case Ok(_):
            pass

    if console is not None:
        console.info(shlex.join(release_command(settings.release_tool, request.args)))

    match tools.run_release(request.args):
        case Err(e):
            return Err(ReleaseError.from_process("release tool", e))
        case Ok(_):
            return Ok(None)


def release_hook(
    request: HookRequest,
    *,
    settings: ReleaseSettings,
    tools: ReleaseTools,
    console: ConsoleProtocol | None = None,
) -> Result[None, ReleaseError]:
    """Regenerate the changelog, tagging unreleased entries with the version.

    The generator overwrites the changelog file. The version is forwarded
    as-is, including when it is empty.
    """
    if console is not None:
        argv = changelog_command(settings.changelog_tool, request.version, settings.changelog)
        console.info(shlex.join(argv))

    match tools.run_changelog(request.version, settings.changelog):
        case Err(e):
            return Err(ReleaseError.from_process("changelog generator", e))
        case Ok(_):
            return Ok(None)
