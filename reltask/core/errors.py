"""Exit codes owned by reltask itself.

When a collaborator (git, the release tool, the changelog generator) fails,
reltask exits with that collaborator's own code. These values only cover
failures that happen before any collaborator could report anything.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 1: User error (invalid reltask.toml, bad --workspace)
    - 2: Environment error (no git working tree, tool not installed)
    """

    USER_ERROR = 1
    ENV_ERROR = 2
