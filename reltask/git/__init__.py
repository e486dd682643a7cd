"""Git operations used by the release workflow.

Usage:
    from reltask.git import Repository

    repo = Repository(Path("/path/to/repo"))
    repo.checkout("HEAD", "CHANGELOG.md")
"""

from reltask.git.repository import (
    Checkout,
    GitError,
    Repository,
)

__all__ = [
    "Checkout",
    "GitError",
    "Repository",
]
