from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

BASELINE = "# Changelog\n\n## 1.0.0\n- first release\n"


def git(root: Path, *args: str) -> str:
    proc = subprocess.run(
        [
            "git",
            "-C",
            str(root),
            "-c",
            "user.name=reltask tests",
            "-c",
            "user.email=tests@example.invalid",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        capture_output=True,
        text=True,
        check=True,
    )
    return proc.stdout


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A working tree whose CHANGELOG.md is committed with BASELINE content."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")

    root = tmp_path / "repo"
    root.mkdir()
    git(root, "init", "-q")
    (root / "CHANGELOG.md").write_text(BASELINE, encoding="utf-8")
    git(root, "add", "CHANGELOG.md")
    git(root, "commit", "-q", "-m", "initial")
    return root


@pytest.fixture
def empty_git_repo(tmp_path: Path) -> Path:
    """A working tree with no commits at all."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")

    root = tmp_path / "empty"
    root.mkdir()
    git(root, "init", "-q")
    return root
