"""End-to-end tests for the `release` and `release-hook` commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from reltask import __version__
from reltask.cli.app import app
from reltask.core.errors import ErrorCode
from reltask.core.result import Err
from reltask.core.workspace import WORKSPACE_ENV
from reltask.git.repository import Repository
from reltask.test.conftest import BASELINE

runner = CliRunner()

# Stand-in for a collaborator: records its argv and what the changelog
# looked like when it was started, then exits with $FAKE_EXIT (default 0).
RECORDER = """\
import json, os, sys
from pathlib import Path

changelog = Path("CHANGELOG.md")
Path(sys.argv[1]).write_text(json.dumps({
    "argv": sys.argv[2:],
    "changelog": changelog.read_text() if changelog.exists() else None,
}))
sys.exit(int(os.environ.get("FAKE_EXIT", "0")))
"""


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(WORKSPACE_ENV, raising=False)
    monkeypatch.delenv("NEW_VERSION", raising=False)


def _configure(root: Path, tmp_path: Path) -> tuple[Path, Path]:
    script = tmp_path / "recorder.py"
    script.write_text(RECORDER, encoding="utf-8")
    release_log = tmp_path / "release.json"
    hook_log = tmp_path / "hook.json"
    (root / "reltask.toml").write_text(
        "[release]\n"
        f"tool = ['{sys.executable}', '{script}', '{release_log}']\n"
        "[changelog]\n"
        f"generator = ['{sys.executable}', '{script}', '{hook_log}']\n",
        encoding="utf-8",
    )
    return release_log, hook_log


def _read(log: Path) -> dict[str, object]:
    return json.loads(log.read_text(encoding="utf-8"))


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_release_discards_edits_and_forwards_args(git_repo: Path, tmp_path: Path) -> None:
    release_log, _ = _configure(git_repo, tmp_path)
    (git_repo / "CHANGELOG.md").write_text(BASELINE + "- local edit\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["--workspace", str(git_repo), "release", "--dry-run", "minor", "-p", "crate", "--help"],
    )

    assert result.exit_code == 0, result.output
    recorded = _read(release_log)
    assert recorded["argv"] == ["--dry-run", "minor", "-p", "crate", "--help"]
    assert recorded["changelog"] == BASELINE
    assert (git_repo / "CHANGELOG.md").read_text(encoding="utf-8") == BASELINE


def test_release_forwards_separator_and_edge_tokens(git_repo: Path, tmp_path: Path) -> None:
    release_log, _ = _configure(git_repo, tmp_path)
    forwarded = ["a", "--", "b", "-abc", "", " sp ", "--workspace", "/x", "-", "--"]

    result = runner.invoke(app, ["--workspace", str(git_repo), "release", *forwarded])

    assert result.exit_code == 0, result.output
    assert _read(release_log)["argv"] == forwarded


def test_release_leading_separator_is_forwarded(git_repo: Path, tmp_path: Path) -> None:
    release_log, _ = _configure(git_repo, tmp_path)

    result = runner.invoke(app, ["--workspace", str(git_repo), "release", "--", "--execute"])

    assert result.exit_code == 0, result.output
    assert _read(release_log)["argv"] == ["--", "--execute"]


def test_release_without_args(git_repo: Path, tmp_path: Path) -> None:
    release_log, _ = _configure(git_repo, tmp_path)

    result = runner.invoke(app, ["--workspace", str(git_repo), "release"])

    assert result.exit_code == 0, result.output
    assert _read(release_log)["argv"] == []


def test_release_exit_code_is_release_tools(
    git_repo: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _configure(git_repo, tmp_path)
    monkeypatch.setenv("FAKE_EXIT", "7")

    result = runner.invoke(app, ["--workspace", str(git_repo), "release"])

    assert result.exit_code == 7


def test_release_without_baseline_aborts(empty_git_repo: Path, tmp_path: Path) -> None:
    release_log, _ = _configure(empty_git_repo, tmp_path)
    (empty_git_repo / "CHANGELOG.md").write_text("draft\n", encoding="utf-8")
    expected = Repository(empty_git_repo).checkout("HEAD", "CHANGELOG.md")
    assert isinstance(expected, Err)

    result = runner.invoke(app, ["--workspace", str(empty_git_repo), "release", "--execute"])

    assert result.exit_code == expected.error.returncode
    assert result.exit_code != 0
    assert not release_log.exists()
    assert (empty_git_repo / "CHANGELOG.md").read_text(encoding="utf-8") == "draft\n"


def test_release_missing_tool_is_env_error(git_repo: Path) -> None:
    (git_repo / "reltask.toml").write_text(
        "[release]\ntool = ['reltask-no-such-release-tool']\n", encoding="utf-8"
    )

    result = runner.invoke(app, ["--workspace", str(git_repo), "release"])

    assert result.exit_code == int(ErrorCode.ENV_ERROR)


def test_release_verbose_announces_steps(git_repo: Path, tmp_path: Path) -> None:
    _configure(git_repo, tmp_path)

    result = runner.invoke(app, ["--workspace", str(git_repo), "--verbose", "release", "x"])

    assert result.exit_code == 0, result.output
    assert "git checkout HEAD -- CHANGELOG.md" in result.output


def test_release_hook_reads_new_version(git_repo: Path, tmp_path: Path) -> None:
    _, hook_log = _configure(git_repo, tmp_path)

    result = runner.invoke(
        app,
        ["--workspace", str(git_repo), "release-hook"],
        env={"NEW_VERSION": "2.3.0"},
    )

    assert result.exit_code == 0, result.output
    assert _read(hook_log)["argv"] == ["-t", "2.3.0", "-o", "CHANGELOG.md"]


def test_release_hook_unset_version_forwards_empty_tag(git_repo: Path, tmp_path: Path) -> None:
    _, hook_log = _configure(git_repo, tmp_path)

    result = runner.invoke(app, ["--workspace", str(git_repo), "release-hook"])

    assert result.exit_code == 0, result.output
    assert _read(hook_log)["argv"] == ["-t", "", "-o", "CHANGELOG.md"]


def test_release_hook_tag_option_wins(git_repo: Path, tmp_path: Path) -> None:
    _, hook_log = _configure(git_repo, tmp_path)

    result = runner.invoke(
        app,
        ["--workspace", str(git_repo), "release-hook", "--tag", "9.9.9"],
        env={"NEW_VERSION": "2.3.0"},
    )

    assert result.exit_code == 0, result.output
    assert _read(hook_log)["argv"] == ["-t", "9.9.9", "-o", "CHANGELOG.md"]


def test_release_hook_does_not_touch_git(git_repo: Path, tmp_path: Path) -> None:
    _, hook_log = _configure(git_repo, tmp_path)
    edited = BASELINE + "- local edit\n"
    (git_repo / "CHANGELOG.md").write_text(edited, encoding="utf-8")

    result = runner.invoke(
        app, ["--workspace", str(git_repo), "release-hook"], env={"NEW_VERSION": "1.1.0"}
    )

    assert result.exit_code == 0, result.output
    assert _read(hook_log)["changelog"] == edited


def test_invalid_workspace(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--workspace", str(tmp_path), "release"])

    assert result.exit_code == int(ErrorCode.ENV_ERROR)


def test_invalid_config(git_repo: Path) -> None:
    (git_repo / "reltask.toml").write_text("[release\n", encoding="utf-8")

    result = runner.invoke(app, ["--workspace", str(git_repo), "release"])

    assert result.exit_code == int(ErrorCode.USER_ERROR)
