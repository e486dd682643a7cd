"""Tests for reltask.output.console."""

from __future__ import annotations

import pytest

from reltask.output.console import MockConsole, RichConsole


def test_mock_console_records_styles() -> None:
    console = MockConsole()

    console.info("git checkout HEAD -- CHANGELOG.md")
    console.error("boom")
    console.print("raw")

    assert console.messages == [
        "info: git checkout HEAD -- CHANGELOG.md",
        "error: boom",
        "raw",
    ]
    assert console.has_error()


def test_rich_console_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    console = RichConsole()

    console.error("release tool could not be started: [cargo]")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "release tool could not be started: [cargo]" in captured.err
