from __future__ import annotations

from dataclasses import dataclass

from reltask.core.config import Config


@dataclass(frozen=True, slots=True)
class ReleaseSettings:
    """Where the changelog lives and which tools rewrite it.

    `changelog` is relative to the working tree root.
    """

    changelog: str
    baseline_ref: str
    release_tool: tuple[str, ...]
    changelog_tool: tuple[str, ...]

    @classmethod
    def from_config(cls, config: Config) -> ReleaseSettings:
        return cls(
            changelog=config.changelog.path,
            baseline_ref=config.changelog.baseline,
            release_tool=config.release.tool,
            changelog_tool=config.changelog.generator,
        )


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    """Arguments forwarded verbatim to the release tool."""

    args: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class HookRequest:
    """Version to tag the regenerated changelog with.

    Passed through opaquely; an empty string is a valid value.
    """

    version: str
