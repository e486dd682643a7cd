"""Typed configuration loading and access.

reltask reads an optional `reltask.toml` from the working tree root:

    [changelog]
    path = "CHANGELOG.md"
    baseline = "HEAD"
    generator = ["git", "cliff"]

    [release]
    tool = ["cargo", "release"]

Every key is optional; missing or malformed values fall back to defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_argv, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_BASELINE_REF",
    "DEFAULT_CHANGELOG_PATH",
    "DEFAULT_CHANGELOG_TOOL",
    "DEFAULT_RELEASE_TOOL",
    "ChangelogConfig",
    "Config",
    "ConfigError",
    "ReleaseToolConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "reltask.toml"

DEFAULT_CHANGELOG_PATH = "CHANGELOG.md"
DEFAULT_BASELINE_REF = "HEAD"
DEFAULT_CHANGELOG_TOOL: tuple[str, ...] = ("git", "cliff")
DEFAULT_RELEASE_TOOL: tuple[str, ...] = ("cargo", "release")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ChangelogConfig:
    """Changelog file and the generator that rewrites it."""

    path: str = DEFAULT_CHANGELOG_PATH
    baseline: str = DEFAULT_BASELINE_REF
    generator: tuple[str, ...] = DEFAULT_CHANGELOG_TOOL


@dataclass(frozen=True, slots=True)
class ReleaseToolConfig:
    """Release tool command prefix."""

    tool: tuple[str, ...] = DEFAULT_RELEASE_TOOL


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    changelog: ChangelogConfig = field(default_factory=ChangelogConfig)
    release: ReleaseToolConfig = field(default_factory=ReleaseToolConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        changelog: StrDict = get_table(data, "changelog") or {}
        release: StrDict = get_table(data, "release") or {}

        return cls(
            changelog=ChangelogConfig(
                path=get_str(changelog, "path") or DEFAULT_CHANGELOG_PATH,
                baseline=get_str(changelog, "baseline") or DEFAULT_BASELINE_REF,
                generator=get_argv(changelog, "generator") or DEFAULT_CHANGELOG_TOOL,
            ),
            release=ReleaseToolConfig(
                tool=get_argv(release, "tool") or DEFAULT_RELEASE_TOOL,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to reltask.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config if the file exists, otherwise return the defaults.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
