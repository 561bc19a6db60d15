"""Repository configuration stored in `.monotag/config.toml`.

Example config:
  # Push new tags without asking
  push_always = true
  remote = "origin"
  apps_dir = "packages"
  app_marker = "pyproject.toml"
  recent_commits = 20
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import tomlkit

CONFIG_DIR_NAME = ".monotag"
CONFIG_FILE_NAME = "config.toml"


class ConfigError(Exception):
    """Raised when config.toml holds a value of the wrong type."""


@dataclass(frozen=True)
class MonotagConfig:
    """In-memory representation of `.monotag/config.toml`."""

    push_always: bool = False
    remote: str = "origin"
    apps_dir: str = "apps"
    app_marker: str = "package.json"
    recent_commits: int = 15


def get_config_keys() -> dict[str, str]:
    """User-exposed config keys with descriptions, in display order."""
    return {
        "push_always": "Push new tags to the remote without asking",
        "remote": "Remote used to list and push tags",
        "apps_dir": "Directory (relative to the repo root) holding the apps",
        "app_marker": "File that marks a subdirectory of apps_dir as an app",
        "recent_commits": "Number of commits offered when picking the commit to tag",
    }


def config_path(repo_root: Path) -> Path:
    return repo_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _field_types() -> dict[str, type]:
    defaults = MonotagConfig()
    return {f.name: type(getattr(defaults, f.name)) for f in fields(MonotagConfig)}


def _check_value(key: str, value: Any) -> Any:
    expected = _field_types()[key]
    # bool is a subclass of int; reject true/false for integer keys
    if expected is int and isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    if not isinstance(value, expected):
        raise ConfigError(f"{key} must be a {expected.__name__}, got {value!r}")
    if expected is int and value < 1:
        raise ConfigError(f"{key} must be at least 1, got {value!r}")
    if expected is str and not value:
        raise ConfigError(f"{key} must not be empty")
    return value


def config_from_mapping(data: Mapping[str, Any]) -> MonotagConfig:
    """Build a MonotagConfig from parsed TOML, ignoring unknown keys.

    Raises:
        ConfigError: If a known key has a value of the wrong type
    """
    known = _field_types()
    values = {key: _check_value(key, value) for key, value in data.items() if key in known}
    return MonotagConfig(**values)


def load_config(repo_root: Path) -> MonotagConfig:
    """Load config.toml for the repository if present; otherwise return defaults.

    Raises:
        ConfigError: If the file is not valid TOML or holds a value of the wrong type
    """
    path = config_path(repo_root)
    if not path.exists():
        return MonotagConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    return config_from_mapping(data)


def parse_config_value(key: str, raw: str) -> bool | int | str:
    """Convert command-line text to the type of config key `key`.

    Raises:
        ConfigError: If the key is unknown or the text does not fit its type
    """
    field_types = _field_types()
    if key not in field_types:
        raise ConfigError(f"Unknown config key: {key}")

    expected = field_types[key]
    if expected is bool:
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "1", "on"):
            return True
        if lowered in ("false", "no", "0", "off"):
            return False
        raise ConfigError(f"{key} must be true or false, got {raw!r}")
    if expected is int:
        try:
            value = int(raw)
        except ValueError as e:
            raise ConfigError(f"{key} must be an integer, got {raw!r}") from e
        return _check_value(key, value)
    return _check_value(key, raw)


def write_config_value(repo_root: Path, key: str, value: bool | int | str) -> None:
    """Set one key in config.toml, creating the file if needed.

    Preserves existing formatting and comments using tomlkit.
    """
    path = config_path(repo_root)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.exists():
        with path.open(encoding="utf-8") as f:
            doc = tomlkit.load(f)
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("monotag config for this repository"))

    doc[key] = value

    with path.open("w", encoding="utf-8") as f:
        tomlkit.dump(doc, f)
