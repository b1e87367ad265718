"""Configuration loading and management."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from when.core.exceptions import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

CONFIG_NAME = "when.toml"
PYPROJECT_SECTION = "when"


@dataclass
class WhenConfig:
    """Loaded configuration."""

    defaults: dict[str, Any] = field(default_factory=dict)
    aliases: dict[str, str] = field(default_factory=dict)

    _source_path: Path | None = field(default=None, repr=False)

    def get_default(self, key: str, fallback: Any = None) -> Any:
        return self.defaults.get(key, fallback)

    def resolve_alias(self, phrase: str) -> str:
        """Return the aliased phrase when *phrase* names an alias, else *phrase*."""
        key = phrase.strip().lower()
        for name, value in self.aliases.items():
            if name.lower() == key:
                logger.debug(f"alias {name!r} -> {value!r}")
                return value
        return phrase


def find_config_file() -> Path | None:
    """Find configuration file in priority order.

    Search order:
    1. ./when.toml (current directory)
    2. ./pyproject.toml [tool.when] section
    3. Git repository root when.toml
    4. ~/.config/when/config.toml
    """
    cwd = Path.cwd()
    if (cwd / CONFIG_NAME).exists():
        return cwd / CONFIG_NAME

    if (cwd / "pyproject.toml").exists():
        try:
            with open(cwd / "pyproject.toml", "rb") as f:
                pyproject = tomllib.load(f)
            if PYPROJECT_SECTION in pyproject.get("tool", {}):
                return cwd / "pyproject.toml"
        except tomllib.TOMLDecodeError:
            # someone else's broken pyproject is not our config
            logger.debug(f"Ignoring unreadable {cwd / 'pyproject.toml'}")

    git_root = _find_git_root(cwd)
    if git_root and (git_root / CONFIG_NAME).exists():
        return git_root / CONFIG_NAME

    user_config = user_config_path()
    if user_config.exists():
        return user_config

    return None


def user_config_path() -> Path:
    return Path.home() / ".config" / "when" / "config.toml"


def _find_git_root(start: Path) -> Path | None:
    """Find git repository root."""
    current = start.resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return None


def load_config(path: Path | str | None = None) -> WhenConfig:
    """Load configuration from file.

    Args:
        path: Explicit config path or None to auto-discover

    Raises:
        ConfigNotFoundError: If an explicit *path* does not exist.
        ConfigError: If the file is not valid TOML or has the wrong shape.
    """
    if path is None:
        path = find_config_file()
    elif not Path(path).exists():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    if path is None:
        return WhenConfig()  # Empty config, use defaults

    path = Path(path)
    logger.debug(f"Loading config from {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    # Handle pyproject.toml
    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get(PYPROJECT_SECTION, {})

    defaults = data.get("defaults", {})
    aliases = data.get("aliases", {})
    if not isinstance(defaults, dict):
        raise ConfigError(f"[defaults] must be a table in {path}")
    if not isinstance(aliases, dict) or not all(isinstance(v, str) for v in aliases.values()):
        raise ConfigError(f"[aliases] must map names to phrases in {path}")

    config = WhenConfig(defaults=defaults, aliases=aliases)
    config._source_path = path

    return config


# Global config cache
_cached_config: WhenConfig | None = None


def get_config() -> WhenConfig:
    """Get the global configuration (cached)."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(path: Path | str | None = None) -> WhenConfig:
    """Reload configuration (clears cache)."""
    global _cached_config
    _cached_config = load_config(path)
    return _cached_config
