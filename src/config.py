"""Unified configuration loaded from .pageforge.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".pageforge.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG = Path.home() / ".config" / "pageforge" / "config.toml"


class ApiConfig(BaseModel):
    """[api] section — remote content API."""

    url: str = ""
    timeout: float = 30.0
    retry_limit: int = 2
    backoff: float = 0.5
    client_version: str = "1.0.0"

    @property
    def is_configured(self) -> bool:
        return bool(self.url)


class StorageConfig(BaseModel):
    """[storage] section — local JSON store."""

    directory: str = "./.pageforge"
    max_revisions: int = 50


class EditorConfig(BaseModel):
    """[editor] section."""

    autosave_interval: float = 10.0
    strict_schema: bool = True


class PageforgeConfig(BaseModel):
    """Top-level configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)

    @property
    def store_path(self) -> Path:
        return Path(self.storage.directory).expanduser()


def load_config(path: str | Path | None = None) -> PageforgeConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .pageforge.toml in CWD
    3. ~/.config/pageforge/config.toml

    Then overlay environment variables.
    """
    source = _find_config_file(path)
    data = _load_toml(source) if source is not None else {}
    if data:
        logger.info("Loaded config from %s", source)
    config = PageforgeConfig.model_validate(data) if data else PageforgeConfig()
    return _apply_env_vars(config)


def merge_cli_overrides(config: PageforgeConfig, **cli_kwargs: object) -> PageforgeConfig:
    """Overlay explicitly-set CLI flags onto the config.

    Values that are None were not given on the command line and leave
    the config untouched.
    """
    data = config.model_dump()

    mapping: dict[str, tuple[str, str]] = {
        "api_url": ("api", "url"),
        "api_timeout": ("api", "timeout"),
        "store_dir": ("storage", "directory"),
        "autosave_interval": ("editor", "autosave_interval"),
        "strict_schema": ("editor", "strict_schema"),
    }

    for key, value in cli_kwargs.items():
        if value is None:
            continue
        if key in mapping:
            section, field = mapping[key]
            data[section][field] = value

    return PageforgeConfig.model_validate(data)


def _find_config_file(path: str | Path | None) -> Path | None:
    if path is not None:
        explicit = Path(path)
        if explicit.exists():
            return explicit
        logger.warning("Config file not found: %s", explicit)
        return None
    candidates = [d / CONFIG_FILENAME for d in CONFIG_SEARCH_PATHS] + [GLOBAL_CONFIG]
    return next((c for c in candidates if c.exists()), None)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: PageforgeConfig) -> PageforgeConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "PAGEFORGE_API_URL": ("api", "url"),
        "PAGEFORGE_API_TIMEOUT": ("api", "timeout"),
        "PAGEFORGE_RETRY_LIMIT": ("api", "retry_limit"),
        "PAGEFORGE_STORE_DIR": ("storage", "directory"),
        "PAGEFORGE_MAX_REVISIONS": ("storage", "max_revisions"),
        "PAGEFORGE_AUTOSAVE_INTERVAL": ("editor", "autosave_interval"),
    }

    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    strict_raw = os.environ.get("PAGEFORGE_STRICT_SCHEMA")
    if strict_raw is not None:
        data["editor"]["strict_schema"] = strict_raw.lower() in ("true", "1", "yes")

    return PageforgeConfig.model_validate(data)
