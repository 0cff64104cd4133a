"""
Configuration management for ScreenSound.

Settings are read from a TOML file. The packaged `defaults.toml` supplies every
key; a user file only needs the keys it wants to change.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Path to the config directory
CONFIG_DIR = Path(__file__).parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "defaults.toml"


@dataclass
class DatabaseSettings:
    path: str = "screensound.db"


@dataclass
class EnrichmentSettings:
    enabled: bool = True
    endpoint: str = "https://www.theaudiodb.com/api/v1/json/2/search.php"
    connect_timeout: float = 10.0
    total_timeout: float = 10.0
    user_agent: str = "Mozilla/5.0"
    biography_limit: int = 300

    def __post_init__(self) -> None:
        if self.connect_timeout <= 0 or self.total_timeout <= 0:
            raise ValueError("enrichment timeouts must be > 0")
        if self.biography_limit <= 0:
            raise ValueError("enrichment.biography_limit must be > 0")


@dataclass
class Settings:
    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    enrichment: EnrichmentSettings = field(default_factory=EnrichmentSettings)


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table")
    return section


def load_settings(config_path: Path | None = None) -> Settings:
    """
    Load settings from the packaged defaults, overlaid with `config_path`.

    Args:
        config_path: Optional user TOML file.

    Returns:
        Loaded Settings instance.
    """
    data = _read_toml(DEFAULT_CONFIG_PATH)
    if config_path is not None:
        logger.debug("Loading settings from %s", config_path)
        user = _read_toml(config_path)
        for name in ("database", "enrichment"):
            data[name] = {**_section(data, name), **_section(user, name)}

    db = _section(data, "database")
    enrichment = _section(data, "enrichment")

    return Settings(
        database=DatabaseSettings(path=str(db.get("path", "screensound.db"))),
        enrichment=EnrichmentSettings(
            enabled=bool(enrichment.get("enabled", True)),
            endpoint=str(enrichment.get("endpoint", EnrichmentSettings.endpoint)),
            connect_timeout=float(enrichment.get("connect_timeout", 10.0)),
            total_timeout=float(enrichment.get("total_timeout", 10.0)),
            user_agent=str(enrichment.get("user_agent", "Mozilla/5.0")),
            biography_limit=int(enrichment.get("biography_limit", 300)),
        ),
    )


# Global singleton instance (lazy loaded)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings (lazy loaded singleton)."""
    global _settings

    if _settings is None:
        _settings = load_settings()

    return _settings


def reload_settings(config_path: Path | None = None) -> Settings:
    """Force reload of the global settings."""
    global _settings
    _settings = load_settings(config_path)
    return _settings
