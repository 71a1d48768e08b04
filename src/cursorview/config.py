"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (CURSORVIEW__SOURCE__SEED_URL=https://...)
  2. cursorview.yaml        (searched in cwd, then platform config dir)
  3. Hardcoded defaults

The config file is optional; all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from cursorview import __version__

DEFAULT_SEED_URL = "https://pokeapi.co/api/v2/pokemon?limit=50"


def _find_config_file() -> str | None:
    """Return the path of the first cursorview.yaml found, or None."""
    candidates = [
        Path("cursorview.yaml"),
        Path(platformdirs.user_config_dir("cursorview")) / "cursorview.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class SourceSettings(BaseModel):
    seed_url: str = DEFAULT_SEED_URL


class FetcherSettings(BaseModel):
    timeout_seconds: float = 30.0
    user_agent: str = f"cursorview/{__version__}"
    # One listing page fans out to one request per item; pages are capped at 50.
    max_connections: int = 50
    max_keepalive_connections: int = 10


class SearchSettings(BaseModel):
    fuzzy_score_cutoff: int = 70
    fuzzy_max_results: int = 5


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: CURSORVIEW__FETCHER__TIMEOUT_SECONDS=10
        env_prefix="CURSORVIEW__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    source: SourceSettings = SourceSettings()
    fetcher: FetcherSettings = FetcherSettings()
    search: SearchSettings = SearchSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
