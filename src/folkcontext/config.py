"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (FOLKCONTEXT__LOGGING__LEVEL=DEBUG)
  2. folkcontext.yaml       (searched in cwd, then platform config dir)
  3. Hardcoded defaults

The config file is optional and every field has a default. The site being
browsed is fixed and is deliberately not part of the settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

SITE_ORIGIN = "https://www.mainlynorfolk.info"

# Index pages on the site, all site-absolute
FOLK_INDEX_PATH = "/folk/"
SONGS_DIR_PATH = "/folk/songs/"
CHILD_INDEX_PATH = "/folk/songs/childindex.html"
LAWS_INDEX_PATH = "/folk/songs/lawsindex.html"

CACHE_TTL_SECONDS = 3600


def _find_config_file() -> str | None:
    """Return the path of the first folkcontext.yaml found, or None."""
    candidates = [
        Path("folkcontext.yaml"),
        Path(platformdirs.user_config_dir("folkcontext")) / "folkcontext.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class CacheSettings(BaseModel):
    max_entries: int = Field(default=512, ge=1)


class FetcherSettings(BaseModel):
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = "folkcontext/1.0"


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: FOLKCONTEXT__CACHE__MAX_ENTRIES=64
        env_prefix="FOLKCONTEXT__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    cache: CacheSettings = CacheSettings()
    fetcher: FetcherSettings = FetcherSettings()
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
