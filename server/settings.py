from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple, Type

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from bugview.jira import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT, DEFAULT_USER_AGENT

DEFAULT_CONFIG_FILE = "config.json"


def config_file() -> Path:
    return Path(os.getenv("BUGVIEW_CONFIG", DEFAULT_CONFIG_FILE))


class UrlSettings(BaseModel):
    base: str = Field(min_length=1)
    path: str = Field(min_length=1)


class Settings(BaseSettings):
    # Required: the process refuses to start without these
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    url: UrlSettings
    label: str = Field(min_length=1)
    port: int = Field(gt=0, lt=65536)

    # Optional
    host: str = "0.0.0.0"
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    templates_dir: Optional[str] = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BUGVIEW_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # config.json in the shape the service has always used:
        # {"username": .., "password": .., "url": {"base": .., "path": ..}, "label": .., "port": ..}
        json_settings = JsonConfigSettingsSource(settings_cls, json_file=config_file())
        return init_settings, env_settings, dotenv_settings, json_settings, file_secret_settings
