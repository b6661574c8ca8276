from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION = "1.0.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Greenlight Movie API"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    port: int = Field(default=4000, ge=1, le=65535)
    idle_timeout_seconds: int = Field(default=60, ge=1)

    # only carried for the persistence layer, nothing opens it yet
    db_dsn: str = "postgres://greenlight@localhost/greenlight"


@lru_cache
def get_settings() -> Settings:
    return Settings()
