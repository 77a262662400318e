from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    provident_base_url: str = "https://www.providentmetals.com"
    spot_currency: str = "USD"
    http_timeout: float = 10.0
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@cache
def config() -> AppSettings:
    return AppSettings()
