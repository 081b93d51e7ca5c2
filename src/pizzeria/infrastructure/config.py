"""
Pizzeria — runtime settings, read from PIZZERIA_* environment variables or .env
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PIZZERIA_", env_file=".env", extra="ignore")

    SERVICE_NAME: str = "pizzeria"

    DATA_DIR: Path = Path("data")
    ORDERS_FILE: str = "orders.json"

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @property
    def orders_path(self) -> Path:
        return self.DATA_DIR / self.ORDERS_FILE


@lru_cache()
def get_settings() -> Settings:
    return Settings()
