from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment.

    Env vars (all optional, prefix BASKET_):
      - BASKET_DATA_DIR   directory holding products.json and baskets.json
      - BASKET_BASKET_ID  basket used when the CLI is not given --basket
      - BASKET_LOG_LEVEL  root log level (DEBUG, INFO, WARNING, ...)
    """

    data_dir: Path = Path("data")
    basket_id: str = "default"
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="BASKET_", env_file=".env", extra="ignore"
    )

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def baskets_file(self) -> Path:
        return self.data_dir / "baskets.json"


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every command.
    """
    return Settings()
