"""
saga_store.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the store (database URL, schema, logging).
- Offer a cached settings instance for callers that do not build their own.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration, e.g. `SAGA_STORE_DATABASE_URL`.
    Defaults are safe for local dev against a SQLite file.
    """

    model_config = SettingsConfigDict(env_prefix="SAGA_STORE_", case_sensitive=False)

    # dev/test create tables on startup; prod relies on Alembic.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "saga-store"
    log_level: str = "INFO"
    log_json: bool = True

    # Persistence
    database_url: str = "sqlite:///./sagas.db"
    # Physical schema for the logical `NSaga` schema; None for backends without schemas.
    db_schema: str | None = None
    pool_pre_ping: bool = True
    echo_sql: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# SQL Server deployments typically set SAGA_STORE_DB_SCHEMA=NSaga so tables resolve
# to `NSaga.Sagas` / `NSaga.Headers`.
