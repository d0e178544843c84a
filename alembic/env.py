"""
alembic.env

Alembic migration environment configuration.

Responsibilities:
- Provide metadata discovery for autogeneration.
- Configure offline/online migration execution.
- Resolve the logical `NSaga` schema the same way the runtime engine does.

Notes:
- This module is executed by Alembic, not imported by the library at runtime.
"""

from __future__ import annotations

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from saga_store.db import models  # noqa: F401  # ensure models are registered on Base.metadata
from saga_store.db.base import Base
from saga_store.db.models import SAGA_SCHEMA
from saga_store.settings import Settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
settings = Settings()


def _get_database_url() -> str:
    # Prefer explicit env var for migrations
    if "SAGA_STORE_DATABASE_URL" in os.environ:
        return os.environ["SAGA_STORE_DATABASE_URL"]
    return settings.database_url


def _schema_translate_map() -> dict[str, str | None]:
    return {SAGA_SCHEMA: settings.db_schema}


def run_migrations_offline() -> None:
    # Offline: emit SQL scripts without a DB connection.
    context.configure(
        url=_get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        version_table_schema=settings.db_schema,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = _get_database_url()
    connectable = engine_from_config(configuration, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with connectable.connect() as connection:
        connection = connection.execution_options(schema_translate_map=_schema_translate_map())
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            version_table_schema=settings.db_schema,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()


# --- Module Notes -----------------------------------------------------------
# Offline scripts are rendered against the logical schema names; set the physical
# schema via SAGA_STORE_DB_SCHEMA before running online migrations.
