"""
saga_store.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create the saga tables for local development and tests.
- Keep production migration workflow separate (Alembic).
"""

from __future__ import annotations

from sqlalchemy import Engine

from saga_store.db import models  # noqa: F401  # ensure models are registered on Base.metadata
from saga_store.db.base import Base


def init_db(engine: Engine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Production should rely on Alembic migrations.
    """

    with engine.begin() as conn:
        Base.metadata.create_all(conn)


def drop_db(engine: Engine) -> None:
    with engine.begin() as conn:
        Base.metadata.drop_all(conn)
