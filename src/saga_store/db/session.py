"""
saga_store.db.session

SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the engine from settings (including the schema translation).
- Create the sessionmaker with safe defaults.
- Provide the transactional scope used for every repository write.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine
from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.orm import Session, sessionmaker

from saga_store.db.models import SAGA_SCHEMA
from saga_store.observability.logging import get_logger
from saga_store.settings import Settings

log = get_logger(__name__)


def create_engine(settings: Settings) -> Engine:
    # pool_pre_ping helps detect stale connections in long-lived processes.
    return sa_create_engine(
        settings.database_url,
        pool_pre_ping=settings.pool_pre_ping,
        echo=settings.echo_sql,
        execution_options={"schema_translate_map": {SAGA_SCHEMA: settings.db_schema}},
    )


def create_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    # expire_on_commit=False avoids surprising lazy loads after commits.
    return sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """
    One unit of work: commit when the block exits normally, roll back and
    re-raise otherwise. Nothing written inside the block is visible to other
    sessions unless the commit succeeds.
    """

    with session_factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            log.debug("transaction_rolled_back")
            session.rollback()
            raise


# --- Module Notes -----------------------------------------------------------
# Sessions are created per call; the sessionmaker itself is safe to share across threads.
