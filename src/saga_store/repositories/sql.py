"""
saga_store.repositories.sql

Relational saga repository (SQLAlchemy).

Responsibilities:
- Locate saga state by correlation id and rehydrate it through the factory.
- Upsert payload blob and headers in a single transaction.
- Delete payload blob and headers in a single transaction on completion.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import Engine, delete, select
from sqlalchemy.orm import Session, sessionmaker

from saga_store.db.init_db import init_db
from saga_store.db.models import SAGA_SCHEMA, HeaderRecord, SagaRecord
from saga_store.db.session import create_engine, create_sessionmaker, session_scope
from saga_store.factory import SagaFactory
from saga_store.observability.logging import get_logger
from saga_store.sagas import Saga
from saga_store.serializers import JsonSerializer, Serializer
from saga_store.settings import Settings, get_settings

log = get_logger(__name__)


class SqlSagaRepository:
    SAGA_DATA_TABLE_NAME = f"{SAGA_SCHEMA}.{SagaRecord.__tablename__}"
    HEADERS_TABLE_NAME = f"{SAGA_SCHEMA}.{HeaderRecord.__tablename__}"

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        factory: SagaFactory,
        serializer: Serializer | None = None,
        *,
        engine: Engine | None = None,
    ) -> None:
        self._session_factory = session_factory
        # Set only when this repository built the engine and so owns its pool.
        self._engine = engine
        self._factory = factory
        self._serializer = serializer if serializer is not None else JsonSerializer()

    @classmethod
    def from_settings(
        cls,
        factory: SagaFactory,
        settings: Settings | None = None,
        serializer: Serializer | None = None,
    ) -> SqlSagaRepository:
        settings = settings if settings is not None else get_settings()
        engine = create_engine(settings)
        if settings.env in ("dev", "test"):
            # Dev/test convenience; prod schemas are managed by Alembic.
            init_db(engine)
        return cls(create_sessionmaker(engine), factory, serializer, engine=engine)

    @property
    def engine(self) -> Engine | None:
        return self._engine

    def close(self) -> None:
        """Release the connection pool of an engine created by `from_settings`."""
        if self._engine is not None:
            self._engine.dispose()

    def find(self, saga_type: str, correlation_id: uuid.UUID) -> Saga[Any] | None:
        with self._session_factory() as session:
            record = session.get(SagaRecord, correlation_id)
            if record is None:
                log.debug(
                    "saga_not_found", saga_type=saga_type, correlation_id=str(correlation_id)
                )
                return None

            data = self._serializer.deserialize(
                record.blob_data, self._factory.data_type(saga_type)
            )
            headers = {h.key: h.value for h in self._headers_for(session, correlation_id)}

        saga = self._factory.create(saga_type, correlation_id, data, headers)
        log.debug("saga_found", saga_type=saga_type, correlation_id=str(correlation_id))
        return saga

    def save(self, saga: Saga[Any]) -> None:
        # Encode before opening the transaction so a bad payload never touches the store.
        blob = self._serializer.serialize(saga.data)
        correlation_id = saga.correlation_id

        with session_scope(self._session_factory) as session:
            record = session.get(SagaRecord, correlation_id, with_for_update=True)
            if record is not None:
                record.blob_data = blob
            else:
                session.add(SagaRecord(correlation_id=correlation_id, blob_data=blob))

            existing = {h.key: h for h in self._headers_for(session, correlation_id)}
            for key, value in saga.headers.items():
                header = existing.get(key)
                if header is not None:
                    header.value = value
                else:
                    session.add(HeaderRecord(correlation_id=correlation_id, key=key, value=value))

        log.debug(
            "saga_saved",
            saga_type=saga.saga_type,
            correlation_id=str(correlation_id),
            headers=len(saga.headers),
        )

    def complete(self, saga: Saga[Any]) -> None:
        correlation_id = saga.correlation_id
        with session_scope(self._session_factory) as session:
            session.execute(delete(SagaRecord).where(SagaRecord.correlation_id == correlation_id))
            session.execute(
                delete(HeaderRecord).where(HeaderRecord.correlation_id == correlation_id)
            )

        log.debug("saga_completed", saga_type=saga.saga_type, correlation_id=str(correlation_id))

    @staticmethod
    def _headers_for(session: Session, correlation_id: uuid.UUID) -> list[HeaderRecord]:
        stmt = select(HeaderRecord).where(HeaderRecord.correlation_id == correlation_id)
        return list(session.execute(stmt).scalars().all())


# --- Module Notes -----------------------------------------------------------
# Failures (driver errors, serializer and factory errors) are neither logged nor
# caught here; `session_scope` rolls back and the original exception propagates.
