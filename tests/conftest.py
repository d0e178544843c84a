"""
tests.conftest

Shared fixtures: a file-backed SQLite store per test, a saga type registry, and
both repository implementations.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from pathlib import Path

import pytest
from pydantic import BaseModel
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from saga_store.db.init_db import drop_db, init_db
from saga_store.db.session import create_engine, create_sessionmaker
from saga_store.factory import RegistrySagaFactory
from saga_store.repositories.memory import InMemorySagaRepository
from saga_store.repositories.sql import SqlSagaRepository
from saga_store.sagas import SagaType
from saga_store.settings import Settings


class OrderData(BaseModel):
    some_guid: uuid.UUID | None = None
    note: str = ""


class InvoiceData(BaseModel):
    amount: int = 0
    lines: list[str] = []


ORDER_SAGA = SagaType(name="order", data_type=OrderData)
INVOICE_SAGA = SagaType(name="invoice", data_type=InvoiceData)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(env="test", database_url=f"sqlite:///{tmp_path / 'sagas.db'}")


@pytest.fixture
def engine(settings: Settings) -> Iterator[Engine]:
    engine = create_engine(settings)
    init_db(engine)
    try:
        yield engine
    finally:
        drop_db(engine)
        engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return create_sessionmaker(engine)


@pytest.fixture
def factory() -> RegistrySagaFactory:
    return RegistrySagaFactory([ORDER_SAGA, INVOICE_SAGA])


@pytest.fixture
def sql_repo(
    session_factory: sessionmaker[Session], factory: RegistrySagaFactory
) -> SqlSagaRepository:
    return SqlSagaRepository(session_factory, factory)


@pytest.fixture(params=["sql", "memory"])
def repo(request: pytest.FixtureRequest, factory: RegistrySagaFactory):
    # Contract tests run against every implementation of the port.
    if request.param == "sql":
        return request.getfixturevalue("sql_repo")
    return InMemorySagaRepository(factory)
