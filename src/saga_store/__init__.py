"""
saga_store

Durable persistence for long-running saga state, keyed by correlation id.

Responsibilities:
- Expose package version metadata.
- Re-export the public surface (aggregate, collaborators, repositories).
"""

from saga_store.errors import (
    SagaFactoryError,
    SagaStoreError,
    SagaTypeAlreadyRegisteredError,
    SerializationError,
    UnknownSagaTypeError,
)
from saga_store.factory import RegistrySagaFactory, SagaFactory
from saga_store.repositories.base import SagaRepository
from saga_store.repositories.memory import InMemorySagaRepository
from saga_store.repositories.sql import SqlSagaRepository
from saga_store.sagas import Saga, SagaType
from saga_store.serializers import JsonSerializer, Serializer

__all__ = [
    "__version__",
    "InMemorySagaRepository",
    "JsonSerializer",
    "RegistrySagaFactory",
    "Saga",
    "SagaFactory",
    "SagaFactoryError",
    "SagaRepository",
    "SagaStoreError",
    "SagaType",
    "SagaTypeAlreadyRegisteredError",
    "SerializationError",
    "Serializer",
    "SqlSagaRepository",
    "UnknownSagaTypeError",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Submodules have no import-time side effects; logging is configured by the host.
