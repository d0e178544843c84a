"""
saga_store.repositories.memory

Process-local saga repository.

Responsibilities:
- Mirror `SqlSagaRepository` semantics without a database (tests, local tooling).
- Store serialized blobs so the serializer contract is exercised the same way.
"""

from __future__ import annotations

import threading
import uuid
from typing import Any

from saga_store.factory import SagaFactory
from saga_store.sagas import Saga
from saga_store.serializers import JsonSerializer, Serializer


class InMemorySagaRepository:
    def __init__(self, factory: SagaFactory, serializer: Serializer | None = None) -> None:
        self._factory = factory
        self._serializer = serializer if serializer is not None else JsonSerializer()
        self._blobs: dict[uuid.UUID, str] = {}
        self._headers: dict[uuid.UUID, dict[str, str]] = {}
        self._lock = threading.Lock()

    def find(self, saga_type: str, correlation_id: uuid.UUID) -> Saga[Any] | None:
        with self._lock:
            blob = self._blobs.get(correlation_id)
            headers = dict(self._headers.get(correlation_id, {}))
        if blob is None:
            return None
        data = self._serializer.deserialize(blob, self._factory.data_type(saga_type))
        return self._factory.create(saga_type, correlation_id, data, headers)

    def save(self, saga: Saga[Any]) -> None:
        blob = self._serializer.serialize(saga.data)
        with self._lock:
            self._blobs[saga.correlation_id] = blob
            # Additive: keys missing from `saga.headers` stay stored until `complete`.
            self._headers.setdefault(saga.correlation_id, {}).update(saga.headers)

    def complete(self, saga: Saga[Any]) -> None:
        with self._lock:
            self._blobs.pop(saga.correlation_id, None)
            self._headers.pop(saga.correlation_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._blobs)
