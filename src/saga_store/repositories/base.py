"""
saga_store.repositories.base

The persistence port consumed by saga-execution logic.
"""

from __future__ import annotations

import uuid
from typing import Any, Protocol, runtime_checkable

from saga_store.sagas import Saga


@runtime_checkable
class SagaRepository(Protocol):
    """
    Find / Save / Complete for saga state keyed by correlation id.

    - `find` returns None for an unknown id; it never raises for "not found".
    - `save` upserts the payload and every header in `saga.headers` atomically.
      Headers absent from `saga.headers` are left as stored.
    - `complete` removes the payload and all headers atomically; unknown ids are a no-op.
    """

    def find(self, saga_type: str, correlation_id: uuid.UUID) -> Saga[Any] | None: ...

    def save(self, saga: Saga[Any]) -> None: ...

    def complete(self, saga: Saga[Any]) -> None: ...
