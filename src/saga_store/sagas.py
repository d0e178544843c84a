"""
saga_store.sagas

In-memory saga aggregate.

Responsibilities:
- `SagaType`: a named saga kind bound to its payload model.
- `Saga`: one saga instance (correlation id, payload, headers).
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT", bound=BaseModel)


@dataclass(frozen=True)
class SagaType(Generic[DataT]):
    name: str
    data_type: type[DataT]


class Saga(Generic[DataT]):
    """
    A saga instance as seen by business logic.

    `correlation_id` and `saga_type` are fixed at construction. `data` and
    `headers` belong to the saga and are mutated by the caller between saves.
    """

    def __init__(
        self,
        *,
        saga_type: str,
        correlation_id: uuid.UUID,
        data: DataT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._saga_type = saga_type
        self._correlation_id = correlation_id
        self.data = data
        self.headers: dict[str, str] = dict(headers or {})

    @property
    def saga_type(self) -> str:
        return self._saga_type

    @property
    def correlation_id(self) -> uuid.UUID:
        return self._correlation_id

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Saga):
            return NotImplemented
        return (
            self._saga_type == other._saga_type
            and self._correlation_id == other._correlation_id
            and self.data == other.data
            and self.headers == other.headers
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Saga(saga_type={self._saga_type!r}, correlation_id={self._correlation_id}, "
            f"data={self.data!r}, headers={self.headers!r})"
        )
