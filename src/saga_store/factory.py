"""
saga_store.factory

Saga construction from a type tag.

Responsibilities:
- Define the `SagaFactory` collaborator contract used by repositories.
- Provide `RegistrySagaFactory`, an explicit name -> `SagaType` registry.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from pydantic import ValidationError

from saga_store.errors import (
    SagaFactoryError,
    SagaTypeAlreadyRegisteredError,
    UnknownSagaTypeError,
)
from saga_store.sagas import Saga, SagaType


class SagaFactory(Protocol):
    def data_type(self, saga_type: str) -> type[Any]: ...

    def create(
        self,
        saga_type: str,
        correlation_id: uuid.UUID,
        data: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Saga[Any]: ...


class RegistrySagaFactory:
    def __init__(self, saga_types: Iterable[SagaType[Any]] = ()) -> None:
        self._types: dict[str, SagaType[Any]] = {}
        for saga_type in saga_types:
            self.register(saga_type)

    def register(self, saga_type: SagaType[Any]) -> SagaType[Any]:
        if saga_type.name in self._types:
            raise SagaTypeAlreadyRegisteredError(saga_type.name)
        self._types[saga_type.name] = saga_type
        return saga_type

    def resolve(self, saga_type: str) -> SagaType[Any]:
        try:
            return self._types[saga_type]
        except KeyError:
            raise UnknownSagaTypeError(saga_type) from None

    def data_type(self, saga_type: str) -> type[Any]:
        return self.resolve(saga_type).data_type

    def create(
        self,
        saga_type: str,
        correlation_id: uuid.UUID,
        data: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Saga[Any]:
        data_type = self.data_type(saga_type)
        if data is None:
            try:
                data = data_type()
            except ValidationError as e:
                raise SagaFactoryError(f"no default payload for {saga_type!r}: {e}") from e
        elif not isinstance(data, data_type):
            raise SagaFactoryError(
                f"payload for {saga_type!r} must be {data_type.__name__}, "
                f"got {type(data).__name__}"
            )
        return Saga(saga_type=saga_type, correlation_id=correlation_id, data=data, headers=headers)

    def new(self, saga_type: str) -> Saga[Any]:
        # Fresh saga: random id, default payload, no headers.
        return self.create(saga_type, uuid.uuid4())

    def __contains__(self, saga_type: object) -> bool:
        return saga_type in self._types
