"""
saga_store.errors

Error taxonomy for the store.

Responsibilities:
- Name the failures raised by the serializer and factory collaborators.

Store access failures are not wrapped: `sqlalchemy.exc.SQLAlchemyError` subclasses
reach the caller as raised by the driver. A missing saga is not an error either;
lookups return None.
"""

from __future__ import annotations


class SagaStoreError(Exception):
    """Base class for errors raised by saga_store itself."""


class SerializationError(SagaStoreError):
    """A saga payload could not be encoded to, or decoded from, its blob."""


class SagaFactoryError(SagaStoreError):
    """The factory could not construct a saga of the requested type."""


class UnknownSagaTypeError(SagaFactoryError):
    def __init__(self, saga_type: str) -> None:
        super().__init__(f"saga type not registered: {saga_type!r}")
        self.saga_type = saga_type


class SagaTypeAlreadyRegisteredError(SagaFactoryError):
    def __init__(self, saga_type: str) -> None:
        super().__init__(f"saga type already registered: {saga_type!r}")
        self.saga_type = saga_type
