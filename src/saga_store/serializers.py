"""
saga_store.serializers

Payload <-> blob conversion.

Responsibilities:
- Define the `Serializer` collaborator contract used by repositories.
- Provide `JsonSerializer`, a pydantic-backed JSON implementation.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol, TypeVar

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from saga_store.errors import SerializationError

T = TypeVar("T")


class Serializer(Protocol):
    def serialize(self, payload: Any) -> str: ...

    def deserialize(self, text: str, target_type: type[T]) -> T: ...


@lru_cache(maxsize=256)
def _adapter(target_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target_type)


class JsonSerializer:
    """
    JSON via pydantic. UUIDs, datetimes and nested models are written in their
    canonical string forms, so `deserialize(serialize(x), type(x)) == x`.
    """

    def serialize(self, payload: Any) -> str:
        try:
            return _adapter(type(payload)).dump_json(payload).decode("utf-8")
        except (PydanticSerializationError, PydanticSchemaGenerationError) as e:
            raise SerializationError(f"cannot serialize {type(payload).__name__}: {e}") from e

    def deserialize(self, text: str, target_type: type[T]) -> T:
        try:
            return _adapter(target_type).validate_json(text)
        except (ValidationError, PydanticSchemaGenerationError) as e:
            raise SerializationError(
                f"cannot deserialize blob into {getattr(target_type, '__name__', target_type)}: {e}"
            ) from e


# --- Module Notes -----------------------------------------------------------
# Decode failures are never replaced by a default payload; the caller decides.
