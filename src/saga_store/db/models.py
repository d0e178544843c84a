"""
saga_store.db.models

Persistence schema for saga state.

Responsibilities:
- SagaRecord: one serialized payload per correlation id (`NSaga.Sagas`).
- HeaderRecord: string headers per correlation id (`NSaga.Headers`).

Table and column names are a compatibility contract with existing databases;
do not rename them.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Index, String, Text, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from saga_store.db.base import Base

# Logical schema; mapped to a physical one (or none) via `schema_translate_map`.
SAGA_SCHEMA = "NSaga"


class SagaRecord(Base):
    __tablename__ = "Sagas"

    correlation_id: Mapped[uuid.UUID] = mapped_column(
        "CorrelationId", SAUuid(as_uuid=True), primary_key=True
    )
    blob_data: Mapped[str] = mapped_column("BlobData", Text, nullable=False)

    __table_args__ = {"schema": SAGA_SCHEMA}


class HeaderRecord(Base):
    __tablename__ = "Headers"

    # (CorrelationId, Key) is the row identity; a saga owns many header rows.
    correlation_id: Mapped[uuid.UUID] = mapped_column(
        "CorrelationId", SAUuid(as_uuid=True), primary_key=True
    )
    key: Mapped[str] = mapped_column("Key", String(256), primary_key=True)
    value: Mapped[str] = mapped_column("Value", Text, nullable=False)

    __table_args__ = (
        Index("ix_headers_correlation_id", "CorrelationId"),
        {"schema": SAGA_SCHEMA},
    )


# --- Module Notes -----------------------------------------------------------
# There is deliberately no ForeignKey from Headers to Sagas: header rows may be
# written before or without a blob row, and deletes are issued per table.
