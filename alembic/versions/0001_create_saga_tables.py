"""create saga tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

SCHEMA = "NSaga"


def upgrade() -> None:
    op.create_table(
        "Sagas",
        sa.Column("CorrelationId", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("BlobData", sa.Text(), nullable=False),
        schema=SCHEMA,
    )
    op.create_table(
        "Headers",
        sa.Column("CorrelationId", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("Key", sa.String(256), primary_key=True),
        sa.Column("Value", sa.Text(), nullable=False),
        schema=SCHEMA,
    )
    op.create_index(
        "ix_headers_correlation_id", "Headers", ["CorrelationId"], schema=SCHEMA
    )


def downgrade() -> None:
    op.drop_index("ix_headers_correlation_id", table_name="Headers", schema=SCHEMA)
    op.drop_table("Headers", schema=SCHEMA)
    op.drop_table("Sagas", schema=SCHEMA)
