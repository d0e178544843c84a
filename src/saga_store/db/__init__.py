"""
saga_store.db

Persistence package (SQLAlchemy).

Responsibilities:
- Provide ORM models for the saga blob and header tables.
- Provide engine/session setup and the transactional session scope.
"""

# Package marker.
