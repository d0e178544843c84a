"""
saga_store.repositories

Repository package.

Responsibilities:
- Group saga repository implementations behind the `SagaRepository` port.
"""

# Package marker; repositories are imported directly from submodules.
