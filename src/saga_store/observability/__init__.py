"""
saga_store.observability

Logging helpers shared by the store.
"""
