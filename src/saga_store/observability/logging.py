"""
saga_store.observability.logging

Structured logging configuration.

Responsibilities:
- Configure `structlog` for JSON logs.
- Provide stdlib-backed bound loggers for the store's own modules.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str, json: bool = True) -> None:
    """
    Structured logs, JSON by default; `json=False` renders key=value lines for a
    terminal. Intended to be called once by the host process.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    # Backed by a stdlib logger so the host's logging levels decide what is emitted;
    # an unconfigured host (root at WARNING) sees none of the debug events.
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


# --- Module Notes -----------------------------------------------------------
# The store never calls `configure_logging` itself. Hosts that want its events raise
# the `saga_store` logger to DEBUG; message-handling code can bind the current
# message id with `structlog.contextvars.bind_contextvars` and it rides along.
