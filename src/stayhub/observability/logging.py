"""
stayhub.observability.logging

Structured logging for the API process and the seed command.

Responsibilities:
- Route stdlib and structlog output through one processor chain.
- Emit JSON lines in test/prod and a colourised console in dev.
- Tag every event with the service name.
- Keep chatty third-party loggers (SQLAlchemy, uvicorn access) at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# Loggers that drown out request events at INFO.
_NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "uvicorn.access")


def configure_logging(*, service_name: str, level: str, json_logs: bool = True) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    renderer: Any
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _service_tag(service_name),
    ]
    if json_logs:
        # ConsoleRenderer formats exc_info itself; JSON needs it as data.
        processors.append(structlog.processors.dict_tracebacks)
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _service_tag(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
