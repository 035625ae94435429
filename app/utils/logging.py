# app/utils/logging.py
import logging
import sys

import structlog

from app.utils.settings import ENVIRONMENT, LOG_LEVEL

_configured = False


def configure_logging() -> None:
    """stdlib logging jako backend, structlog jako frontend"""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=LOG_LEVEL,
        stream=sys.stdout,
        format="%(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.contextvars.merge_contextvars,
    ]

    if ENVIRONMENT.lower() in ("production", "staging"):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    configure_logging()
    return structlog.get_logger(name)
