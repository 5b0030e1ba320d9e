# app/utils/logging.py
import logging
import sys

import structlog

from app.utils.settings import LOG_LEVEL, LOG_FORMAT


def setup_stdlib_logging(level: str) -> None:
    #structlog renderuje gotowa linie, stdlib tylko ja wypisuje
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)

    logging.getLogger("celery").setLevel(logging.WARNING)
    logging.getLogger("kombu").setLevel(logging.WARNING)


def setup_structlog() -> None:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.contextvars.merge_contextvars,
    ]

    if LOG_FORMAT == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str | None = None) -> None:
    """Konfiguracja logowania (stdlib + structlog), wolana przy starcie aplikacji/workera."""
    setup_stdlib_logging((level or LOG_LEVEL).upper())
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
