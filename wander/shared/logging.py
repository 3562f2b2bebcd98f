"""
Logging Configuration - Shared Layer

Structured logging for the API server and the command line observers.
Standard library records and structlog events share one formatter so that
uvicorn, asyncpg and application events render the same way.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from wander.shared.consts import EnumEnvironment


def _env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(name)
    return value if value else default


def _build_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
    stream: Any = None,
) -> None:
    """
    Configure standard logging and structlog.

    Called once at import time with values from the environment so that
    startup is logged, then again by :func:`update_logging_from_settings`
    when the settings are available.

    Args:
        level: Log level name. Falls back to ``LOG_LEVEL`` then ``INFO``.
        file_path: Optional log file. Falls back to ``LOG_FILE_PATH``.
        environment: ``production`` renders JSON, anything else the console
            renderer.
        stream: Console stream, ``sys.stdout`` by default. The CLI passes
            ``sys.stderr`` so it does not interleave with its own output.
    """
    log_level = level or _env_or_default("LOG_LEVEL", "INFO") or "INFO"
    log_file = file_path or _env_or_default("LOG_FILE_PATH")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_build_renderer(environment),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.debug("Logging configured with level: %s", log_level)


def update_logging_from_settings(settings: Any, stream: Any = None) -> None:
    """
    Reconfigure logging from the loaded application settings.

    Args:
        settings: Application settings exposing ``logging`` and ``environment``.
        stream: Optional console stream override.
    """
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=log_level,
            file_path=settings.logging.file_path,
            environment=environment,
            stream=stream,
        )
    except (AttributeError, OSError) as exc:
        logging.error("Failed to update logging from settings: %s", exc)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
