"""
Logging Configuration

Structured logging setup using structlog.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Content created   namespace=article record_id=12 slug=immanuel-kant

Everything else (JSON):
    {"timestamp": "...", "level": "info", "event": "Content created", "namespace": "article", ...}

Usage:
======
    from athenaeum.shared.core.logging import logger, get_logger, log_context

    logger.info("Content created", namespace="article", record_id=record.id)

    repo_logger = get_logger("athenaeum.repositories")
    repo_logger.debug("Slug candidate taken", slug="immanuel-kant")

    # Bind request-scoped values (e.g. the acting admin) to every later log line
    log_context(admin_id=admin_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from athenaeum.config.settings import settings


def setup_logging() -> None:
    """
    Configure structlog and the stdlib root logger.

    Development gets the colored console renderer; any other APP_ENV
    (production, staging, test) gets one JSON object per line.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls in this context.

    Args:
        **kwargs: Key-value pairs to add to log context

    Example:
        log_context(request_id="abc-123", admin_id=7)
        logger.info("Article updated", record_id=12)  # includes request_id, admin_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


setup_logging()

logger = get_logger("athenaeum")
