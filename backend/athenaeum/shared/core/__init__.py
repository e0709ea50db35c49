"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions (the error taxonomy returned to callers)

Usage:
======
    from athenaeum.shared.core import logger, NotFoundError

    logger.info("Content deleted", namespace="article", record_id=record_id)
"""

from athenaeum.shared.core.logging import (
    logger,
    get_logger,
    log_context,
)
from athenaeum.shared.core.exceptions import (
    AthenaeumException,
    AuthenticationError,
    NotFoundError,
    ValidationError,
    InvalidTitleError,
    ConflictError,
    RelatedRecordsError,
    SlugExhaustedError,
    PersistenceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    # Exceptions
    "AthenaeumException",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "InvalidTitleError",
    "ConflictError",
    "RelatedRecordsError",
    "SlugExhaustedError",
    "PersistenceError",
]
