"""
API Middleware

- error_handler: maps the error taxonomy onto JSON error responses
"""

from athenaeum.api.middleware.error_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
