"""
Error Handler Middleware

Global exception handling for the API.

Error Response Format:
======================
    {
        "error": {
            "code": "HAS_RELATED_RECORDS",
            "message": "Cannot delete BiographyEntry: it has related records",
            "details": {"record_id": 3}
        }
    }

Exception Handling:
===================
1. AthenaeumException subclasses     → their status_code and to_dict()
2. Request/Pydantic validation errors → 400 VALIDATION_ERROR
3. Other exceptions                   → 500 with generic message (details hidden)

Usage:
======
    from athenaeum.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from athenaeum.shared.core.exceptions import AthenaeumException
from athenaeum.shared.core.logging import logger


def _validation_response(errors: list) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": jsonable_encoder(errors)},
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers on the application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(AthenaeumException)
    async def athenaeum_exception_handler(
        request: Request,
        exc: AthenaeumException,
    ) -> JSONResponse:
        """Errors raised by the core carry their own status and code."""
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(exc.to_dict()),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Body/query/path did not match the declared schema."""
        logger.warning(
            "Request validation error",
            errors=exc.errors(),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Pydantic errors raised while building inputs inside dependencies."""
        logger.warning(
            "Validation error",
            errors=exc.errors(),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
