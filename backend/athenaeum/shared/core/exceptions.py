"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    AthenaeumException (base)
       │
       ├── AuthenticationError (401)    ← Missing/invalid admin token
       ├── NotFoundError (404)          ← Update/delete/lookup target absent
       ├── ValidationError (400)        ← Required field missing or empty
       │      └── InvalidTitleError     ← Title unusable for slug derivation
       ├── ConflictError (409)
       │      └── RelatedRecordsError   ← Delete blocked by a foreign key
       ├── SlugExhaustedError (409)     ← Pathological slug collision volume
       └── PersistenceError (500)       ← Backend error with no known signal

Usage:
======
    from athenaeum.shared.core.exceptions import NotFoundError, ValidationError

    raise NotFoundError("Article", article_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Article with id '7' not found"}}

    raise ValidationError("Title is required", details={"field": "title"})

Exception Handling:
===================
    The core raises these; the API error handler converts them to JSON:
    {
        "error": {
            "code": "HAS_RELATED_RECORDS",
            "message": "Cannot delete BiographyEntry: it has related records",
            "details": {"record_id": 3}
        }
    }
"""

from typing import Any, Optional


class AthenaeumException(Exception):
    """
    Base exception for all Athenaeum application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(AthenaeumException):
    """
    Authentication failed error (401 Unauthorized).

    Raised by the API seam when the admin bearer token is missing or invalid.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(AthenaeumException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Article", 42)
        # Message: "Article with id '42' not found"

        raise NotFoundError("GlossaryTerm", "being", field="slug")
        # Message: "GlossaryTerm with slug 'being' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        field: str = "id",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with {field} '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(AthenaeumException):
    """
    Validation error (400 Bad Request).

    Raised when a payload fails a business rule before it reaches persistence.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
        )


class InvalidTitleError(ValidationError):
    """
    The title has no characters that survive slug normalization.

    Example:
        normalizer.normalize("!!!")  # raises InvalidTitleError
    """

    def __init__(self, title: Optional[str] = None) -> None:
        super().__init__(
            message="Title cannot be converted into a slug",
            details={"title": title},
            error_code="INVALID_TITLE",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT (409)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(AthenaeumException):
    """Resource conflict error (409 Conflict)."""

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "CONFLICT",
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code=error_code,
            details=details,
        )


class RelatedRecordsError(ConflictError):
    """
    Delete refused because other records still reference this one.

    Example:
        deleting a BiographyEntry that still has a BiographyAnnex
    """

    def __init__(self, resource: str, resource_id: Any) -> None:
        super().__init__(
            message=f"Cannot delete {resource}: it has related records",
            details={"record_id": resource_id},
            error_code="HAS_RELATED_RECORDS",
        )


class SlugExhaustedError(AthenaeumException):
    """
    Every suffix up to the attempt cap is taken.

    Signals a data anomaly rather than normal operation.
    """

    def __init__(self, fragment: str, namespace: str, attempts: int) -> None:
        super().__init__(
            message=f"No free slug for '{fragment}' in {namespace} after {attempts} attempts",
            status_code=409,
            error_code="SLUG_EXHAUSTED",
            details={"fragment": fragment, "namespace": namespace, "attempts": attempts},
        )


# ═══════════════════════════════════════════════════════════════════════════════
# PERSISTENCE (500)
# ═══════════════════════════════════════════════════════════════════════════════


class PersistenceError(AthenaeumException):
    """
    Wrapped backend error that matched no known constraint signal.

    The original exception is kept as ``__cause__``.
    """

    def __init__(
        self,
        operation: str,
        resource: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=f"Failed to {operation} {resource}",
            status_code=500,
            error_code="PERSISTENCE_ERROR",
            details=details,
        )
