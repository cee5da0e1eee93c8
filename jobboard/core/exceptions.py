"""
Application exceptions.

Services raise these; the handlers registered in main.py turn them into
JSON responses of the form {"error": ..., "code": ..., "details": ...}.
"""

from typing import Any, List, Optional


class AppError(Exception):
    """Base class for every error that maps onto an HTTP response."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(AppError):
    """400 - malformed or missing input. details lists every violated rule."""

    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(self, errors: List[str], message: str = "Validation failed"):
        super().__init__(message, details=errors)


class ConflictError(AppError):
    """400 - uniqueness violation (duplicate username or email)."""

    status_code = 400
    code = "CONFLICT"


class AuthError(AppError):
    """401 - missing/invalid token or bad credentials."""

    status_code = 401
    code = "UNAUTHORIZED"


class ForbiddenError(AppError):
    """403 - authenticated but not allowed to touch the resource."""

    status_code = 403
    code = "FORBIDDEN"


class NotFoundError(AppError):
    """404 - referenced entity does not exist."""

    status_code = 404
    code = "NOT_FOUND"


class InternalError(AppError):
    """500 - storage or unexpected failure. The message is safe to show clients."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
