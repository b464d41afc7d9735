"""Application error taxonomy mapped onto HTTP status codes."""

from typing import Any, Optional


class AppError(Exception):
    """Base application error.

    Attributes:
        message: Human readable message (or structured detail) sent to the caller.
        status_code: HTTP status the error maps to.
    """

    def __init__(self, message: Any, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(str(message))


class UnauthenticatedError(AppError):
    """Missing or invalid bearer credential."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, status_code=401)


class ForbiddenError(AppError):
    """Authenticated, but not allowed to touch the target company."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, status_code=403)


class NotFoundError(AppError):
    def __init__(self, message: str = "Company not found"):
        super().__init__(message, status_code=404)


class BadRequestError(AppError):
    """Payload failed validation; message may be a structured field map."""

    def __init__(self, message: Any = "Bad request"):
        super().__init__(message, status_code=400)


class InternalError(AppError):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, status_code=500)


class DatabaseError(InternalError):
    """A call to the managed backend failed."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause
