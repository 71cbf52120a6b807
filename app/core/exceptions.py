from typing import Any, Dict, Optional
from fastapi import status
from sqlalchemy.exc import IntegrityError


class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the services.
    Handlers in app.core.handlers turn it into a {"message": ...} response.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. COMMON ERRORS
# =========================================================

class BadRequestException(BaseAPIException):
    """400: missing or invalid required fields"""
    def __init__(self, message: str = "Bad Request", details: dict = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class UnauthorizedException(BaseAPIException):
    """401: credentials rejected"""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            code="UNAUTHORIZED",
            status_code=status.HTTP_401_UNAUTHORIZED
        )

class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )

class ConflictException(BaseAPIException):
    """409: uniqueness violation, or dependent rows block the change"""
    def __init__(self, message: str = "Conflict", details: dict = None):
        super().__init__(
            message=message,
            code="CONFLICT",
            status_code=status.HTTP_409_CONFLICT,
            details=details
        )

class InternalServerException(BaseAPIException):
    """500: store failure. The message goes to the caller, the cause to the log only."""
    def __init__(self, message: str = "An internal server error occurred."):
        super().__init__(
            message=message,
            code="INTERNAL_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

# =========================================================
# 2. AUTH ERRORS
# =========================================================

class InvalidRoleException(BadRequestException):
    def __init__(self, message: str = "Invalid role specified."):
        super().__init__(message=message)
        self.code = "INVALID_ROLE"

class InvalidCredentialsException(UnauthorizedException):
    """
    Same message whether the id or the password was wrong,
    so callers cannot tell which accounts exist.
    """
    def __init__(self):
        super().__init__(message="Invalid credentials.")
        self.code = "INVALID_CREDENTIALS"

# =========================================================
# 3. STORE ERRORS
# =========================================================

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True for duplicate-key errors on PostgreSQL (SQLSTATE) and SQLite (message)."""
    if getattr(exc.orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    text = str(exc.orig).upper()
    return "UNIQUE" in text or "DUPLICATE" in text


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    if getattr(exc.orig, "pgcode", None) == FOREIGN_KEY_VIOLATION:
        return True
    return "FOREIGN KEY" in str(exc.orig).upper()


def translate_integrity_error(
    exc: IntegrityError,
    duplicate_message: str,
    reference_message: str,
    reference_status: int = status.HTTP_400_BAD_REQUEST,
) -> BaseAPIException:
    """
    Map a store integrity failure onto the API error taxonomy.

    Inserts pointing at a missing parent surface as 400, deletes that would
    orphan children surface as 409 (pass reference_status accordingly).
    """
    if is_unique_violation(exc):
        return ConflictException(duplicate_message)
    if is_foreign_key_violation(exc):
        if reference_status == status.HTTP_409_CONFLICT:
            return ConflictException(reference_message)
        return BadRequestException(reference_message)
    return InternalServerException()
