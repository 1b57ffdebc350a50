# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized error taxonomy for the catalog API.
# Errors carry a machine-readable code, an HTTP status and, where it helps,
# a suggestion telling the caller how to fix the problem.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class CatalogException(Exception):
    """
    Base exception for the catalog API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "CATALOG_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Validation Exceptions
# =============================================================================

class FieldValidationError(CatalogException):
    """Raised when a required field is missing or blank. No remote call is made."""

    def __init__(
        self,
        field: str,
        message: str | None = None,
        status_code: int = 400,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message or f"{field} is required",
            code="VALIDATION_ERROR",
            status_code=status_code,
            suggestion=suggestion or f"Provide a non-empty value for '{field}'",
            details={"field": field, **(details or {})},
        )
        self.field = field


class InvalidFileTypeError(FieldValidationError):
    """Raised when an uploaded image has an extension that is not allowed."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            field="file",
            message=f"Invalid file type: {filename}",
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed},
        )


class FileTooLargeError(FieldValidationError):
    """Raised when an uploaded image exceeds the size limit."""

    def __init__(self, filename: str, size_mb: float, max_mb: int):
        super().__init__(
            field="file",
            message=f"File too large: {filename} is {size_mb:.1f}MB (max: {max_mb}MB)",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"filename": filename, "size_mb": size_mb, "max_mb": max_mb},
        )


# =============================================================================
# Data Access Exceptions
# =============================================================================

class RepositoryError(CatalogException):
    """Raised when the remote store rejects a read or write."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            code="REPOSITORY_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details=details,
        )
        self.cause = cause


class EntityNotFoundError(CatalogException):
    """Raised when the targeted row does not exist."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            message=f"{entity} with ID {entity_id} not found",
            code="NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {entity.lower()} ID is correct",
            details={"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class StorageError(CatalogException):
    """Raised when the object store rejects an upload or delete."""

    def __init__(self, operation: str, path: str, error: str):
        super().__init__(
            message=f"Failed to {operation} file in storage: {error}",
            code="STORAGE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"operation": operation, "path": path, "error": error},
        )
        self.operation = operation
        self.path = path


# =============================================================================
# Auth Exceptions
# =============================================================================

class UnauthorizedError(CatalogException):
    """Raised when the authenticated principal is not an admin."""

    def __init__(self, message: str = "Unauthorized access. Admin privileges required."):
        super().__init__(
            message=message,
            code="UNAUTHORIZED",
            status_code=403,
            suggestion="Sign in with an account that has the admin role",
        )


class AuthenticationError(CatalogException):
    """Raised when credentials are rejected by the auth provider."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="AUTHENTICATION_FAILED",
            status_code=400,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def catalog_exception_handler(
    request: Request,
    exc: CatalogException
) -> JSONResponse:
    """
    Convert CatalogException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle Pydantic request validation errors."""
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )
