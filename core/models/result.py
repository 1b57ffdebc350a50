# =============================================================================
# core/models/result.py - Workflow Result Envelope
# =============================================================================
# Every workflow returns an OperationResult instead of raising past its
# boundary. Callers only inspect `error`: when it is None, `data` holds the
# payload.
# =============================================================================

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class OperationError(BaseModel):
    """Error half of the envelope; `message` is safe to show verbatim."""

    message: str
    code: str = "INTERNAL_ERROR"
    status: int = Field(default=500, ge=400, le=599)
    details: dict[str, Any] | None = None


class OperationResult(BaseModel, Generic[T]):
    """
    Uniform {error, data} shape returned by every workflow.

    Example:
        result = brand_service.delete_brand(brand_id)
        if result.error:
            show_banner(result.error.message)
    """

    error: OperationError | None = None
    data: T | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any = None) -> "OperationResult":
        return cls(data=data)

    @classmethod
    def failure(
        cls,
        message: str,
        code: str = "INTERNAL_ERROR",
        status: int = 500,
        details: dict[str, Any] | None = None,
    ) -> "OperationResult":
        return cls(error=OperationError(message=message, code=code, status=status, details=details))
