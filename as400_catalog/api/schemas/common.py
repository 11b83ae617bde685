"""Common API schemas for request/response formatting."""

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class APIError(BaseModel):
    """Standard error detail format."""

    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Human-readable error message")
    details: str | None = Field(default=None, description="Additional error details")
    field: str | None = Field(default=None, description="Field that caused the error, if applicable")


class APIResponse(BaseModel, Generic[T]):
    """Envelope for every API response.

    ``data`` is set on success; ``error`` carries the code and message on
    failure, e.g. ``{"code": "REMOTE_TIMEOUT", "message": "Command timed out after 60s"}``.
    """

    success: bool = Field(..., description="Whether the request was successful")
    data: T | None = Field(default=None, description="Response data on success")
    error: APIError | None = Field(default=None, description="Error details on failure")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")

    @classmethod
    def ok(cls, data: T) -> "APIResponse[T]":
        """Create a successful response."""
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(
        cls,
        code: str,
        message: str,
        details: str | None = None,
        field: str | None = None,
    ) -> "APIResponse[None]":
        """Create a failure response."""
        return cls(
            success=False,
            data=None,
            error=APIError(code=code, message=message, details=details, field=field),
        )
