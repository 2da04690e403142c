"""Common schemas shared across API endpoints.

Every JSON response uses the same envelope::

    {"success": true, "message": "...", "data": ..., "meta": {...}}
    {"success": false, "message": "...", "error": ...}

Keys whose value is None are omitted from the serialized body.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from userhub.application.dtos import PaginationMeta

T = TypeVar("T")


class PaginationMetaResponse(BaseModel):
    """Pagination metadata for list endpoints."""

    current_page: int = Field(..., description="Current page number (1-based)")
    per_page: int = Field(..., description="Items per page")
    total: int = Field(..., description="Total number of items")
    total_pages: int = Field(..., description="Total number of pages")

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationMetaResponse":
        return cls(
            current_page=meta.current_page,
            per_page=meta.per_page,
            total=meta.total,
            total_pages=meta.total_pages,
        )


class ApiResponse(BaseModel, Generic[T]):
    """Standard response envelope."""

    success: bool = Field(..., description="Whether the request succeeded")
    message: str = Field(..., description="Human-readable outcome")
    data: T | None = Field(None, description="Payload on success")
    error: Any | None = Field(None, description="Error detail on failure")
    meta: PaginationMetaResponse | None = Field(
        None,
        description="Pagination metadata (list endpoints only)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"success": True, "message": "OK", "data": {}},
        },
    )

    @classmethod
    def ok(
        cls,
        message: str,
        data: Any = None,
        meta: PaginationMetaResponse | None = None,
    ) -> "ApiResponse":
        return cls(success=True, message=message, data=data, meta=meta)


def error_body(message: str, error: Any = None) -> dict[str, Any]:
    """Serialize a failure envelope."""
    return ApiResponse[Any](success=False, message=message, error=error).model_dump(
        mode="json",
        exclude_none=True,
    )


class HealthStatus(BaseModel):
    status: str = Field(..., description="Health status")


class ReadinessStatus(BaseModel):
    status: str = Field(..., description="Readiness status")
    database: str = Field(..., description="Database connectivity")
    cache: str = Field(..., description="Cache connectivity (or 'disabled')")
