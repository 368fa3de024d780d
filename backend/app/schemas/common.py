"""
City Info Backend — Shared Schemas
====================================

What:  Pagination metadata, error envelope, and health check response.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PaginationMetadata(BaseModel):
    """
    What:  Describes one window of a paginated list.
    Where: Serialized as JSON into the X-Pagination response header.

    Example header:
        X-Pagination: {"totalCount":3,"pageSize":10,"currentPage":1,"totalPages":1}
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_count: int = Field(ge=0, description="Items matching the filters")
    page_size: int = Field(ge=1, description="Effective page size")
    current_page: int = Field(ge=1, description="1-based page number")
    total_pages: int = Field(ge=0, description="ceil(total_count / page_size)")

    @classmethod
    def build(cls, total_count: int, page_size: int, current_page: int) -> "PaginationMetadata":
        return cls(
            total_count=total_count,
            page_size=page_size,
            current_page=current_page,
            total_pages=math.ceil(total_count / page_size),
        )

    def to_header(self) -> str:
        return self.model_dump_json(by_alias=True)


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "city with ID '42' was not found",
            "details": null,
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
