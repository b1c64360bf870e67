"""
MemoBoard Backend — Shared Response Schemas
=============================================

What:  The envelope every list/search endpoint returns, plus the error and
       health formats shared by all routes.
How:   Field names are snake_case in Python and camelCase on the wire
       (alias generator); FastAPI serializes response models by alias.

Envelope shape (identical for posts and memos):
    {
        "success": true,
        "content": [...records...],
        "totalPages": 3,
        "currentPage": 1,
        "totalElements": 25,
        "size": 10,
        "message": "Posts retrieved"
    }
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RecordT = TypeVar("RecordT")


class PageEnvelope(BaseModel, Generic[RecordT]):
    """
    What:  Fixed-shape wrapper for list and search results.
    Who:   Returned by the board posts/search and memo list/search endpoints.

    A degraded envelope (store failure) keeps the same shape with
    success=false, empty content and zero counts.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = Field(description="False when the query could not be executed")
    content: List[RecordT] = Field(default_factory=list, description="Records on this page, newest first")
    total_pages: int = Field(default=0, description="ceil(totalElements / size); 0 when empty")
    current_page: int = Field(default=1, description="Page number after clamping to >= 1")
    total_elements: int = Field(default=0, description="Rows matching the filter across all pages")
    size: int = Field(default=0, description="Page size used for the query")
    message: Optional[str] = Field(default=None, description="Human-readable status")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for every handled exception.

    Example:
        {
            "success": false,
            "error": "not_found",
            "message": "Post not found.",
            "request_id": "a1b2c3d4"
        }
    """
    success: bool = Field(default=False)
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
