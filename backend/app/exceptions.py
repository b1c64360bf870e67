"""
MemoBoard Backend — Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and the query building blocks; caught by global
       handlers or, for list views, by the service that picks a fallback.

Exception Hierarchy:
    MemoBoardError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    │   └── InvalidArgumentError → 400 Bad Request (paging parameters)
    ├── NotFoundError            → 404 Not Found
    ├── MappingError             → 500 Internal Server Error (schema drift)
    └── ExecutionError           → 500 Internal Server Error (store failure)

List and search endpoints do not let ExecutionError reach the handlers:
their services catch it and answer with a degraded envelope (HTTP 200,
success=false). Detail and write endpoints let it propagate.
"""

from typing import Any, Dict, Optional


class MemoBoardError(Exception):
    """
    Base exception for all MemoBoard application errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(MemoBoardError):
    """
    Raised when client input fails a business rule.

    When:    Missing category code on post creation, memo with neither
             title nor content.
    HTTP:    400 Bad Request

    Example response:
        {
            "success": false,
            "error": "validation_error",
            "message": "Board code (br_cd) is required.",
            "details": {"field": "br_cd"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidArgumentError(ValidationError):
    """
    Raised for paging parameters that cannot produce a page.

    When:    page size of zero or below.
    HTTP:    400 Bad Request
    """


class NotFoundError(MemoBoardError):
    """
    Raised when a single-entity lookup finds nothing.

    When:    GET /api/board/detail/{seq} or GET /api/memos/{fid} with an
             identifier that has no row.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id is not None:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class MappingError(MemoBoardError):
    """
    Raised when a database row lacks a column the record requires.

    What:    The table no longer has the shape the row mapper expects.
    HTTP:    500 Internal Server Error. Never degraded: it signals schema
             drift, not a transient store failure.
    """

    def __init__(
        self,
        column: str,
        record: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx.update({"column": column, "record": record})
        super().__init__(
            message=f"Row is missing required column '{column}' for {record}",
            context=ctx,
        )
        self.column = column


class ExecutionError(MemoBoardError):
    """
    Raised when the underlying store fails to execute a statement.

    When:    Connection lost mid-query, constraint violation, driver timeout.
    HTTP:    500 Internal Server Error; the underlying message is included
             in the response body for diagnosis.
    """

    def __init__(
        self,
        message: str = "A database error occurred.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
