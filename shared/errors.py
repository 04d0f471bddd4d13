"""
Shared error handling for the employee service.

Only two kinds leave the upstream gateway: ``NotFoundError`` when the
upstream authoritatively reports absence, and ``UpstreamFailureError`` for
everything else.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class EmployeeServiceException(Exception):
    """Base exception for the employee service."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class NotFoundError(EmployeeServiceException):
    """The upstream reports that the resource does not exist."""

    def __init__(self, resource_id: str, message: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.resource_id = resource_id
        super().__init__(
            "NOT_FOUND",
            message or f"Employee not found with id: {resource_id}",
            {"resource_id": resource_id, **(details or {})}
        )


class UpstreamFailureError(EmployeeServiceException):
    """Network error, malformed response, retry exhaustion or contract violation."""

    def __init__(self, message: str = "Upstream employee service failure",
                 cause: Optional[BaseException] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.cause = cause
        merged = dict(details or {})
        if cause is not None:
            merged.setdefault("cause", f"{type(cause).__name__}: {cause}")
        super().__init__("UPSTREAM_FAILURE", message, merged)
