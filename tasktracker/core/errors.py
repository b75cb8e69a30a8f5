"""Error kinds raised by the workflows.

Each kind is an ``HTTPException`` with a fixed status code, so FastAPI renders
it as ``{"detail": message}`` without a custom handler.
"""
from __future__ import annotations

from fastapi import HTTPException, status


class TaskTrackerError(HTTPException):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal error"

    def __init__(self, detail: str | None = None, headers: dict[str, str] | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )


class ValidationFailed(TaskTrackerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Validation failed"


class AuthenticationFailed(TaskTrackerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"

    def __init__(self, detail: str | None = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(TaskTrackerError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class NotFound(TaskTrackerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Conflict(TaskTrackerError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"
