"""
Exception classes raised by the clinic gateway client.

This module provides:
- A base exception for everything the client raises on its own
- ApiError: the normalized failure of an HTTP call ({message, status})
- Status-specific subclasses so callers can catch what they care about

Network failures are NOT wrapped: httpx.RequestError and its subclasses
reach the caller unchanged.

Usage:
    from clinic_client.core.exceptions import ApiError, NotFoundError

    try:
        doctor = await client.get_doctor(doctor_id)
    except NotFoundError:
        ...
    except ApiError as e:
        print(e.status, e.message)
"""
from typing import Any, Dict, Optional

import httpx


# =============================================================================
# BASE EXCEPTION CLASSES
# =============================================================================

class ClinicClientError(Exception):
    """Base exception for all errors raised by clinic_client."""


class ApiError(ClinicClientError):
    """
    A failed HTTP response from the gateway, normalized to message + status.

    Subclasses set a class-level default status so they can be raised
    directly in tests or by callers (e.g. ``NotFoundError("gone")``).
    """

    status: int = 0
    message: str = "Request failed"

    def __init__(self, message: Optional[str] = None, status: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status = status if status is not None else self.__class__.status
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Return the error in its wire-like shape."""
        return {"message": self.message, "status": int(self.status)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.status))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status={self.status})"


# =============================================================================
# STATUS-SPECIFIC ERRORS
# =============================================================================

class UnauthorizedError(ApiError):
    """401 - the session token is missing, invalid or expired."""

    status = httpx.codes.UNAUTHORIZED


class ForbiddenError(ApiError):
    """403 - authenticated but not allowed."""

    status = httpx.codes.FORBIDDEN


class NotFoundError(ApiError):
    """404 - the resource does not exist."""

    status = httpx.codes.NOT_FOUND


class ConflictError(ApiError):
    """409 - e.g. duplicate email or double-booked slot."""

    status = httpx.codes.CONFLICT


class UnprocessableEntityError(ApiError):
    """422 - payload rejected by backend validation."""

    status = httpx.codes.UNPROCESSABLE_ENTITY


class RateLimitedError(ApiError):
    """429 - too many requests."""

    status = httpx.codes.TOO_MANY_REQUESTS


class ServerError(ApiError):
    """5xx - the gateway or a downstream service failed."""

    status = httpx.codes.INTERNAL_SERVER_ERROR


_ERRORS_BY_STATUS = {
    httpx.codes.UNAUTHORIZED: UnauthorizedError,
    httpx.codes.FORBIDDEN: ForbiddenError,
    httpx.codes.NOT_FOUND: NotFoundError,
    httpx.codes.CONFLICT: ConflictError,
    httpx.codes.UNPROCESSABLE_ENTITY: UnprocessableEntityError,
    httpx.codes.TOO_MANY_REQUESTS: RateLimitedError,
}


def api_error_for_status(status: int, message: str) -> ApiError:
    """
    Build the most specific ApiError for an HTTP status code.

    Args:
        status: HTTP status code of the failed response.
        message: Message extracted from the response body (or a fallback).

    Returns:
        ApiError: A subclass instance when one matches, plain ApiError otherwise.
    """
    error_cls = _ERRORS_BY_STATUS.get(status)
    if error_cls is None:
        error_cls = ServerError if status >= 500 else ApiError
    return error_cls(message=message, status=status)
