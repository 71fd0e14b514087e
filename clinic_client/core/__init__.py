"""
Core module for shared exceptions and logging setup.
"""
from clinic_client.core.exceptions import (
    ClinicClientError,
    ApiError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
    UnprocessableEntityError,
    RateLimitedError,
    ServerError,
    api_error_for_status,
)
from clinic_client.core.logging_config import (
    JSONFormatter,
    setup_logging,
    get_correlation_id,
    set_correlation_id,
    clear_correlation_id,
)

__all__ = [
    # Exceptions
    "ClinicClientError",
    "ApiError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitedError",
    "ServerError",
    "api_error_for_status",
    # Logging
    "JSONFormatter",
    "setup_logging",
    "get_correlation_id",
    "set_correlation_id",
    "clear_correlation_id",
]
