"""
User-facing error messages for applications built on clinic_client.

This module provides:
- Classification of client errors (ApiError by status, httpx by type)
- Friendly, display-safe messages with no stack traces or internal details
- Logging of the full error while hiding it from users

Usage:
    from clinic_client.utils.error_handler import format_error

    try:
        await client.create_appointment(data)
    except Exception as e:
        show_toast(format_error(e, context="booking appointment"))
"""

import logging
from typing import Optional

import httpx

from clinic_client.core.exceptions import ApiError

logger = logging.getLogger(__name__)


# =============================================================================
# ERROR MESSAGE TEMPLATES
# =============================================================================

ERROR_MESSAGES = {
    # Connection/network errors
    "connection": (
        "Unable to reach the clinic server.\n\n"
        "Please check your connection and try again in a moment."
    ),
    "timeout": (
        "The request took too long to complete.\n\n"
        "Please try again. If this keeps happening, the service may be busy."
    ),

    # Session/permission errors
    "unauthorized": (
        "Your session has expired or is invalid.\n\n"
        "Please log in again."
    ),
    "forbidden": (
        "You don't have permission to do this.\n\n"
        "Contact an administrator if you think this is a mistake."
    ),

    # Data/validation errors
    "not_found": (
        "The requested record was not found.\n\n"
        "It may have been deleted by someone else."
    ),
    "conflict": (
        "This record conflicts with an existing one.\n\n"
        "Check for duplicates or an already booked time slot."
    ),
    "validation": (
        "Some of the information provided is not valid.\n\n"
        "Please check the form and try again."
    ),

    # Rate limiting
    "rate_limited": (
        "Too many requests.\n\n"
        "Please wait a moment before trying again."
    ),

    # Server errors
    "server_error": (
        "Something went wrong on the server.\n\n"
        "Please try again later. If this keeps happening, contact support."
    ),

    # Generic fallback
    "unknown": (
        "An unexpected error occurred.\n\n"
        "Please try again. If the problem persists, contact support."
    ),
}


def classify_error(error: Exception) -> str:
    """
    Classify an error into a category for message selection.

    Args:
        error: The exception to classify.

    Returns:
        str: Error category key for ERROR_MESSAGES lookup.
    """
    if isinstance(error, ApiError):
        status = error.status
        if status == 401:
            return "unauthorized"
        if status == 403:
            return "forbidden"
        if status == 404:
            return "not_found"
        if status == 409:
            return "conflict"
        if status in (400, 422):
            return "validation"
        if status == 429:
            return "rate_limited"
        if status >= 500:
            return "server_error"
        return "unknown"

    # TimeoutException must be checked before its TransportError parent
    if isinstance(error, httpx.TimeoutException):
        return "timeout"
    if isinstance(error, (httpx.TransportError, ConnectionError)):
        return "connection"

    return "unknown"


def format_error(
    error: Exception,
    context: Optional[str] = None,
    log_full: bool = True
) -> str:
    """
    Format an exception as a user-friendly error message.

    Args:
        error: The exception to format.
        context: Optional context about what operation failed (for logging).
        log_full: Whether to log the full error details (default: True).

    Returns:
        str: User-friendly error message safe for display.
    """
    if log_full:
        log_msg = "Error occurred"
        if context:
            log_msg += f" while {context}"
        logger.error(log_msg, exc_info=error)

    category = classify_error(error)
    return ERROR_MESSAGES.get(category, ERROR_MESSAGES["unknown"])
