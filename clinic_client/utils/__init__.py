# Utils package
from clinic_client.utils.error_handler import (
    ERROR_MESSAGES,
    classify_error,
    format_error,
)

__all__ = [
    # Error handling
    "ERROR_MESSAGES",
    "classify_error",
    "format_error",
]
