from clinic_client.clients.api_client import (
    ClinicAPIClient,
    build_headers,
    handle_response,
    get_clinic_api_client,
)

__all__ = [
    "ClinicAPIClient",
    "build_headers",
    "handle_response",
    "get_clinic_api_client",
]
