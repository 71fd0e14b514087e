"""
Async client for the clinic administration API gateway.

    from clinic_client import ClinicAPIClient, InMemorySessionStore

    store = InMemorySessionStore()
    client = ClinicAPIClient(base_url="https://gateway.example", token_provider=store.get_token)
    auth = await client.login({"email": "ana@clinic.test", "password": "secret"})
    store.set_token(auth["token"])
    patients = await client.get_patients()
"""
from clinic_client.clients.api_client import (
    ClinicAPIClient,
    build_headers,
    handle_response,
    get_clinic_api_client,
)
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
)
from clinic_client.storage.session_store import (
    SessionStore,
    InMemorySessionStore,
    SQLiteSessionStore,
    get_session_store,
)

__version__ = "0.1.0"

__all__ = [
    "ClinicAPIClient",
    "build_headers",
    "handle_response",
    "get_clinic_api_client",
    "ClinicClientError",
    "ApiError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitedError",
    "ServerError",
    "SessionStore",
    "InMemorySessionStore",
    "SQLiteSessionStore",
    "get_session_store",
]
