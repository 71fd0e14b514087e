"""
Client-side session storage.
"""
from clinic_client.storage.session_store import (
    TOKEN_KEY,
    SessionStore,
    InMemorySessionStore,
    SQLiteSessionStore,
    get_session_store,
    set_session_store,
)

__all__ = [
    "TOKEN_KEY",
    "SessionStore",
    "InMemorySessionStore",
    "SQLiteSessionStore",
    "get_session_store",
    "set_session_store",
]
