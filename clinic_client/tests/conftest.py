"""
Shared pytest fixtures for clinic_client tests.

Two ways of testing the client are used:

1. Method mapping: patch ClinicAPIClient._request and check method/path/body
2. Wire behaviour: drive the real request path through httpx.MockTransport,
   recording every outgoing httpx.Request
"""
import json

import httpx
import pytest

from clinic_client.clients import api_client
from clinic_client.clients.api_client import ClinicAPIClient
from clinic_client.storage.session_store import set_session_store

TEST_BASE_URL = "http://gateway.test"
TEST_TOKEN = "test-session-token"

TEST_USER = {
    "id": "u1",
    "name": "Ana Souza",
    "email": "ana@clinic.test",
    "role": "ADMIN"
}

TEST_PATIENT = {
    "id": "p1",
    "name": "John Doe",
    "email": "john@example.com",
    "phone": "+55 11 99999-0000",
    "birth_date": "1980-05-17",
    "created_at": "2025-01-01T10:00:00",
    "updated_at": "2025-01-01T10:00:00"
}

TEST_DOCTOR = {
    "id": "d1",
    "name": "Dr. Maria Lima",
    "specialty": "Cardiology",
    "license_number": "CRM-12345",
    "created_at": "2025-01-01T10:00:00",
    "updated_at": "2025-01-01T10:00:00"
}

TEST_APPOINTMENT = {
    "id": "a1",
    "patient_id": "p1",
    "doctor_id": "d1",
    "date_time": "2025-02-10T14:30:00",
    "status": "SCHEDULED",
    "reason": "Routine checkup"
}

TEST_MEDICATION = {
    "id": "m1",
    "name": "Amoxicillin 500mg",
    "quantity": 40,
    "unit": "box"
}


@pytest.fixture(autouse=True)
def reset_singletons():
    """Make sure no test leaks a global client or session store."""
    yield
    api_client._client_instance = None
    set_session_store(None)


@pytest.fixture
def mock_client():
    """Create a ClinicAPIClient with a test base URL and a fixed token."""
    return ClinicAPIClient(base_url=TEST_BASE_URL, token_provider=lambda: TEST_TOKEN)


@pytest.fixture
def sent_requests():
    """Requests captured by the mock transport, in order."""
    return []


@pytest.fixture
def make_client(sent_requests):
    """
    Build a client whose transport answers every request with one canned response.

    Usage:
        client = make_client(404, json={"message": "not found"})
        client = make_client(204)
        client = make_client(500, content=b"<html>oops</html>", token=None)
    """
    def _make(status_code=200, json=None, content=b"", token=TEST_TOKEN, on_unauthorized=None):
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, content=content)

        return ClinicAPIClient(
            base_url=TEST_BASE_URL,
            token_provider=lambda: token,
            transport=httpx.MockTransport(handler),
            on_unauthorized=on_unauthorized,
        )
    return _make


def request_body(request: httpx.Request):
    """Decode the JSON body of a captured request (None when empty)."""
    if not request.content:
        return None
    return json.loads(request.content)
