"""
HTTP client for the clinic API gateway.
Provides one coroutine per resource action (auth, patients, doctors,
appointments, inventory) on top of two shared helpers: build_headers()
and handle_response().
"""
import httpx
import logging
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel

from clinic_client.config import API_BASE_URL, API_TIMEOUT, settings
from clinic_client.core.exceptions import api_error_for_status
from clinic_client.schemas import (
    AppointmentCreate,
    AppointmentUpdate,
    DoctorCreate,
    DoctorUpdate,
    LoginCredentials,
    MedicationCreate,
    PatientCreate,
    RegisterCredentials,
)
from clinic_client.storage.session_store import get_session_store

logger = logging.getLogger(__name__)

# Used when the error body is not JSON at all
UNKNOWN_ERROR_MESSAGE = "Unknown error"
# Used when the error body is JSON but carries no message
REQUEST_FAILED_MESSAGE = "Request failed"

TokenProvider = Callable[[], Optional[str]]
Payload = Union[BaseModel, Dict[str, Any]]


def build_headers(token: Optional[str] = None) -> Dict[str, str]:
    """
    Build request headers.

    Args:
        token: Session token; the Authorization header is only added when set.

    Returns:
        Dict with Content-Type and, if a token is given, Authorization.
    """
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _error_message(response: httpx.Response) -> str:
    """Extract a human-readable message from a failed response body."""
    try:
        body = response.json()
    except ValueError:
        return UNKNOWN_ERROR_MESSAGE

    if isinstance(body, dict):
        for key in ("message", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return REQUEST_FAILED_MESSAGE


def handle_response(
    response: httpx.Response,
    on_unauthorized: Optional[Callable[[], None]] = None
) -> Any:
    """
    Turn a raw response into data or an ApiError.

    Returns:
        Parsed JSON body, or None for 204 No Content.

    Raises:
        ApiError: (or a status-specific subclass) for any non-2xx response.
    """
    if not response.is_success:
        message = _error_message(response)

        if response.status_code == httpx.codes.UNAUTHORIZED:
            logger.warning("Session expired or invalid", extra={"status": response.status_code})
            if on_unauthorized is not None:
                try:
                    on_unauthorized()
                except Exception:
                    logger.exception("on_unauthorized hook failed")
        else:
            logger.error(
                f"API error {response.status_code}: {message}",
                extra={"status": response.status_code}
            )

        raise api_error_for_status(response.status_code, message)

    if response.status_code == httpx.codes.NO_CONTENT:
        return None

    return response.json()


def _stored_token() -> Optional[str]:
    """Default token provider: read the process-wide session store."""
    return get_session_store().get_token()


def _clear_stored_session() -> None:
    get_session_store().clear()


def _serialize(payload: Payload) -> Dict[str, Any]:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_unset=True)
    return payload


class ClinicAPIClient:
    """Client for the clinic API gateway."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_provider: Optional[TokenProvider] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
    ):
        """
        Args:
            base_url: Gateway URL. Defaults to API_BASE_URL from config.
            token_provider: Callable returning the current session token (or None).
                Called once per request. Defaults to the process-wide session store.
            timeout: Request timeout in seconds. Defaults to API_TIMEOUT.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests).
            on_unauthorized: Called after a 401 is logged, before the error is raised.
        """
        self.base_url = base_url or API_BASE_URL
        if not self.base_url:
            raise ValueError("API_BASE_URL must be set in config")

        # Remove trailing slash
        self.base_url = self.base_url.rstrip("/")

        self.token_provider = token_provider or _stored_token
        self.timeout = timeout if timeout is not None else API_TIMEOUT
        self.transport = transport
        self.on_unauthorized = on_unauthorized

    async def _request(
        self,
        method: str,
        endpoint: str,
        json: Optional[Dict[str, Any]] = None,
        authenticated: bool = True,
    ) -> Any:
        """
        Send one request and pass the response through handle_response().

        Raises:
            ApiError: For HTTP error responses
            httpx.RequestError: For connection/request errors (not wrapped)
        """
        url = f"{self.base_url}{endpoint}"
        headers = build_headers(self.token_provider() if authenticated else None)

        logger.debug(f"{method} {endpoint}", extra={"method": method, "path": endpoint})

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            response = await client.request(method, url, headers=headers, json=json)

        return handle_response(response, on_unauthorized=self.on_unauthorized)

    # Auth methods (gateway route /auth/**)
    async def login(self, credentials: Union[LoginCredentials, Dict[str, Any]]) -> Dict[str, Any]:
        """
        Log in with email and password.

        Returns:
            Dict with token and user profile (see schemas.AuthResponse)

        Raises:
            UnauthorizedError: If the credentials are rejected
        """
        return await self._request(
            "POST",
            "/auth/login",
            json=_serialize(credentials),
            authenticated=False
        )

    async def register(self, credentials: Union[RegisterCredentials, Dict[str, Any]]) -> Dict[str, Any]:
        """
        Create an account.

        Returns:
            Dict with token and user profile (see schemas.AuthResponse)

        Raises:
            ConflictError: If the email is already registered
        """
        return await self._request(
            "POST",
            "/auth/register",
            json=_serialize(credentials),
            authenticated=False
        )

    # Patient methods (gateway route /patients/**)
    async def get_patients(self) -> List[Dict[str, Any]]:
        """Get all patients."""
        return await self._request("GET", "/patients")

    async def get_patient(self, patient_id: str) -> Dict[str, Any]:
        """
        Get one patient.

        Raises:
            NotFoundError: If no patient has this id
        """
        return await self._request("GET", f"/patients/{patient_id}")

    async def create_patient(self, data: Union[PatientCreate, Dict[str, Any]]) -> Dict[str, Any]:
        """Create a patient and return it with its server-assigned id."""
        return await self._request("POST", "/patients", json=_serialize(data))

    async def update_patient(self, patient_id: str, data: Union[PatientCreate, Dict[str, Any]]) -> Dict[str, Any]:
        """Replace a patient's data."""
        return await self._request("PUT", f"/patients/{patient_id}", json=_serialize(data))

    async def delete_patient(self, patient_id: str) -> None:
        return await self._request("DELETE", f"/patients/{patient_id}")

    # Doctor methods (gateway route /doctors/**, scheduling service)
    async def get_doctors(self) -> List[Dict[str, Any]]:
        """Get all doctors."""
        return await self._request("GET", "/doctors")

    async def get_doctor(self, doctor_id: str) -> Dict[str, Any]:
        """
        Get one doctor.

        Raises:
            NotFoundError: If no doctor has this id
        """
        return await self._request("GET", f"/doctors/{doctor_id}")

    async def create_doctor(self, data: Union[DoctorCreate, Dict[str, Any]]) -> Dict[str, Any]:
        return await self._request("POST", "/doctors", json=_serialize(data))

    async def update_doctor(self, doctor_id: str, data: Union[DoctorUpdate, Dict[str, Any]]) -> Dict[str, Any]:
        return await self._request("PUT", f"/doctors/{doctor_id}", json=_serialize(data))

    async def delete_doctor(self, doctor_id: str) -> None:
        return await self._request("DELETE", f"/doctors/{doctor_id}")

    # Appointment methods (gateway route /appointments/**, scheduling service)
    async def get_appointments(self) -> List[Dict[str, Any]]:
        """Get all appointments."""
        return await self._request("GET", "/appointments")

    async def get_appointment(self, appointment_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/appointments/{appointment_id}")

    async def create_appointment(self, data: Union[AppointmentCreate, Dict[str, Any]]) -> Dict[str, Any]:
        """
        Book an appointment.

        Raises:
            ConflictError: If the doctor is already booked for that slot
        """
        return await self._request("POST", "/appointments", json=_serialize(data))

    async def update_appointment(
        self,
        appointment_id: str,
        data: Union[AppointmentUpdate, Dict[str, Any]]
    ) -> Dict[str, Any]:
        return await self._request("PUT", f"/appointments/{appointment_id}", json=_serialize(data))

    async def delete_appointment(self, appointment_id: str) -> None:
        return await self._request("DELETE", f"/appointments/{appointment_id}")

    # Inventory methods (gateway route /inventory/**)
    async def get_medications(self) -> List[Dict[str, Any]]:
        """Get all medications in stock."""
        return await self._request("GET", "/inventory")

    async def get_medication(self, medication_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/inventory/{medication_id}")

    async def create_medication(self, data: Union[MedicationCreate, Dict[str, Any]]) -> Dict[str, Any]:
        return await self._request("POST", "/inventory", json=_serialize(data))

    async def update_medication_stock(self, medication_id: str, amount: Union[int, float]) -> Dict[str, Any]:
        """
        Adjust stock by a relative amount.

        Args:
            medication_id: Medication identifier
            amount: Units to add (positive) or remove (negative)

        Returns:
            Dict with the updated medication
        """
        return await self._request(
            "PATCH",
            f"/inventory/{medication_id}/stock",
            json={"amount": amount}
        )

    async def delete_medication(self, medication_id: str) -> None:
        return await self._request("DELETE", f"/inventory/{medication_id}")


# Global client instance
_client_instance: Optional[ClinicAPIClient] = None


def get_clinic_api_client() -> ClinicAPIClient:
    """Get or create the global API client instance."""
    global _client_instance
    if _client_instance is None:
        on_unauthorized = _clear_stored_session if settings.clear_session_on_unauthorized else None
        _client_instance = ClinicAPIClient(on_unauthorized=on_unauthorized)
    return _client_instance
