"""
Pydantic schemas for gateway request payloads and response shapes.

Write models (…Create / …Update) are what endpoint methods send. Full models
(Patient, Doctor, …) are optional typed views over the JSON the client returns.
"""
from clinic_client.schemas.auth import (
    LoginCredentials,
    RegisterCredentials,
    User,
    AuthResponse,
)
from clinic_client.schemas.patient import Patient, PatientCreate
from clinic_client.schemas.doctor import Doctor, DoctorCreate, DoctorUpdate
from clinic_client.schemas.appointment import (
    Appointment,
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentStatus,
)
from clinic_client.schemas.medication import Medication, MedicationCreate, StockUpdate

__all__ = [
    # Auth schemas
    "LoginCredentials",
    "RegisterCredentials",
    "User",
    "AuthResponse",
    # Patient schemas
    "Patient",
    "PatientCreate",
    # Doctor schemas
    "Doctor",
    "DoctorCreate",
    "DoctorUpdate",
    # Appointment schemas
    "Appointment",
    "AppointmentCreate",
    "AppointmentUpdate",
    "AppointmentStatus",
    # Inventory schemas
    "Medication",
    "MedicationCreate",
    "StockUpdate",
]
