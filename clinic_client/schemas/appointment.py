"""
Pydantic schemas for appointment resources.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AppointmentStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class AppointmentCreate(BaseModel):
    """Schema for POST /appointments."""
    patient_id: str = Field(..., description="Identifier of an existing patient")
    doctor_id: str = Field(..., description="Identifier of an existing doctor")
    date_time: datetime = Field(..., description="Start of the appointment")
    reason: Optional[str] = Field(default=None, max_length=500)
    notes: Optional[str] = None


class AppointmentUpdate(BaseModel):
    """Schema for PUT /appointments/{id}. Unset fields are not sent."""
    patient_id: Optional[str] = None
    doctor_id: Optional[str] = None
    date_time: Optional[datetime] = None
    status: Optional[AppointmentStatus] = None
    reason: Optional[str] = Field(default=None, max_length=500)
    notes: Optional[str] = None


class Appointment(AppointmentCreate):
    """Appointment as returned by the gateway."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Appointment identifier")
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
