"""
Pydantic schemas for doctor resources.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DoctorCreate(BaseModel):
    """Schema for POST /doctors."""
    name: str = Field(..., min_length=1, max_length=200, description="Doctor full name")
    specialty: str = Field(..., min_length=1, description="Medical specialty", examples=["Cardiology"])
    license_number: str = Field(..., min_length=1, description="Medical council registration")
    email: Optional[str] = None
    phone: Optional[str] = None


class DoctorUpdate(BaseModel):
    """Schema for PUT /doctors/{id}. Unset fields are not sent."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    specialty: Optional[str] = None
    license_number: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class Doctor(DoctorCreate):
    """Doctor as returned by the gateway."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Doctor identifier")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
