"""
Pydantic schemas for patient resources.
"""
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PatientCreate(BaseModel):
    """Schema for creating or replacing a patient (POST/PUT /patients)."""
    name: str = Field(..., min_length=1, max_length=200, description="Patient full name", examples=["John Doe"])
    email: Optional[str] = Field(default=None, description="Contact email")
    phone: Optional[str] = Field(default=None, description="Contact phone")
    birth_date: Optional[date] = Field(default=None, description="Date of birth")
    document: Optional[str] = Field(default=None, description="National ID number")
    address: Optional[str] = Field(default=None, description="Postal address")


class Patient(PatientCreate):
    """Patient as returned by the gateway.

    id, created_at and updated_at are assigned by the backend.
    """
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Patient identifier")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
