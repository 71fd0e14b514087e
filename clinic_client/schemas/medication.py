"""
Pydantic schemas for inventory (medication) resources.
"""
from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class MedicationCreate(BaseModel):
    """Schema for POST /inventory."""
    name: str = Field(..., min_length=1, max_length=200, examples=["Amoxicillin 500mg"])
    description: Optional[str] = None
    quantity: int = Field(default=0, ge=0, description="Units in stock")
    unit: Optional[str] = Field(default=None, description="Stock unit, e.g. 'box' or 'ml'")
    expiration_date: Optional[date] = None


class StockUpdate(BaseModel):
    """Body of PATCH /inventory/{id}/stock. Negative amounts take stock out."""
    amount: Union[int, float]


class Medication(BaseModel):
    """Medication as returned by the gateway."""
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: Optional[str] = None
    quantity: Union[int, float] = 0
    unit: Optional[str] = None
    expiration_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
