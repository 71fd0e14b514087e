"""
Pydantic schemas for authentication requests and responses.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginCredentials(BaseModel):
    """Schema for POST /auth/login."""
    email: str = Field(..., min_length=1, description="Login identifier", examples=["ana@clinic.test"])
    password: str = Field(..., min_length=1, description="Account password")


class RegisterCredentials(BaseModel):
    """Schema for POST /auth/register.

    The role is decided by the backend when omitted.
    """
    name: str = Field(..., min_length=1, max_length=200, description="Full name")
    email: str = Field(..., min_length=1, description="Login identifier")
    password: str = Field(..., min_length=1, description="Account password")
    role: Optional[str] = Field(default=None, description="Requested role, e.g. ADMIN or RECEPTIONIST")


class User(BaseModel):
    """Profile of the authenticated user."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="User identifier")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Login identifier")
    role: Optional[str] = Field(default=None, description="User role")


class AuthResponse(BaseModel):
    """Token plus profile returned by login and register."""
    model_config = ConfigDict(extra="allow")

    token: str = Field(..., description="Bearer token for subsequent requests")
    user: User
