"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request model for user registration."""
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(..., min_length=1)
    name: Optional[str] = Field(None, max_length=255)
    role: Optional[str] = Field(None, min_length=1, max_length=64)


class LoginRequest(BaseModel):
    """Request model for user login."""
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Full user record as returned to its owner. Never carries credentials."""
    id: str
    email: str
    name: Optional[str] = None
    role: str
    is_active: bool
    provider: str = Field(..., description="'email' for password accounts, 'federated' otherwise")
    created_at: datetime
    updated_at: datetime


class UserSummary(BaseModel):
    """Reduced user projection embedded in the login response."""
    id: str
    email: str
    name: Optional[str] = None
    role: str


class LoginResponse(BaseModel):
    """Response model for a successful login."""
    access_token: str
    user: UserSummary


class ClaimsResponse(BaseModel):
    """Identity claims decoded from the bearer token."""
    sub: str
    email: str
    role: str
