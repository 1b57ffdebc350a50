# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase JWT.

    The raw token is kept so a rejected principal's session can be revoked.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None
    access_token: Optional[str] = Field(default=None, repr=False)


class SignInRequest(BaseModel):
    """Credentials for password sign-in."""
    email: str = Field(..., examples=["admin@example.com"])
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Current admin's identity."""
    id: UUID
    email: Optional[str] = None
    role: str
