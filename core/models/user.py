# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# Users are managed by Supabase Auth; the public.users table mirrors them
# with a role used by the admin gate and by dashboard reporting.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class User(BaseModel):
    """A row of the public.users table."""

    id: str
    email: str
    full_name: str | None = None
    role: UserRole = UserRole.USER
    created_at: datetime | None = None
