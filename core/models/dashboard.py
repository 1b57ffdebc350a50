# =============================================================================
# core/models/dashboard.py - Dashboard Schemas
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    """
    Summary statistics for the admin dashboard.

    The *_change figures compare records created in the trailing month
    against a padded denominator and are expressed in percent.
    """

    total_users: int = Field(default=0, ge=0)
    total_admins: int = Field(default=0, ge=0)
    total_medicines: int = Field(default=0, ge=0)
    out_of_stock_medicines: int = Field(
        default=0,
        ge=0,
        description="Medicines whose price is NULL"
    )
    total_categories: int = Field(default=0, ge=0)
    total_brands: int = Field(default=0, ge=0)
    total_contacts: int = Field(default=0, ge=0)
    pending_contacts: int = Field(default=0, ge=0)
    medicines_change: float = 0.0
    users_change: float = 0.0
    since: datetime | None = Field(
        default=None,
        description="Start of the trailing window used for the change figures"
    )


class RecentUser(BaseModel):
    id: str
    full_name: str | None = None
    email: str
    role: str
    created_at: datetime | None = None


class RecentContact(BaseModel):
    id: str
    name: str
    subject: str
    status: str
    created_at: datetime | None = None
