# =============================================================================
# core/services/dashboard_service.py - Dashboard Statistics
# =============================================================================
# Read-only fan-out over every collection. The sub-queries are independent,
# so they are issued concurrently (each blocking Supabase call runs in a
# worker thread) and folded into one DashboardStats. If any sub-query fails
# the whole read fails: there is no partial result.
# =============================================================================

import asyncio
import logging
from datetime import datetime, timezone

from app.config import settings
from core.models.dashboard import DashboardStats, RecentContact, RecentUser
from core.models.contact import ContactStatus
from core.models.user import UserRole
from core.services.catalog_repository import CatalogRepository
from core.services.workflow import workflow_boundary
from lib.utils import one_month_before

logger = logging.getLogger(__name__)


def change_percentage(recent_count: int, padding: int) -> float:
    """
    Trailing-window change figure shown on the dashboard cards.

    recent / (recent + padding) * 100 - 100, rounded to one decimal.
    With zero padding and zero records the figure is 0.0.
    """
    denominator = recent_count + padding
    if denominator == 0:
        return 0.0
    return round(recent_count / denominator * 100 - 100, 1)


class DashboardService:
    """
    Summary statistics for the admin dashboard.

    Example:
        service = DashboardService(repository)
        result = await service.get_stats()
        if result.error is None:
            print(result.data.pending_contacts)
    """

    def __init__(
        self,
        repository: CatalogRepository,
        medicine_padding: int | None = None,
        user_padding: int | None = None,
    ):
        self.repository = repository
        self.medicine_padding = (
            settings.DASHBOARD_MEDICINE_CHANGE_PADDING if medicine_padding is None else medicine_padding
        )
        self.user_padding = (
            settings.DASHBOARD_USER_CHANGE_PADDING if user_padding is None else user_padding
        )

    @workflow_boundary("dashboard stats")
    async def get_stats(self, now: datetime | None = None) -> DashboardStats:
        """
        Compute dashboard statistics.

        Args:
            now: Reference time for the trailing window (defaults to UTC now)

        Returns:
            OperationResult with DashboardStats, or the first sub-query error
        """
        now = now or datetime.now(timezone.utc)
        since = one_month_before(now)
        repo = self.repository

        (
            users,
            medicines,
            total_categories,
            total_brands,
            contacts,
            recent_medicines,
            recent_users,
        ) = await asyncio.gather(
            asyncio.to_thread(repo.users.fetch_column, "role"),
            asyncio.to_thread(repo.medicines.fetch_column, "price"),
            asyncio.to_thread(repo.categories.count),
            asyncio.to_thread(repo.brands.count),
            asyncio.to_thread(repo.contacts.fetch_column, "status"),
            asyncio.to_thread(repo.medicines.fetch_column, "created_at", since),
            asyncio.to_thread(repo.users.fetch_column, "created_at", since),
        )

        stats = DashboardStats(
            total_users=len(users),
            total_admins=sum(1 for u in users if u.get("role") == UserRole.ADMIN.value),
            total_medicines=len(medicines),
            out_of_stock_medicines=sum(1 for m in medicines if m.get("price") is None),
            total_categories=total_categories,
            total_brands=total_brands,
            total_contacts=len(contacts),
            pending_contacts=sum(1 for c in contacts if c.get("status") == ContactStatus.PENDING.value),
            medicines_change=change_percentage(len(recent_medicines), self.medicine_padding),
            users_change=change_percentage(len(recent_users), self.user_padding),
            since=since,
        )
        logger.debug(f"Dashboard stats computed since {since.isoformat()}")
        return stats

    @workflow_boundary("recent users")
    def get_recent_users(self, limit: int | None = None) -> list[RecentUser]:
        """Newest users first."""
        rows = self.repository.users.recent(
            limit or settings.DASHBOARD_RECENT_LIMIT,
            "id, full_name, email, role, created_at",
        )
        return [RecentUser(**row) for row in rows]

    @workflow_boundary("recent contacts")
    def get_recent_contacts(self, limit: int | None = None) -> list[RecentContact]:
        """Newest contact inquiries first."""
        rows = self.repository.contacts.recent(
            limit or settings.DASHBOARD_RECENT_LIMIT,
            "id, name, subject, status, created_at",
        )
        return [RecentContact(**row) for row in rows]
