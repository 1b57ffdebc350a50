# =============================================================================
# app/routers/dashboard.py - Dashboard Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.auth import require_admin
from app.dependencies import DashboardServiceDep
from app.responses import envelope_response

router = APIRouter(dependencies=[Depends(require_admin)])

Limit = Annotated[int | None, Query(ge=1, le=50, description="Number of rows")]


@router.get("/stats")
async def get_dashboard_stats(service: DashboardServiceDep):
    """
    Collection totals, out-of-stock medicines, admins, pending inquiries
    and the trailing-month change figures.
    """
    return envelope_response(await service.get_stats())


@router.get("/recent-users")
async def get_recent_users(service: DashboardServiceDep, limit: Limit = None):
    return envelope_response(service.get_recent_users(limit))


@router.get("/recent-contacts")
async def get_recent_contacts(service: DashboardServiceDep, limit: Limit = None):
    return envelope_response(service.get_recent_contacts(limit))
