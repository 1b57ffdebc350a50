# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Liveness, plus a readiness probe that touches every catalog table and the
# image bucket through the shared Supabase client.
# =============================================================================

from datetime import datetime, timezone
from typing import Annotated, Callable

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from supabase import Client

from app.config import settings
from app.dependencies import get_supabase_client

router = APIRouter()

CATALOG_TABLES = ("medicines", "brands", "categories", "contact_us", "users")


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str
    version: str


class ReadinessResponse(BaseModel):
    """
    Readiness of each backing resource.

    `tables` maps table name -> "healthy" or "unhealthy: <reason>".
    """
    status: str
    tables: dict[str, str]
    storage: str
    timestamp: str


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _probe(check: Callable[[], object]) -> str:
    try:
        check()
        return "healthy"
    except Exception as e:
        return f"unhealthy: {str(e)[:50]}"


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic status for load balancers. Makes no remote calls."""
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version="1.0.0",
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(client: Annotated[Client, Depends(get_supabase_client)]):
    """
    Readiness check.

    Reads one id from each catalog table and looks up the image bucket.
    Reports "degraded" when any of them fails.
    """
    tables = {
        table: _probe(lambda table=table: client.table(table).select("id").limit(1).execute())
        for table in CATALOG_TABLES
    }
    storage = _probe(lambda: client.storage.get_bucket(settings.STORAGE_BUCKET))

    all_healthy = storage == "healthy" and all(state == "healthy" for state in tables.values())

    return ReadinessResponse(
        status="ready" if all_healthy else "degraded",
        tables=tables,
        storage=storage,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """Process liveness, for container restart decisions."""
    return LivenessResponse(status="alive", timestamp=_now())
