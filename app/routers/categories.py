# =============================================================================
# app/routers/categories.py - Category Endpoints
# =============================================================================
# All endpoints require an admin.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from app.auth import require_admin
from app.dependencies import CategoryServiceDep
from app.responses import envelope_response
from core.models.category import CategoryInput

router = APIRouter(dependencies=[Depends(require_admin)])

CategoryId = Annotated[str, Path(description="Category ID")]


@router.get("")
async def list_categories(service: CategoryServiceDep):
    """List categories ordered by name, each with its medicine count."""
    return envelope_response(service.list_categories())


@router.get("/{category_id}")
async def get_category(category_id: CategoryId, service: CategoryServiceDep):
    return envelope_response(service.get_category(category_id))


@router.post("")
async def create_category(request: CategoryInput, service: CategoryServiceDep):
    return envelope_response(service.create_category(request), status.HTTP_201_CREATED)


@router.put("/{category_id}")
async def update_category(
    category_id: CategoryId,
    request: CategoryInput,
    service: CategoryServiceDep,
):
    return envelope_response(service.update_category(category_id, request))


@router.delete("/{category_id}")
async def delete_category(category_id: CategoryId, service: CategoryServiceDep):
    return envelope_response(service.delete_category(category_id))
