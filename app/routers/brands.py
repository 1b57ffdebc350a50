# =============================================================================
# app/routers/brands.py - Brand Endpoints
# =============================================================================
# Multipart forms so a logo file can travel with the brand fields.
# All endpoints require an admin.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Path, UploadFile, status

from app.auth import require_admin
from app.dependencies import BrandServiceDep
from app.responses import envelope_response
from app.uploads import read_upload
from core.models.brand import BrandInput

router = APIRouter(dependencies=[Depends(require_admin)])

BrandId = Annotated[str, Path(description="Brand ID")]


@router.get("")
async def list_brands(service: BrandServiceDep):
    """List brands ordered by name, each with its medicine count."""
    return envelope_response(service.list_brands())


@router.get("/{brand_id}")
async def get_brand(brand_id: BrandId, service: BrandServiceDep):
    return envelope_response(service.get_brand(brand_id))


@router.post("")
async def create_brand(
    service: BrandServiceDep,
    name: Annotated[str, Form(description="Brand name")],
    country: Annotated[str | None, Form()] = None,
    logo_file: Annotated[UploadFile | None, File(description="Logo image")] = None,
):
    """
    Create a brand.

    The logo file, when sent, is uploaded to storage first and its public
    URL stored on the brand.
    """
    data = BrandInput(name=name, country=country or None)
    result = service.create_brand(data, logo_file=await read_upload(logo_file))
    return envelope_response(result, status.HTTP_201_CREATED)


@router.put("/{brand_id}")
async def update_brand(
    brand_id: BrandId,
    service: BrandServiceDep,
    name: Annotated[str, Form(description="Brand name")],
    country: Annotated[str | None, Form()] = None,
    logo: Annotated[str | None, Form(description="Current logo URL to keep")] = None,
    logo_file: Annotated[UploadFile | None, File(description="Replacement logo")] = None,
):
    """
    Replace a brand's fields.

    Send `logo` to keep the current logo, `logo_file` to replace it, or
    neither to remove it. A replaced or removed logo is deleted from storage.
    """
    data = BrandInput(name=name, country=country or None, logo=logo or None)
    result = service.update_brand(brand_id, data, logo_file=await read_upload(logo_file))
    return envelope_response(result)


@router.delete("/{brand_id}")
async def delete_brand(brand_id: BrandId, service: BrandServiceDep):
    """Delete a brand and its logo."""
    return envelope_response(service.delete_brand(brand_id))
