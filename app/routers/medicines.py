# =============================================================================
# app/routers/medicines.py - Medicine Endpoints
# =============================================================================
# Create/update take a multipart form: a `payload` part holding the
# MedicineInput JSON and any number of `image_files` parts.
# All endpoints require an admin.
# =============================================================================

import json
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, Path, Query, UploadFile, status
from pydantic import ValidationError

from app.auth import require_admin
from app.dependencies import MedicineServiceDep
from app.responses import envelope_response
from app.uploads import read_uploads
from core.models.medicine import MedicineInput

router = APIRouter(dependencies=[Depends(require_admin)])

MedicineId = Annotated[str, Path(description="Medicine ID")]
Payload = Annotated[str, Form(description="MedicineInput as JSON")]
ImageFiles = Annotated[list[UploadFile] | None, File(description="Images to upload")]


def _parse_payload(payload: str) -> MedicineInput:
    try:
        return MedicineInput.model_validate_json(payload)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=json.loads(e.json()),
        )


@router.get("")
async def list_medicines(service: MedicineServiceDep):
    """List medicines ordered by name, with category and brand names."""
    return envelope_response(service.list_medicines())


@router.get("/{medicine_id}")
async def get_medicine(medicine_id: MedicineId, service: MedicineServiceDep):
    return envelope_response(service.get_medicine(medicine_id))


@router.post("")
async def create_medicine(
    service: MedicineServiceDep,
    payload: Payload,
    image_files: ImageFiles = None,
):
    """
    Create a medicine.

    Images are uploaded first; if the insert fails they are deleted again.
    """
    data = _parse_payload(payload)
    result = service.create_medicine(data, image_files=await read_uploads(image_files))
    return envelope_response(result, status.HTTP_201_CREATED)


@router.put("/{medicine_id}")
async def update_medicine(
    medicine_id: MedicineId,
    service: MedicineServiceDep,
    payload: Payload,
    image_files: ImageFiles = None,
):
    """
    Replace a medicine's fields.

    New images are appended to `images` from the payload (or to the stored
    list when the payload omits it).
    """
    data = _parse_payload(payload)
    result = service.update_medicine(medicine_id, data, image_files=await read_uploads(image_files))
    return envelope_response(result)


@router.delete("/{medicine_id}")
async def delete_medicine(medicine_id: MedicineId, service: MedicineServiceDep):
    """Delete a medicine and all of its images."""
    return envelope_response(service.delete_medicine(medicine_id))


@router.delete("/{medicine_id}/images")
async def remove_medicine_image(
    medicine_id: MedicineId,
    service: MedicineServiceDep,
    url: Annotated[str, Query(description="Public URL of the image to remove")],
):
    """Remove a single image. Unknown URLs are ignored."""
    return envelope_response(service.remove_medicine_image(medicine_id, url))
