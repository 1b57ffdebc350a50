# =============================================================================
# app/routers/contacts.py - Contact Inquiry Endpoints
# =============================================================================
# POST is the public contact form. Everything else is admin triage.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from app.auth import require_admin
from app.dependencies import ContactServiceDep
from app.responses import envelope_response
from core.models.contact import ContactInput, ContactStatusUpdate

router = APIRouter()

ContactId = Annotated[str, Path(description="Contact inquiry ID")]


@router.post("")
async def submit_contact(request: ContactInput, service: ContactServiceDep):
    """Submit the public contact form. New inquiries start out pending."""
    return envelope_response(service.create_contact(request), status.HTTP_201_CREATED)


@router.get("", dependencies=[Depends(require_admin)])
async def list_contacts(service: ContactServiceDep):
    """List inquiries, most recent first."""
    return envelope_response(service.list_contacts())


@router.get("/{contact_id}", dependencies=[Depends(require_admin)])
async def get_contact(contact_id: ContactId, service: ContactServiceDep):
    return envelope_response(service.get_contact(contact_id))


@router.patch("/{contact_id}/status", dependencies=[Depends(require_admin)])
async def update_contact_status(
    contact_id: ContactId,
    request: ContactStatusUpdate,
    service: ContactServiceDep,
):
    """Mark an inquiry pending or resolved."""
    return envelope_response(service.update_contact_status(contact_id, request.status))


@router.delete("/{contact_id}", dependencies=[Depends(require_admin)])
async def delete_contact(contact_id: ContactId, service: ContactServiceDep):
    return envelope_response(service.delete_contact(contact_id))
