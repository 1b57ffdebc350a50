# =============================================================================
# core/models/contact.py - Contact Inquiry Schemas
# =============================================================================
# Inquiries are submitted through the public contact form and triaged by
# admins, who flip them between pending and resolved.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ContactStatus(str, Enum):
    """
    Triage state of a contact inquiry.

    Flow: pending -> resolved (and back, if reopened)
    """
    PENDING = "pending"
    RESOLVED = "resolved"


class ContactInput(BaseModel):
    """
    Schema for submitting a contact inquiry.

    Example:
        {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "subject": "Missing dosage info",
            "message": "The ibuprofen page has no pediatric dosage."
        }
    """

    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=255)
    subject: str = Field(..., max_length=255)
    message: str = Field(...)


class ContactStatusUpdate(BaseModel):
    """Request body for changing an inquiry's status."""
    status: ContactStatus


class ContactInquiry(BaseModel):
    """A stored contact inquiry."""

    id: str
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime | None = None
    status: ContactStatus = ContactStatus.PENDING
