# =============================================================================
# core/services/contact_service.py - Contact Inquiry Workflows
# =============================================================================
# Inquiries arrive from the public contact form and are triaged by admins.
# =============================================================================

import logging

from core.models.contact import ContactInput, ContactInquiry, ContactStatus
from core.services.catalog_repository import CatalogRepository
from core.services.workflow import require_non_blank, workflow_boundary

logger = logging.getLogger(__name__)


class ContactService:
    """Contact inquiry workflows. Every public method returns OperationResult."""

    def __init__(self, repository: CatalogRepository):
        self.repository = repository

    @workflow_boundary("list contacts")
    def list_contacts(self) -> list[ContactInquiry]:
        """All inquiries, most recent first."""
        return self.repository.contacts.list()

    @workflow_boundary("get contact")
    def get_contact(self, contact_id: str) -> ContactInquiry:
        return self.repository.contacts.get_by_id(contact_id)

    @workflow_boundary("create contact")
    def create_contact(self, data: ContactInput) -> ContactInquiry:
        """Store a new inquiry. It always starts out pending."""
        fields = {
            name: require_non_blank(getattr(data, name), name)
            for name in ("name", "email", "subject", "message")
        }
        fields["status"] = ContactStatus.PENDING.value
        return self.repository.contacts.create(fields)

    @workflow_boundary("update contact status")
    def update_contact_status(self, contact_id: str, status: ContactStatus) -> ContactInquiry:
        inquiry = self.repository.contacts.update(contact_id, {"status": ContactStatus(status).value})
        logger.info(f"Contact {contact_id} marked {inquiry.status.value}")
        return inquiry

    @workflow_boundary("delete contact")
    def delete_contact(self, contact_id: str) -> bool:
        self.repository.contacts.delete(contact_id)
        return True
