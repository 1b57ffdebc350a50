# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - brand.py, category.py, medicine.py, contact.py: catalog entities
# - user.py: users mirrored from Supabase Auth
# - upload.py: transient file payloads for image uploads
# - dashboard.py: summary statistics
# - result.py: the {error, data} envelope returned by workflows
#
# Each entity has an *Input model (persisted, caller-editable fields) and a
# record model (what is stored and returned).
# =============================================================================

from .brand import Brand, BrandInput
from .category import Category, CategoryInput
from .contact import ContactInput, ContactInquiry, ContactStatus, ContactStatusUpdate
from .dashboard import DashboardStats, RecentContact, RecentUser
from .medicine import LIST_FIELDS, Medicine, MedicineInput
from .result import OperationError, OperationResult
from .upload import UploadedFile
from .user import User, UserRole

__all__ = [
    # Brand
    "Brand",
    "BrandInput",
    # Category
    "Category",
    "CategoryInput",
    # Contact
    "ContactInput",
    "ContactInquiry",
    "ContactStatus",
    "ContactStatusUpdate",
    # Dashboard
    "DashboardStats",
    "RecentContact",
    "RecentUser",
    # Medicine
    "LIST_FIELDS",
    "Medicine",
    "MedicineInput",
    # Result envelope
    "OperationError",
    "OperationResult",
    # Uploads
    "UploadedFile",
    # Users
    "User",
    "UserRole",
]
