# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .auth_service import AuthService
from .brand_service import BrandService
from .catalog_repository import CatalogRepository
from .category_service import CategoryService
from .contact_service import ContactService
from .dashboard_service import DashboardService
from .medicine_service import MedicineService
from .storage_service import StorageService
from .workflow import CompensationPlan, WorkflowPhase, workflow_boundary

__all__ = [
    "AuthService",
    "BrandService",
    "CatalogRepository",
    "CategoryService",
    "CompensationPlan",
    "ContactService",
    "DashboardService",
    "MedicineService",
    "StorageService",
    "WorkflowPhase",
    "workflow_boundary",
]
