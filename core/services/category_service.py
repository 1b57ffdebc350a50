# =============================================================================
# core/services/category_service.py - Category Workflows
# =============================================================================
# Categories have no file step: validate, then write the row.
# =============================================================================

import logging

from core.models.category import Category, CategoryInput
from core.services.catalog_repository import CatalogRepository
from core.services.workflow import require_non_blank, workflow_boundary

logger = logging.getLogger(__name__)


class CategoryService:
    """Category workflows. Every public method returns OperationResult."""

    def __init__(self, repository: CatalogRepository):
        self.repository = repository

    @workflow_boundary("list categories")
    def list_categories(self) -> list[Category]:
        return self.repository.categories.list()

    @workflow_boundary("get category")
    def get_category(self, category_id: str) -> Category:
        return self.repository.categories.get_by_id(category_id)

    @workflow_boundary("create category")
    def create_category(self, data: CategoryInput) -> Category:
        name = require_non_blank(data.name, "name")
        return self.repository.categories.create({
            "name": name,
            "description": data.description,
        })

    @workflow_boundary("update category")
    def update_category(self, category_id: str, data: CategoryInput) -> Category:
        name = require_non_blank(data.name, "name")
        return self.repository.categories.update(category_id, {
            "name": name,
            "description": data.description,
        })

    @workflow_boundary("delete category")
    def delete_category(self, category_id: str) -> bool:
        """
        Delete a category.

        Medicines that reference it are handled by the foreign key
        (the store rejects the delete or nulls the reference).
        """
        self.repository.categories.delete(category_id)
        return True
