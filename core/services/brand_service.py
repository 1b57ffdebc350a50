# =============================================================================
# core/services/brand_service.py - Brand Workflows
# =============================================================================
# Create/update/delete for brands, coupling the row write with the logo
# object in storage. The brand has a single logo slot: a new upload fully
# replaces the old logo, and the replaced object is removed after the row
# write succeeds.
# =============================================================================

import logging

from app.config import settings
from core.models.brand import Brand, BrandInput
from core.models.upload import UploadedFile
from core.services.catalog_repository import CatalogRepository
from core.services.storage_service import StorageService
from core.services.workflow import (
    CompensationPlan,
    WorkflowPhase,
    require_non_blank,
    workflow_boundary,
)

logger = logging.getLogger(__name__)


class BrandService:
    """
    Brand workflows. Every public method returns OperationResult.

    Example:
        service = BrandService(repository, storage)
        result = service.create_brand(BrandInput(name="Bayer"), logo_file=upload)
    """

    def __init__(
        self,
        repository: CatalogRepository,
        storage: StorageService,
        bucket: str | None = None,
        path_prefix: str | None = None,
    ):
        self.repository = repository
        self.storage = storage
        self.bucket = bucket or settings.STORAGE_BUCKET
        self.path_prefix = settings.BRAND_LOGO_PREFIX if path_prefix is None else path_prefix

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @workflow_boundary("list brands")
    def list_brands(self) -> list[Brand]:
        return self.repository.brands.list()

    @workflow_boundary("get brand")
    def get_brand(self, brand_id: str) -> Brand:
        return self.repository.brands.get_by_id(brand_id)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def _upload_logo(self, plan: CompensationPlan, logo_file: UploadedFile) -> str:
        plan.enter(WorkflowPhase.UPLOADING_ASSETS)
        url = self.storage.upload(self.bucket, self.path_prefix, logo_file)
        plan.on_failure(
            WorkflowPhase.UPLOADING_ASSETS,
            f"delete uploaded logo {url}",
            lambda: self.storage.delete(self.bucket, url, self.path_prefix),
        )
        return url

    @workflow_boundary("create brand")
    def create_brand(self, data: BrandInput, logo_file: UploadedFile | None = None) -> Brand:
        """
        Create a brand, uploading its logo first when one is attached.

        If the insert fails after the upload, the uploaded logo is deleted.
        """
        plan = CompensationPlan("create brand")
        name = require_non_blank(data.name, "name")

        logo_url = data.logo
        if logo_file is not None:
            logo_url = self._upload_logo(plan, logo_file)

        with plan:
            row = self.repository.brands.insert_row({
                "name": name,
                "country": data.country,
                "logo": logo_url,
            })

        return self.repository.brands.reread(row)

    @workflow_boundary("update brand")
    def update_brand(
        self,
        brand_id: str,
        data: BrandInput,
        logo_file: UploadedFile | None = None,
    ) -> Brand:
        """
        Replace a brand's mutable fields.

        A new logo file replaces the existing logo; the old object is
        deleted once the row update has succeeded. A missing brand is
        reported before anything is uploaded.
        """
        plan = CompensationPlan("update brand")
        existing = self.repository.brands.get_by_id(brand_id)
        name = require_non_blank(data.name, "name")

        logo_url = data.logo
        if logo_file is not None:
            logo_url = self._upload_logo(plan, logo_file)

        if existing.logo and existing.logo != logo_url:
            old_logo = existing.logo
            plan.after_commit(
                f"delete replaced logo {old_logo}",
                lambda: self.storage.delete(self.bucket, old_logo, self.path_prefix),
            )

        with plan:
            row = self.repository.brands.update_row(brand_id, {
                "name": name,
                "country": data.country,
                "logo": logo_url,
            })

        return self.repository.brands.reread(row)

    @workflow_boundary("delete brand")
    def delete_brand(self, brand_id: str) -> bool:
        """
        Delete a brand row, then its logo (best effort).

        The logo is only touched after the row is confirmed gone.
        """
        brand = self.repository.brands.get_by_id(brand_id)
        self.repository.brands.delete(brand_id)

        if brand.logo:
            self.storage.delete(self.bucket, brand.logo, self.path_prefix)

        return True
