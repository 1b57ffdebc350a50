# =============================================================================
# core/services/medicine_service.py - Medicine Workflows
# =============================================================================
# Create/update/delete for medicines and their image gallery.
#
# Image handling:
# - create: uploaded files become the initial image list
# - update: new uploads are appended to the retained list (the caller's
#   explicit `images`, or the persisted list when omitted). Only URLs
#   already attached to the medicine can be retained; images the caller
#   dropped are deleted from storage after the row write
# - delete: images are deleted after the row is gone
# - remove_medicine_image: drop one URL from the list, then its object
#
# The slug is derived from the name on every create and update.
# =============================================================================

import logging

from app.config import settings
from core.models.medicine import Medicine, MedicineInput
from core.models.upload import UploadedFile
from core.services.catalog_repository import CatalogRepository
from core.services.storage_service import StorageService
from core.services.workflow import (
    CompensationPlan,
    WorkflowPhase,
    require_non_blank,
    workflow_boundary,
)
from lib.utils import generate_slug

logger = logging.getLogger(__name__)


class MedicineService:
    """
    Medicine workflows. Every public method returns OperationResult.

    Example:
        service = MedicineService(repository, storage)
        result = service.update_medicine(medicine_id, data, image_files=[front, back])
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
        self.path_prefix = settings.MEDICINE_IMAGE_PREFIX if path_prefix is None else path_prefix

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @workflow_boundary("list medicines")
    def list_medicines(self) -> list[Medicine]:
        return self.repository.medicines.list()

    @workflow_boundary("get medicine")
    def get_medicine(self, medicine_id: str) -> Medicine:
        return self.repository.medicines.get_by_id(medicine_id)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def _upload_images(self, plan: CompensationPlan, files: list[UploadedFile]) -> list[str]:
        if not files:
            return []

        plan.enter(WorkflowPhase.UPLOADING_ASSETS)
        urls = self.storage.upload_many(self.bucket, self.path_prefix, files)
        plan.on_failure(
            WorkflowPhase.UPLOADING_ASSETS,
            f"delete {len(urls)} uploaded image(s)",
            lambda: self.storage.delete_many(self.bucket, urls, self.path_prefix),
        )
        return urls

    def _retained_images(
        self,
        medicine_id: str,
        stored: list[str],
        requested: list[str] | None,
    ) -> list[str]:
        if requested is None:
            return list(stored)

        unknown = [url for url in requested if url not in stored]
        if unknown:
            logger.warning(f"Ignoring {len(unknown)} image URL(s) not attached to medicine {medicine_id}")
        return [url for url in requested if url in stored]

    def _row(self, data: MedicineInput, name: str, images: list[str]) -> dict:
        row = data.to_row()
        row["name"] = name
        row["images"] = images
        row["slug"] = generate_slug(name)
        return row

    @workflow_boundary("create medicine")
    def create_medicine(
        self,
        data: MedicineInput,
        image_files: list[UploadedFile] | None = None,
    ) -> Medicine:
        """
        Create a medicine with its uploaded images.

        If the insert fails, the images uploaded for it are deleted.
        """
        plan = CompensationPlan("create medicine")
        name = require_non_blank(data.name, "name")

        image_urls = self._upload_images(plan, image_files or [])

        with plan:
            row = self.repository.medicines.insert_row(self._row(data, name, image_urls))

        return self.repository.medicines.reread(row)

    @workflow_boundary("update medicine")
    def update_medicine(
        self,
        medicine_id: str,
        data: MedicineInput,
        image_files: list[UploadedFile] | None = None,
    ) -> Medicine:
        """
        Replace a medicine's mutable fields and append new images.

        A missing medicine is reported before anything is uploaded.
        """
        plan = CompensationPlan("update medicine")
        existing = self.repository.medicines.get_by_id(medicine_id)
        name = require_non_blank(data.name, "name")

        retained = self._retained_images(medicine_id, existing.images, data.images)
        new_urls = self._upload_images(plan, image_files or [])
        images = retained + new_urls

        dropped = [url for url in existing.images if url not in images]
        if dropped:
            plan.after_commit(
                f"delete {len(dropped)} dropped image(s)",
                lambda: self.storage.delete_many(self.bucket, dropped, self.path_prefix),
            )

        with plan:
            row = self.repository.medicines.update_row(medicine_id, self._row(data, name, images))

        return self.repository.medicines.reread(row)

    @workflow_boundary("delete medicine")
    def delete_medicine(self, medicine_id: str) -> bool:
        """Delete a medicine row, then its images (best effort)."""
        medicine = self.repository.medicines.get_by_id(medicine_id)
        self.repository.medicines.delete(medicine_id)

        if medicine.images:
            deleted = self.storage.delete_many(self.bucket, medicine.images, self.path_prefix)
            if deleted < len(medicine.images):
                logger.warning(
                    f"Medicine {medicine_id} deleted but "
                    f"{len(medicine.images) - deleted} image(s) remain in storage"
                )

        return True

    @workflow_boundary("remove medicine image")
    def remove_medicine_image(self, medicine_id: str, image_url: str) -> Medicine:
        """
        Remove one image from a medicine.

        A URL that is not in the list is a no-op: nothing is written and
        nothing is deleted from storage.
        """
        medicine = self.repository.medicines.get_by_id(medicine_id)

        if image_url not in medicine.images:
            logger.debug(f"Image not attached to medicine {medicine_id}: {image_url}")
            return medicine

        remaining = [url for url in medicine.images if url != image_url]
        updated = self.repository.medicines.update(medicine_id, {"images": remaining})

        self.storage.delete(self.bucket, image_url, self.path_prefix)
        return updated
