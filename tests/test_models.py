# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the catalog models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Nullable list columns read back as empty lists
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    Brand,
    Category,
    ContactInquiry,
    ContactStatus,
    Medicine,
    MedicineInput,
    OperationResult,
    UploadedFile,
)


class TestMedicineModels:
    """Tests for Medicine and MedicineInput."""

    def test_null_lists_become_empty(self):
        """Test that NULL text[] columns are read as empty lists."""
        medicine = Medicine(id="m-1", name="Aspirin", dosages=None, images=None, warnings=None)

        assert medicine.dosages == []
        assert medicine.images == []
        assert medicine.warnings == []

    def test_input_excludes_images_from_row(self, sample_medicine_payload):
        """Test that to_row() leaves images to the workflow."""
        data = MedicineInput(**sample_medicine_payload, images=["https://x/a.png"])

        row = data.to_row()

        assert "images" not in row
        assert "slug" not in row
        assert row["dosages"] == ["1 tablet daily"]

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            MedicineInput(name="Aspirin", price=-1)

    def test_price_may_be_null(self):
        assert MedicineInput(name="Aspirin").price is None


class TestCountedModels:
    """medicine_count defaults to zero, never null."""

    def test_brand_default_count(self):
        assert Brand(id="b-1", name="Bayer").medicine_count == 0

    def test_category_default_count(self):
        assert Category(id="c-1", name="Pain Relief").medicine_count == 0


class TestContactModels:

    def test_default_status_is_pending(self):
        inquiry = ContactInquiry(id="c-1", name="Jane", email="j@x.com", subject="Hi", message="Hello")
        assert inquiry.status == ContactStatus.PENDING

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            ContactInquiry(id="c-1", name="J", email="j@x.com", subject="s", message="m", status="archived")


class TestUploadedFile:

    def test_extension_is_lowercased(self):
        assert UploadedFile(filename="Photo.JPEG", content=b"x").extension == ".jpeg"

    def test_no_extension(self):
        assert UploadedFile(filename="README", content=b"x").extension == ""

    def test_size(self):
        assert UploadedFile(filename="a.png", content=b"12345").size_bytes == 5


class TestOperationResult:

    def test_success(self):
        result = OperationResult.success({"id": "1"})
        assert result.ok
        assert result.error is None
        assert result.data == {"id": "1"}

    def test_failure(self):
        result = OperationResult.failure("Brand with ID x not found", code="NOT_FOUND", status=404)
        assert not result.ok
        assert result.data is None
        assert result.error.status == 404
        assert result.error.code == "NOT_FOUND"
