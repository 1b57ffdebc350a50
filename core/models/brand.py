# =============================================================================
# core/models/brand.py - Brand Schemas
# =============================================================================
# - BrandInput: persisted, caller-editable fields
# - Brand: a stored brand as returned to clients, with its live medicine count
#
# The logo file itself is an UploadedFile passed next to BrandInput; the
# workflow uploads it and writes the resulting URL into `logo`.
# =============================================================================

from pydantic import BaseModel, Field


class BrandInput(BaseModel):
    """
    Schema for creating or updating a brand.

    Example:
        {"name": "Pfizer", "country": "USA", "logo": null}
    """

    name: str = Field(
        ...,
        max_length=255,
        description="Brand display name (required, non-blank)"
    )

    country: str | None = Field(
        default=None,
        max_length=100,
        description="Country of origin"
    )

    # Kept when no new logo file is uploaded. A new file replaces it.
    logo: str | None = Field(
        default=None,
        description="Public URL of the current logo"
    )


class Brand(BaseModel):
    """
    A stored brand.

    medicine_count is computed from the medicines table at read time
    and is never written back.
    """

    id: str = Field(..., description="Unique brand identifier")
    name: str
    country: str | None = None
    logo: str | None = None
    medicine_count: int = Field(
        default=0,
        ge=0,
        description="Number of medicines referencing this brand"
    )
