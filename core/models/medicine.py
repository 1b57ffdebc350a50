# =============================================================================
# core/models/medicine.py - Medicine Schemas
# =============================================================================
# - MedicineInput: persisted, caller-editable fields
# - Medicine: a stored medicine with its slug, timestamps and the joined
#   category/brand display names
#
# slug is not part of MedicineInput: it is derived from name on every write.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

# Free-form string-list attributes stored as text[] columns
LIST_FIELDS = (
    "dosages",
    "ingredients",
    "side_effects",
    "usage_instructions",
    "warnings",
    "alternatives",
)


class MedicineInput(BaseModel):
    """
    Schema for creating or updating a medicine.

    `images` has a different meaning per operation:
    - create: ignored, the list is built from the uploaded files
    - update: the URLs the caller keeps; None keeps the persisted list

    Example:
        {
            "name": "Paracetamol 500mg",
            "price": 2.5,
            "prescription_required": false,
            "category_id": "6b1c...",
            "dosages": ["500mg every 6 hours"]
        }
    """

    name: str = Field(
        ...,
        max_length=255,
        description="Medicine display name (required, non-blank)"
    )

    description: str | None = None

    # NULL price is reported as "out of stock" on the dashboard
    price: float | None = Field(
        default=None,
        ge=0,
        description="Unit price, or null when out of stock"
    )

    prescription_required: bool = False

    category_id: str | None = None
    brand_id: str | None = None

    dosages: list[str] = Field(default_factory=list)
    ingredients: list[str] = Field(default_factory=list)
    side_effects: list[str] = Field(default_factory=list)
    usage_instructions: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    alternatives: list[str] = Field(default_factory=list)

    images: list[str] | None = Field(
        default=None,
        description="Image URLs to retain on update"
    )

    @field_validator(*LIST_FIELDS, mode="before")
    @classmethod
    def _null_list_to_empty(cls, value):
        return [] if value is None else value

    def to_row(self) -> dict:
        """Persisted columns, without images (the workflow sets those)."""
        return self.model_dump(exclude={"images"})


class Medicine(BaseModel):
    """A stored medicine as returned to clients."""

    id: str = Field(..., description="Unique medicine identifier")
    name: str
    description: str | None = None
    price: float | None = None
    prescription_required: bool = False
    category_id: str | None = None
    brand_id: str | None = None

    dosages: list[str] = Field(default_factory=list)
    ingredients: list[str] = Field(default_factory=list)
    side_effects: list[str] = Field(default_factory=list)
    usage_instructions: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    alternatives: list[str] = Field(default_factory=list)

    images: list[str] = Field(default_factory=list)
    slug: str | None = None

    created_at: datetime | None = None
    updated_at: datetime | None = None

    # Joined display names, read-only
    category_name: str | None = None
    brand_name: str | None = None

    @field_validator(*LIST_FIELDS, "images", mode="before")
    @classmethod
    def _null_list_to_empty(cls, value):
        return [] if value is None else value
