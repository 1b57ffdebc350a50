# =============================================================================
# core/models/category.py - Category Schemas
# =============================================================================

from pydantic import BaseModel, Field


class CategoryInput(BaseModel):
    """
    Schema for creating or updating a category.

    Example:
        {"name": "Pain Relief", "description": "Analgesics and NSAIDs"}
    """

    name: str = Field(
        ...,
        max_length=255,
        description="Category display name (required, non-blank)"
    )

    description: str | None = Field(
        default=None,
        description="Optional longer description"
    )


class Category(BaseModel):
    """A stored category with its live medicine count."""

    id: str = Field(..., description="Unique category identifier")
    name: str
    description: str | None = None
    medicine_count: int = Field(
        default=0,
        ge=0,
        description="Number of medicines in this category"
    )
