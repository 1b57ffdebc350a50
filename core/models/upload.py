# =============================================================================
# core/models/upload.py - Transient Upload Payloads
# =============================================================================
# File content travelling alongside an entity input. Never persisted: the
# workflows upload it, keep the returned URL and drop the bytes.
# =============================================================================

from pydantic import BaseModel, Field


class UploadedFile(BaseModel):
    """
    An image supplied with a create/update request.

    Example:
        UploadedFile(filename="logo.png", content=b"...", content_type="image/png")
    """

    filename: str = Field(
        ...,
        min_length=1,
        description="Original client filename (its extension is kept)"
    )

    content: bytes = Field(
        ...,
        description="Raw file content"
    )

    content_type: str | None = Field(
        default=None,
        description="MIME type reported by the client, if any"
    )

    @property
    def extension(self) -> str:
        """Lower-cased extension including the dot, or '' when there is none."""
        if "." not in self.filename:
            return ""
        return "." + self.filename.rsplit(".", 1)[-1].lower()

    @property
    def size_bytes(self) -> int:
        return len(self.content)
