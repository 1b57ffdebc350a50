# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Uploads brand logos and medicine images to Supabase Storage and removes
# them again when the owning row is deleted or the image is replaced.
#
# Uploads fail loudly (StorageError). Deletes are cleanup only: they log and
# report False, they never raise.
# =============================================================================

import logging
import mimetypes
from typing import Iterable
from uuid import uuid4

from supabase import Client

from app.config import settings
from app.exceptions import FileTooLargeError, InvalidFileTypeError, StorageError
from core.models.upload import UploadedFile

logger = logging.getLogger(__name__)

# Segment of a Supabase public URL that precedes "<bucket>/<object path>"
PUBLIC_OBJECT_MARKER = "/object/public/"


def _join_path(path_prefix: str, name: str) -> str:
    prefix = path_prefix.strip("/")
    return f"{prefix}/{name}" if prefix else name


class StorageService:
    """
    Gateway to Supabase Storage.

    Example:
        storage = StorageService(client)
        url = storage.upload("brands", "", logo_file)
        ...
        storage.delete("brands", url, "")
    """

    def __init__(
        self,
        client: Client,
        allowed_extensions: list[str] | None = None,
        max_size_bytes: int | None = None,
    ):
        self.client = client
        self.allowed_extensions = (
            allowed_extensions
            if allowed_extensions is not None
            else settings.allowed_image_extensions_list
        )
        self.max_size_bytes = max_size_bytes or settings.max_upload_size_bytes

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self, file: UploadedFile) -> None:
        """
        Check extension and size before anything is sent to storage.

        Raises:
            InvalidFileTypeError: If the extension is not allowed
            FileTooLargeError: If the file exceeds the size limit
        """
        if file.extension not in self.allowed_extensions:
            raise InvalidFileTypeError(file.filename, self.allowed_extensions)

        if file.size_bytes > self.max_size_bytes:
            raise FileTooLargeError(
                file.filename,
                file.size_bytes / (1024 * 1024),
                self.max_size_bytes // (1024 * 1024),
            )

    # -------------------------------------------------------------------------
    # Upload
    # -------------------------------------------------------------------------

    def upload(self, bucket: str, path_prefix: str, file: UploadedFile) -> str:
        """
        Upload a file under a collision-resistant name and return its public URL.

        The object name is a random token plus the original extension,
        written under `path_prefix/` (bucket root when the prefix is empty).

        Args:
            bucket: Storage bucket name
            path_prefix: Folder inside the bucket
            file: File content and original filename

        Returns:
            Public URL of the uploaded object

        Raises:
            StorageError: If the store rejects the write
        """
        self.validate(file)

        path = _join_path(path_prefix, f"{uuid4().hex}{file.extension}")
        content_type = (
            file.content_type
            or mimetypes.guess_type(file.filename)[0]
            or "application/octet-stream"
        )

        try:
            self.client.storage.from_(bucket).upload(
                path=path,
                file=file.content,
                file_options={"content-type": content_type},
            )
            url = self.client.storage.from_(bucket).get_public_url(path)
        except Exception as e:
            logger.error(f"Storage upload failed for {bucket}/{path}: {e}")
            raise StorageError("upload", f"{bucket}/{path}", str(e))

        logger.info(f"Uploaded file to storage: {bucket}/{path}")
        # Some client versions append an empty query string
        return url.rstrip("?")

    def upload_many(
        self,
        bucket: str,
        path_prefix: str,
        files: Iterable[UploadedFile],
    ) -> list[str]:
        """
        Upload several files, all or nothing.

        If one upload fails, the objects already written by this call are
        deleted (best effort) before the StorageError propagates.
        """
        files = list(files)
        for file in files:
            self.validate(file)

        urls: list[str] = []
        try:
            for file in files:
                urls.append(self.upload(bucket, path_prefix, file))
        except StorageError:
            if urls:
                logger.warning(f"Batch upload failed, removing {len(urls)} uploaded file(s)")
                self.delete_many(bucket, urls, path_prefix)
            raise

        return urls

    # -------------------------------------------------------------------------
    # Delete
    # -------------------------------------------------------------------------

    @staticmethod
    def object_path_from_url(bucket: str, url: str, path_prefix: str = "") -> str:
        """
        Derive the object path inside `bucket` from a public URL.

        Uses the path after "/object/public/<bucket>/" when the URL has the
        Supabase public shape; otherwise re-prefixes the last path segment
        with `path_prefix`.

        Example:
            object_path_from_url(
                "brands",
                "https://x.supabase.co/storage/v1/object/public/brands/medicine/ab12.png",
                "medicine",
            )  # "medicine/ab12.png"
        """
        clean = url.split("?", 1)[0]
        marker = f"{PUBLIC_OBJECT_MARKER}{bucket}/"
        if marker in clean:
            return clean.split(marker, 1)[1]
        return _join_path(path_prefix, clean.rstrip("/").rsplit("/", 1)[-1])

    def delete(self, bucket: str, url: str, path_prefix: str = "") -> bool:
        """
        Delete the object behind a public URL.

        Never raises: failures are logged and reported as False so the
        owning database mutation is never blocked by storage cleanup.
        """
        path = self.object_path_from_url(bucket, url, path_prefix)

        try:
            self.client.storage.from_(bucket).remove([path])
            logger.info(f"Deleted file from storage: {bucket}/{path}")
            return True

        except Exception as e:
            logger.error(f"Failed to delete file {bucket}/{path}: {e}")
            return False

    def delete_many(self, bucket: str, urls: Iterable[str], path_prefix: str = "") -> int:
        """
        Delete several objects one by one.

        Returns:
            Number of objects deleted successfully
        """
        return sum(1 for url in urls if self.delete(bucket, url, path_prefix))
