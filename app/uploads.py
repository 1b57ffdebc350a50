# =============================================================================
# app/uploads.py - Multipart Upload Helpers
# =============================================================================

from fastapi import UploadFile

from core.models.upload import UploadedFile


async def read_upload(upload: UploadFile | None) -> UploadedFile | None:
    """
    Read a multipart file into an UploadedFile.

    Browsers send an empty part when no file was chosen; that counts as
    no file.
    """
    if upload is None or not upload.filename:
        return None

    content = await upload.read()
    return UploadedFile(
        filename=upload.filename,
        content=content,
        content_type=upload.content_type,
    )


async def read_uploads(uploads: list[UploadFile] | None) -> list[UploadedFile]:
    files = []
    for upload in uploads or []:
        file = await read_upload(upload)
        if file is not None:
            files.append(file)
    return files
