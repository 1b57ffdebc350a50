# =============================================================================
# tests/test_storage_service.py - Storage Gateway Tests
# =============================================================================
# The Supabase client is a MagicMock; the tests check which storage calls
# are issued and how failures surface.
# =============================================================================

from unittest.mock import MagicMock

import pytest

from app.exceptions import FileTooLargeError, InvalidFileTypeError, StorageError
from core.models import UploadedFile
from core.services import StorageService

PUBLIC_BASE = "https://test-project.supabase.co/storage/v1/object/public"


@pytest.fixture
def client():
    client = MagicMock()
    bucket = client.storage.from_.return_value
    bucket.get_public_url.side_effect = lambda path: f"{PUBLIC_BASE}/brands/{path}?"
    return client


@pytest.fixture
def service(client):
    return StorageService(client, allowed_extensions=[".png", ".jpg"], max_size_bytes=1024)


class TestValidation:

    def test_rejects_extension(self, service):
        with pytest.raises(InvalidFileTypeError) as exc:
            service.validate(UploadedFile(filename="notes.pdf", content=b"x"))
        assert exc.value.status_code == 400
        assert exc.value.details["filename"] == "notes.pdf"

    def test_extension_check_is_case_insensitive(self, service):
        service.validate(UploadedFile(filename="LOGO.PNG", content=b"x"))

    def test_rejects_large_file(self, service):
        with pytest.raises(FileTooLargeError) as exc:
            service.validate(UploadedFile(filename="big.png", content=b"x" * 2048))
        assert exc.value.status_code == 413


class TestUpload:

    def test_upload_returns_public_url(self, service, client, png_file):
        url = service.upload("brands", "medicine", png_file)

        assert url.startswith(f"{PUBLIC_BASE}/brands/medicine/")
        assert url.endswith(".png")
        assert not url.endswith("?")

        kwargs = client.storage.from_.return_value.upload.call_args.kwargs
        assert kwargs["path"].startswith("medicine/")
        assert kwargs["file"] == png_file.content
        assert kwargs["file_options"] == {"content-type": "image/png"}

    def test_upload_to_bucket_root(self, service, client, png_file):
        service.upload("brands", "", png_file)
        path = client.storage.from_.return_value.upload.call_args.kwargs["path"]
        assert "/" not in path

    def test_names_do_not_collide(self, service, png_file):
        assert service.upload("brands", "", png_file) != service.upload("brands", "", png_file)

    def test_content_type_guessed_from_name(self, service, client):
        service.upload("brands", "", UploadedFile(filename="a.jpg", content=b"x"))
        kwargs = client.storage.from_.return_value.upload.call_args.kwargs
        assert kwargs["file_options"] == {"content-type": "image/jpeg"}

    def test_store_failure_raises(self, service, client, png_file):
        client.storage.from_.return_value.upload.side_effect = RuntimeError("bucket not found")

        with pytest.raises(StorageError) as exc:
            service.upload("brands", "", png_file)
        assert "bucket not found" in exc.value.message

    def test_invalid_file_never_reaches_store(self, service, client):
        with pytest.raises(InvalidFileTypeError):
            service.upload("brands", "", UploadedFile(filename="a.exe", content=b"x"))
        client.storage.from_.return_value.upload.assert_not_called()

    def test_upload_many_rolls_back(self, service, client, png_file, jpg_file):
        bucket = client.storage.from_.return_value
        bucket.upload.side_effect = [None, RuntimeError("quota exceeded")]

        with pytest.raises(StorageError):
            service.upload_many("brands", "medicine", [png_file, jpg_file])

        removed = bucket.remove.call_args.args[0]
        assert len(removed) == 1
        assert removed[0].startswith("medicine/")

    def test_upload_many_validates_all_first(self, service, client, png_file):
        with pytest.raises(InvalidFileTypeError):
            service.upload_many("brands", "", [png_file, UploadedFile(filename="b.gif", content=b"x")])
        client.storage.from_.return_value.upload.assert_not_called()


class TestObjectPath:

    @pytest.mark.parametrize("url,prefix,expected", [
        (f"{PUBLIC_BASE}/brands/medicine/ab12.png", "medicine", "medicine/ab12.png"),
        (f"{PUBLIC_BASE}/brands/ab12.png", "", "ab12.png"),
        (f"{PUBLIC_BASE}/brands/ab12.png?t=1", "", "ab12.png"),
        ("https://cdn.example.com/files/ab12.png", "medicine", "medicine/ab12.png"),
        ("https://cdn.example.com/files/ab12.png", "", "ab12.png"),
    ])
    def test_object_path_from_url(self, url, prefix, expected):
        assert StorageService.object_path_from_url("brands", url, prefix) == expected


class TestDelete:

    def test_delete(self, service, client):
        assert service.delete("brands", f"{PUBLIC_BASE}/brands/medicine/x.png", "medicine")
        client.storage.from_.assert_called_with("brands")
        client.storage.from_.return_value.remove.assert_called_once_with(["medicine/x.png"])

    def test_delete_never_raises(self, service, client):
        client.storage.from_.return_value.remove.side_effect = RuntimeError("network down")
        assert service.delete("brands", f"{PUBLIC_BASE}/brands/x.png") is False

    def test_delete_many_counts_successes(self, service, client):
        client.storage.from_.return_value.remove.side_effect = [None, RuntimeError("gone"), None]
        urls = [f"{PUBLIC_BASE}/brands/{n}.png" for n in "abc"]
        assert service.delete_many("brands", urls) == 2
