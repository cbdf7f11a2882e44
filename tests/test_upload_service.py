"""
HotelHub Backend: Upload Sink Unit Tests
=========================================

What we test:
    ✅ Paths are returned in arrival order and contents land in the right file
    ✅ Generated names follow <field>-<millis>-<random> under the upload dir
    ✅ A write failure raises FileStorageError and leaves no files behind
    ✅ Cleanup tolerates missing files
"""

import io
import os
import re
from unittest.mock import patch

import pytest
from fastapi import UploadFile

from hotelhub.exceptions import FileStorageError
from hotelhub.services.upload_service import UploadSink


def make_upload(content: bytes, filename: str = "photo.jpg") -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=filename)


class FailingUpload:
    """Upload whose body cannot be read, simulating an I/O failure mid-batch."""

    filename = "broken.jpg"

    async def read(self, size: int = -1) -> bytes:
        raise OSError("No space left on device")


class TestUploadSinkStore:

    @pytest.mark.asyncio
    async def test_store_all_preserves_order(self, temp_storage):
        sink = UploadSink(upload_dir=temp_storage)
        contents = [b"first", b"second", b"third"]

        paths = await sink.store_all([make_upload(c) for c in contents])

        assert len(paths) == 3
        assert len(set(paths)) == 3
        for path, expected in zip(paths, contents):
            with open(path, "rb") as f:
                assert f.read() == expected

    @pytest.mark.asyncio
    async def test_generated_name_format(self, temp_storage):
        sink = UploadSink(upload_dir=temp_storage)

        (path,) = await sink.store_all([make_upload(b"data", "holiday.png")])

        assert os.path.dirname(path) == temp_storage
        # Client filename and extension are not reused
        assert re.fullmatch(r"images-\d+-\d+", os.path.basename(path))

    @pytest.mark.asyncio
    async def test_large_file_is_written_in_full(self, temp_storage):
        sink = UploadSink(upload_dir=temp_storage)
        content = os.urandom(sink.CHUNK_SIZE * 3 + 17)

        (path,) = await sink.store_all([make_upload(content)])

        with open(path, "rb") as f:
            assert f.read() == content

    @pytest.mark.asyncio
    async def test_no_files_returns_empty_list(self, temp_storage):
        sink = UploadSink(upload_dir=temp_storage)
        assert await sink.store_all([]) == []

    @pytest.mark.asyncio
    async def test_creates_missing_directory(self, tmp_path):
        target = tmp_path / "nested" / "uploads"
        sink = UploadSink(upload_dir=str(target))

        paths = await sink.store_all([make_upload(b"x")])

        assert target.is_dir()
        assert os.path.exists(paths[0])


class TestUploadSinkFailures:

    @pytest.mark.asyncio
    async def test_open_failure_raises_file_storage_error(self, temp_storage):
        sink = UploadSink(upload_dir=temp_storage)

        with patch(
            "hotelhub.services.upload_service.aiofiles.open",
            side_effect=PermissionError("Permission denied"),
        ):
            with pytest.raises(FileStorageError, match="Permission denied"):
                await sink.store_all([make_upload(b"x")])

        assert os.listdir(temp_storage) == []

    @pytest.mark.asyncio
    async def test_partial_batch_is_rolled_back(self, temp_storage):
        """A failure on the second file removes the first one too."""
        sink = UploadSink(upload_dir=temp_storage)

        with pytest.raises(FileStorageError, match="No space left"):
            await sink.store_all([make_upload(b"ok"), FailingUpload()])

        assert os.listdir(temp_storage) == []


class TestUploadSinkCleanup:

    @pytest.mark.asyncio
    async def test_cleanup_removes_files(self, temp_storage):
        sink = UploadSink(upload_dir=temp_storage)
        paths = await sink.store_all([make_upload(b"a"), make_upload(b"b")])

        await sink.cleanup(paths)

        assert os.listdir(temp_storage) == []

    @pytest.mark.asyncio
    async def test_cleanup_skips_missing_and_continues(self, temp_storage):
        sink = UploadSink(upload_dir=temp_storage)
        (path,) = await sink.store_all([make_upload(b"a")])
        missing = os.path.join(temp_storage, "images-0-0")

        await sink.cleanup([missing, path])

        assert os.listdir(temp_storage) == []

    @pytest.mark.asyncio
    async def test_cleanup_nonexistent(self, temp_storage):
        sink = UploadSink(upload_dir=temp_storage)
        # Should not raise
        await sink.cleanup([os.path.join(temp_storage, "images-0-0")])
