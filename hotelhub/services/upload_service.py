"""
HotelHub Backend: Upload Sink
==============================

What:  Durable storage for image files uploaded with POST /hotel.
How:   Streams each UploadFile to disk with async I/O under a fixed relative
       directory and returns the assigned paths in arrival order.
Who:   Called by HotelService.create_hotel; constructed once by create_app()
       and injected through `get_upload_sink`.

Naming:
    <upload_dir>/<field>-<epoch millis>-<random 0..1e9>
    e.g. uploads/images-1718000000000-482913377

    The stored reference is that relative path, not a public URL. Files keep
    no extension and the client-supplied filename is never used.

Failure model:
    Any OS error while writing aborts the whole batch: files already written
    for this call are removed and FileStorageError is raised. Callers never
    see a partial list of paths.
"""

import logging
import os
import random
import time
from pathlib import Path
from typing import List, Sequence

import aiofiles
import aiofiles.os
from fastapi import Request, UploadFile

from hotelhub.exceptions import FileStorageError

logger = logging.getLogger(__name__)


class UploadSink:
    """
    Writes uploaded files into `upload_dir`.

    Stateless apart from its configuration, so one instance serves every
    request concurrently.
    """

    # Read size per await; keeps memory flat for large photos
    CHUNK_SIZE = 64 * 1024

    def __init__(self, upload_dir: str = "uploads", field_name: str = "images"):
        self.upload_dir = upload_dir
        self.field_name = field_name

    def ensure_directory(self) -> Path:
        """Create the upload directory if needed and return its absolute path."""
        path = Path(self.upload_dir)
        path.mkdir(parents=True, exist_ok=True)
        return path.resolve()

    def _generate_path(self) -> str:
        """Build a collision-resistant relative path from the clock and a random value."""
        unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        return os.path.join(self.upload_dir, f"{self.field_name}-{unique_suffix}")

    async def _write(self, upload: UploadFile, path: str) -> int:
        written = 0
        async with aiofiles.open(path, "wb") as f:
            while True:
                chunk = await upload.read(self.CHUNK_SIZE)
                if not chunk:
                    break
                await f.write(chunk)
                written += len(chunk)
        return written

    async def store_all(self, files: Sequence[UploadFile]) -> List[str]:
        """
        Persist every file and return their paths in the order received.

        Raises:
            FileStorageError: the directory or a file could not be written.
                Any files already written by this call are removed first.
        """
        paths: List[str] = []
        if not files:
            return paths

        try:
            self.ensure_directory()
            for upload in files:
                path = self._generate_path()
                # Record before writing so a half-written file is cleaned up too
                paths.append(path)
                size = await self._write(upload, path)
                logger.info(
                    "Upload stored: %s (%d bytes, original=%s)",
                    path,
                    size,
                    upload.filename or "unknown",
                )
        except OSError as e:
            logger.error("Failed to store upload in %s: %s", self.upload_dir, str(e))
            await self.cleanup(paths)
            raise FileStorageError(
                message=str(e),
                context={"upload_dir": self.upload_dir, "os_error": type(e).__name__},
            )

        return paths

    async def cleanup(self, paths: Sequence[str]) -> None:
        """
        Remove previously stored files (best effort).

        Used to roll back a batch whose database insert failed. Missing files
        are ignored; other failures are logged and left for manual cleanup.
        """
        for file_path in paths:
            try:
                await aiofiles.os.remove(file_path)
                logger.info("Cleaned up upload: %s", file_path)
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning("Failed to clean up upload %s: %s", file_path, str(e))


def get_upload_sink(request: Request) -> UploadSink:
    """FastAPI dependency returning the UploadSink attached to the running app."""
    return request.app.state.upload_sink
