# app/services/uploads.py
"""
Blob intake: accepts an uploaded file, hands the bytes to a blob store and
records the metadata in the files table.
"""
import logging
import random
import re
import time
from pathlib import Path
from typing import Optional, Protocol

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from app.core.errors import ValidationFailed, utc_now
from app.models.file import UploadedFile
from app.services.store import Table

logger = logging.getLogger("uvicorn.error")

UPLOAD_FIELD = "file"
PUBLIC_PREFIX = "/uploads/"
DEFAULT_MIME = "application/octet-stream"
# Allowance for multipart boundaries, part headers and the description field
MULTIPART_OVERHEAD = 64 * 1024


def make_stored_filename(original_name: Optional[str], field: str = UPLOAD_FIELD) -> str:
    """
    Build a collision-resistant name: <field>-<epoch ms>-<random>.<ext>.
    The extension is the text after the last dot of the original name,
    reduced to letters and digits; names without a dot get no extension.
    """
    unique = f"{time.time_ns() // 1_000_000}-{round(random.random() * 1e9)}"
    ext = ""
    if original_name and "." in original_name:
        ext = re.sub(r"[^A-Za-z0-9]", "", original_name.rsplit(".", 1)[1])
    return f"{field}-{unique}.{ext}" if ext else f"{field}-{unique}"


class BlobStore(Protocol):
    def put(self, original_name: Optional[str], data: bytes) -> str:
        """Persist the bytes and return the stored filename."""
        ...


class LocalBlobStore:
    """
    Blob store backed by a directory on disk (served at /uploads).
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def put(self, original_name: Optional[str], data: bytes) -> str:
        name = make_stored_filename(original_name)
        (self.directory / name).write_bytes(data)
        return name


class FileIntake:
    def __init__(self, files: Table[UploadedFile], blobs: BlobStore, max_bytes: int):
        self._files = files
        self._blobs = blobs
        self.max_bytes = max_bytes

    def too_large(self) -> ValidationFailed:
        return ValidationFailed(
            f"File exceeds the {self.max_bytes} byte limit",
            title="File too large",
            details={"limit": self.max_bytes},
        )

    def request_too_large(self, content_length: Optional[str]) -> bool:
        """
        True when a declared request body cannot fit under the limit even
        after allowing for multipart framing. Lets the server refuse before
        reading the body; requests without a usable Content-Length fall through
        to the exact check in accept().
        """
        try:
            declared = int(content_length) if content_length else None
        except ValueError:
            return False
        return declared is not None and declared > self.max_bytes + MULTIPART_OVERHEAD

    async def accept(
        self,
        upload: Optional[UploadFile],
        base_url: str,
        description: Optional[str] = None,
    ) -> UploadedFile:
        """
        Store one uploaded file and record its metadata.

        Args:
            upload: The multipart "file" part, None when the request had none
            base_url: Scheme and host of the incoming request
            description: Optional free text from the form

        Raises:
            ValidationFailed: no file part, or more than max_bytes
        """
        if upload is None:
            raise ValidationFailed("No file provided", title="File upload failed")
        if upload.size is not None and upload.size > self.max_bytes:
            raise self.too_large()

        # Read one byte past the limit so oversize uploads are detected without
        # pulling the whole payload into memory
        data = await upload.read(self.max_bytes + 1)
        if len(data) > self.max_bytes:
            raise self.too_large()

        stored_name = await run_in_threadpool(self._blobs.put, upload.filename, data)
        url = base_url.rstrip("/") + PUBLIC_PREFIX + stored_name
        record = self._files.append(
            lambda new_id: UploadedFile(
                id=new_id,
                filename=stored_name,
                url=url,
                size=len(data),
                mime_type=upload.content_type or DEFAULT_MIME,
                description=description or None,
                uploaded_at=utc_now(),
            )
        )
        logger.info("[files] stored %s (%d bytes, %s)", stored_name, record.size, record.mime_type)
        return record
