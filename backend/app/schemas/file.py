# app/schemas/file.py
"""
Pydantic schemas for file upload endpoints.
"""
import datetime as dt
from pydantic import BaseModel

from app.models.file import UploadedFile

class FileOut(BaseModel):
    id: str
    filename: str
    url: str
    size: int
    uploadedAt: dt.datetime
    mimeType: str
    description: str | None = None

    @classmethod
    def from_file(cls, f: UploadedFile) -> "FileOut":
        return cls(
            id=f.id,
            filename=f.filename,
            url=f.url,
            size=f.size,
            uploadedAt=f.uploaded_at,
            mimeType=f.mime_type,
            description=f.description,
        )
