"""
Domain model for uploaded files.
Holds only metadata; the bytes live in the blob store under `filename`.
"""
import datetime as dt
from pydantic import BaseModel, ConfigDict

class UploadedFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # "file_<epoch ms>", time based and not unique across processes
    filename: str  # Stored name returned by the blob store
    url: str  # Public URL under /uploads/
    size: int  # Bytes
    mime_type: str  # As reported by the client, not checked against content
    description: str | None = None
    uploaded_at: dt.datetime
