# app/schemas/error.py
"""
Wire shape of every error body (documented in OpenAPI responses).
"""
from typing import Any, Optional
from pydantic import BaseModel

class ErrorOut(BaseModel):
    error: str  # Short title, e.g. "Validation failed"
    message: str  # Human readable explanation
    timestamp: str  # ISO-8601, UTC
    details: Optional[dict[str, Any]] = None  # Field-level information when available
