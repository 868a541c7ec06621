"""
Pydantic schemas for request/response models.
"""

from pydantic import BaseModel
from typing import List


class StoredFileStatus(BaseModel):
    """One downloadable file and whether it is currently provisioned."""
    type: str
    filename: str
    media_type: str
    available: bool


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    message: str
    storage_dir: str
    files: List[StoredFileStatus]
