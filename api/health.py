"""
Health check endpoints.
"""

from fastapi import APIRouter, Depends
from pathlib import Path

from schemas import HealthResponse, StoredFileStatus
from core.download_service import FILE_TYPES
from utils.helpers import get_storage_dir

router = APIRouter(prefix="", tags=["health"])


def _file_statuses(storage_dir: Path):
    return [
        StoredFileStatus(
            type=stored.token,
            filename=stored.filename,
            media_type=stored.media_type,
            available=(storage_dir / stored.filename).is_file(),
        )
        for stored in FILE_TYPES.values()
    ]


@router.get("/", response_model=HealthResponse)
async def root(storage_dir: Path = Depends(get_storage_dir)):
    """Root endpoint - health check."""
    return HealthResponse(
        status="healthy",
        message="File download service is running",
        storage_dir=str(storage_dir),
        files=_file_statuses(storage_dir)
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(storage_dir: Path = Depends(get_storage_dir)):
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        message="Service is operational",
        storage_dir=str(storage_dir),
        files=_file_statuses(storage_dir)
    )
