"""
Download endpoint for the fixed PDF and Excel files.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pathlib import Path
from typing import Optional
import logging

from core.download_service import InvalidFileType, StoredFileMissing, open_download
from utils.helpers import FileStreamingResponse, attachment_header, get_storage_dir

router = APIRouter(prefix="/download", tags=["download"])
logger = logging.getLogger(__name__)


@router.get("")
async def download_file(
    file_type: Optional[str] = Query(
        None,
        alias="type",
        description="File to download: 'pdf' or 'excel' (case-insensitive).",
    ),
    storage_dir: Path = Depends(get_storage_dir),
):
    """
    Download one of the stored files as an attachment.

    The body is streamed in fixed-size chunks; Content-Length is the
    size of the opened file.
    """
    try:
        download = open_download(file_type, storage_dir)
    except InvalidFileType:
        logger.warning(f"Rejected download request for type {file_type!r}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid file type"
        )
    except StoredFileMissing as e:
        logger.warning(f"Requested file is missing: {e.path}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="file not found"
        )

    logger.info(f"Serving {download.stored.filename} ({download.size} bytes)")
    return FileStreamingResponse(
        download.file,
        media_type=download.stored.media_type,
        headers={
            "Content-Disposition": attachment_header(download.stored.filename),
            "Content-Length": str(download.size),
        },
    )
