"""
FastAPI application entry point.
Serves the fixed PDF and Excel example files for download.
"""

from fastapi import FastAPI
import logging

from api import health, download
from core.download_service import FILE_TYPES
from utils.helpers import get_storage_dir
from config import LOG_LEVEL

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="File Download API",
    description="Download the example PDF or Excel file by type",
    version="1.0.0"
)

# Include routers
app.include_router(health.router)
app.include_router(download.router)


@app.on_event("startup")
async def startup_event():
    """Report the storage directory and any files it is missing."""
    logger.info("Starting up application...")

    storage_dir = get_storage_dir()
    logger.info(f"Serving files from {storage_dir}")
    for stored in FILE_TYPES.values():
        if not (storage_dir / stored.filename).is_file():
            logger.warning(f"{stored.filename} not found; type '{stored.token}' will return 404")

    logger.info("Startup complete.")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown."""
    logger.info("Shutting down application...")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
