"""
Configuration settings for the application.
"""

import os
from pathlib import Path

# Paths
BASE_DIR = Path(__file__).parent
FILES_DIR = Path(os.environ.get("DOWNLOAD_FILES_DIR", BASE_DIR / "files"))

# Transfer configuration
CHUNK_SIZE = 4096  # bytes per read/write

# Logging configuration
LOG_LEVEL = "INFO"
