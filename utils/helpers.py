from pathlib import Path
from typing import BinaryIO

from fastapi.responses import StreamingResponse
from starlette.types import Receive, Scope, Send

import config
from core.download_service import iter_file


def get_storage_dir() -> Path:
    """Directory holding the downloadable files (overridden in tests)."""
    return config.FILES_DIR


def attachment_header(filename: str) -> str:
    """Content-Disposition value that makes clients save the body as ``filename``."""
    return f'attachment; filename="{filename}"'


class FileStreamingResponse(StreamingResponse):
    """
    Streams an open file in fixed-size chunks and closes it once the
    response ends, including when the client disconnects or a send fails.
    """

    def __init__(self, file: BinaryIO, **kwargs):
        self.file = file
        super().__init__(iter_file(file), **kwargs)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            self.file.close()
