"""
Resolution and streaming of the fixed downloadable files.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import BinaryIO, Iterator, Mapping, Optional

from config import CHUNK_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredFile:
    """A downloadable file: the type token selecting it, its name on disk and its MIME type."""
    token: str
    filename: str
    media_type: str


FILE_TYPES: Mapping[str, StoredFile] = MappingProxyType({
    "pdf": StoredFile("pdf", "ejemplo.pdf", "application/pdf"),
    "excel": StoredFile(
        "excel",
        "ejemplo.xlsx",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ),
})


class DownloadError(Exception):
    """Base class for download failures."""


class InvalidFileType(DownloadError):
    """The requested type token is missing or not one of FILE_TYPES."""

    def __init__(self, token: Optional[str]):
        self.token = token
        super().__init__(f"invalid file type: {token!r}")


class StoredFileMissing(DownloadError):
    """The resolved file is not present in the storage directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"file not found: {path}")


class TransferFailure(DownloadError):
    """Reading the file failed while its bytes were being streamed."""


@dataclass(frozen=True)
class PreparedDownload:
    """A resolved file, already open, ready to be streamed."""
    stored: StoredFile
    path: Path
    file: BinaryIO
    size: int


def resolve_type(token: Optional[str]) -> StoredFile:
    """
    Map a type token to its stored file, ignoring letter case.

    Args:
        token: Value of the ``type`` query parameter, or None if absent

    Returns:
        The matching StoredFile

    Raises:
        InvalidFileType: If the token is absent or unknown
    """
    if token is None:
        raise InvalidFileType(token)
    stored = FILE_TYPES.get(token.lower())
    if stored is None:
        raise InvalidFileType(token)
    return stored


def open_download(token: Optional[str], storage_dir: Path) -> PreparedDownload:
    """
    Resolve a type token and open the matching file in ``storage_dir``.

    The token is validated before the filesystem is touched, so an unknown
    type never results in a path lookup. The size is taken from the open
    handle, so it matches the bytes that will be streamed from it. The
    caller owns the returned handle and must close it.

    Raises:
        InvalidFileType: If the token is absent or unknown
        StoredFileMissing: If the resolved file is not on disk
    """
    stored = resolve_type(token)
    path = storage_dir / stored.filename
    if not path.is_file():
        raise StoredFileMissing(path)
    try:
        f = open(path, "rb")
    except FileNotFoundError:
        # removed after the check
        raise StoredFileMissing(path)
    try:
        size = os.fstat(f.fileno()).st_size
    except OSError:
        f.close()
        raise
    return PreparedDownload(stored=stored, path=path, file=f, size=size)


def iter_file(f: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield the bytes of ``f`` in ``chunk_size`` pieces until end of file.

    Read errors are raised as TransferFailure. Closing ``f`` is left to
    whoever opened it.
    """
    name = getattr(f, "name", "<stream>")
    try:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield chunk
    except OSError as e:
        logger.error(f"Error streaming {name}: {e}")
        raise TransferFailure(f"Failed to stream {name}: {e}") from e
