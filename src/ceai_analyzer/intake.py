from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from .errors import EmptyFileError, InvalidFileTypeError, UnreadableFileError
from .models import UploadedFile

logger = logging.getLogger("ceai_analyzer.intake")

CSV_MEDIA_TYPE = "text/csv"
CHUNK_SIZE = 64 * 1024

ProgressCallback = Callable[[int], None]


def is_csv_file(name: str, media_type: Optional[str]) -> bool:
    """A file is accepted when it declares the CSV media type or has a .csv name."""
    if media_type and media_type.split(";", 1)[0].strip().lower() == CSV_MEDIA_TYPE:
        return True
    return name.lower().endswith(".csv")


def read_text(
    stream: BinaryIO,
    total_size: int,
    on_progress: Optional[ProgressCallback] = None,
    chunk_size: int = CHUNK_SIZE,
) -> str:
    """
    Read a whole upload into memory as text.

    Progress is reported as an integer percentage after each chunk when the
    total size is known, and always reaches 100 once the read completes.

    Raises:
      UnreadableFileError: the stream fails or the bytes are not UTF-8 text
      EmptyFileError: the decoded content is empty
    """
    chunks: list[bytes] = []
    loaded = 0
    try:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            chunks.append(chunk)
            loaded += len(chunk)
            if on_progress is not None and total_size > 0:
                on_progress(min(100, round(loaded * 100 / total_size)))
        content = b"".join(chunks).decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading file: %s", exc)
        raise UnreadableFileError() from exc

    if not content:
        logger.error("Error reading file: file content is empty")
        raise EmptyFileError()

    if on_progress is not None:
        on_progress(100)
    return content


def accept_file(
    name: str,
    media_type: Optional[str],
    stream: BinaryIO,
    size: int,
    on_progress: Optional[ProgressCallback] = None,
) -> UploadedFile:
    """
    Validate and read one dropped or selected file.

    The type check happens before the stream is touched, so a rejected file
    is never read.
    """
    if not is_csv_file(name, media_type):
        raise InvalidFileTypeError()
    content = read_text(stream, size, on_progress=on_progress)
    logger.info("Accepted %s (%d bytes)", name, size)
    return UploadedFile(name=name, size=size, content=content)


def load_csv_path(path: Path, on_progress: Optional[ProgressCallback] = None) -> UploadedFile:
    media_type, _ = mimetypes.guess_type(path.name)
    size = path.stat().st_size
    with path.open("rb") as f:
        return accept_file(path.name, media_type, f, size, on_progress=on_progress)
