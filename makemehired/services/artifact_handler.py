"""Handle artifacts returned by the generation service: PDF bytes and HTML preview."""

import base64
import binascii
import io
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional

from makemehired.config import DEFAULT_PDF_FILENAME, DOWNLOAD_DIR, PDF_MIME_TYPE
from makemehired.utils.logger import get_logger

logger = get_logger(__name__)


def decode_binary(text: str) -> bytes:
    """
    Decode standard base64. Malformed input (bad characters or padding)
    raises binascii.Error instead of returning partial bytes.
    """
    try:
        return base64.b64decode(text, validate=True)
    except ValueError as e:
        # Non-ASCII str input fails before the alphabet check with a plain ValueError
        if isinstance(e, binascii.Error):
            raise
        raise binascii.Error(str(e)) from e


@dataclass
class DownloadResource:
    """In-memory file handed to a delivery callback; valid only inside ephemeral_download."""

    buffer: io.BytesIO
    filename: str
    mime_type: str = PDF_MIME_TYPE

    def read(self) -> bytes:
        return self.buffer.getvalue()


@contextmanager
def ephemeral_download(data: bytes, filename: Optional[str] = None) -> Iterator[DownloadResource]:
    """Wrap data as a PDF download resource; the buffer is closed on exit, even on error."""
    resource = DownloadResource(buffer=io.BytesIO(data), filename=filename or DEFAULT_PDF_FILENAME)
    try:
        yield resource
    finally:
        resource.buffer.close()


def save_to_download_dir(resource: DownloadResource) -> Path:
    """Default delivery: write the file into DOWNLOAD_DIR."""
    folder = Path(DOWNLOAD_DIR)
    folder.mkdir(parents=True, exist_ok=True)
    # Keep only the final path component of server-supplied names
    name = Path(resource.filename).name
    if name in ("", ".", ".."):
        name = DEFAULT_PDF_FILENAME
    path = folder / name
    path.write_bytes(resource.read())
    return path


def trigger_download(
    data: bytes,
    filename: Optional[str] = None,
    deliver: Optional[Callable[[DownloadResource], object]] = None,
) -> str:
    """
    Offer data as an application/pdf download named filename (or the default
    name). Returns the filename used.
    """
    deliver = deliver or save_to_download_dir
    with ephemeral_download(data, filename) as resource:
        deliver(resource)
        logger.info("Download triggered: %s (%s bytes)", resource.filename, len(data))
        return resource.filename


class PreviewSurface:
    """Holds the HTML currently previewed. Each render replaces the previous one."""

    def __init__(self):
        self.html: Optional[str] = None
        self.revision = 0

    def show(self, html: str) -> None:
        self.html = html
        self.revision += 1

    def clear(self) -> None:
        self.html = None
        self.revision += 1


def render_preview(surface: PreviewSurface, html: str) -> PreviewSurface:
    """Put html on the preview surface, replacing any earlier preview."""
    surface.show(html)
    logger.debug("Preview rendered (revision %s, %s chars)", surface.revision, len(html))
    return surface
