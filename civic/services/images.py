"""Read an uploaded image into an embeddable data: URL."""

import asyncio
import base64
import mimetypes
from pathlib import Path

DEFAULT_MIME = "application/octet-stream"


def encode_data_url(data: bytes, mime: str = DEFAULT_MIME) -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


async def read_image_as_data_url(path: Path | str | None) -> str:
    """Single-shot read of path; empty string when no file was supplied.

    The file is read in a worker thread so the event loop is not blocked.
    Raises OSError if path is given but cannot be read.
    """
    if not path:
        return ""
    path = Path(path)
    data = await asyncio.to_thread(path.read_bytes)
    mime, _ = mimetypes.guess_type(path.name)
    return encode_data_url(data, mime or DEFAULT_MIME)
