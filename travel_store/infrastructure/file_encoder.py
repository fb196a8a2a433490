"""Asynchronous data-URL encoding for inline images."""
import asyncio
import base64
import hashlib
import mimetypes
from pathlib import Path
from typing import Union

from travel_store.domain.exceptions import FileReadError

FileSource = Union[str, Path, bytes]

DEFAULT_MIME_TYPE = "application/octet-stream"


def _read_bytes(source: FileSource) -> bytes:
    if isinstance(source, bytes):
        return source
    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise FileReadError(f"Could not read file {source}: {e}") from e


def guess_mime_type(source: FileSource) -> str:
    """Guess a MIME type from a file name; raw bytes get the generic type."""
    if isinstance(source, bytes):
        return DEFAULT_MIME_TYPE
    mime_type, _ = mimetypes.guess_type(str(source))
    return mime_type or DEFAULT_MIME_TYPE


def encode_data_url(data: bytes, mime_type: str) -> str:
    """Build a ``data:<mime>;base64,<payload>`` string."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def content_key(data: bytes) -> str:
    """Storage key for content-addressed file caching."""
    return f"file_{hashlib.sha256(data).hexdigest()}"


async def read_file_bytes(source: FileSource) -> bytes:
    """Read file contents in the default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _read_bytes, source)
