"""Font source handling.

A font source is one of:
- a ``data:`` URI string carrying base64 font bytes after the first comma
- any other string (or ``os.PathLike``), taken as a file path
- a binary buffer (``bytes``, ``bytearray`` or ``memoryview``)

This module turns a source into raw bytes, blocking or on an event loop.
"""

import asyncio
import base64
import binascii
import os
from enum import Enum, auto
from pathlib import Path

from glyphpath.exceptions import FontIOError, FontParseError, InvalidSourceDataError

FontSource = str | os.PathLike[str] | bytes | bytearray | memoryview

DATA_URI_PREFIX = "data:"


class SourceKind(Enum):
    """Shape of a font source."""

    DATA_URI = auto()
    PATH = auto()
    BUFFER = auto()


def classify_source(source: object) -> SourceKind:
    """Work out which kind of font source we were given.

    Args:
        source: The font source as passed to the registry

    Returns:
        The SourceKind of ``source``

    Raises:
        InvalidSourceDataError: If source is none of the supported shapes
    """
    if isinstance(source, str):
        if source.startswith(DATA_URI_PREFIX):
            return SourceKind.DATA_URI
        return SourceKind.PATH
    if isinstance(source, os.PathLike):
        return SourceKind.PATH
    if isinstance(source, (bytes, bytearray, memoryview)):
        return SourceKind.BUFFER
    raise InvalidSourceDataError(source)


def describe_source(source: object) -> str:
    """Short human-readable description of a source for messages and logs."""
    kind = classify_source(source)
    if kind is SourceKind.DATA_URI:
        return "data URI"
    if kind is SourceKind.PATH:
        return f"'{os.fspath(source)}'"  # type: ignore[arg-type]
    return f"{len(memoryview(source))}-byte buffer"  # type: ignore[arg-type]


def decode_data_uri(uri: str) -> bytes:
    """Decode the base64 payload of a data URI.

    Everything after the first comma is the payload; the media type is
    not checked.

    Raises:
        FontParseError: If there is no payload or it is not valid base64
    """
    _, comma, payload = uri.partition(",")
    if not comma or not payload:
        raise FontParseError("data URI", "no base64 payload after ','")
    try:
        return base64.b64decode(payload)
    except (binascii.Error, ValueError) as e:
        raise FontParseError("data URI", f"invalid base64 payload: {e}") from e


def read_font_file(path: str | os.PathLike[str]) -> bytes:
    """Read a font file from disk.

    Raises:
        FontIOError: If the file does not exist or cannot be read
    """
    font_path = Path(path)
    try:
        return font_path.read_bytes()
    except OSError as e:
        raise FontIOError(str(font_path), e.strerror or str(e)) from e
    except ValueError as e:
        # e.g. an embedded NUL byte in the path
        raise FontIOError(str(font_path), str(e)) from e


def read_source(source: FontSource) -> bytes:
    """Resolve a font source to raw font bytes, blocking on file I/O."""
    kind = classify_source(source)
    if kind is SourceKind.DATA_URI:
        return decode_data_uri(source)  # type: ignore[arg-type]
    if kind is SourceKind.PATH:
        return read_font_file(source)  # type: ignore[arg-type]
    return bytes(source)  # type: ignore[arg-type]


async def read_source_async(source: FontSource) -> bytes:
    """Resolve a font source to raw font bytes without blocking the event loop.

    File reads are handed to the running loop's default executor; data URIs
    and buffers are decoded inline.
    """
    if classify_source(source) is SourceKind.PATH:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, read_font_file, source)
    return read_source(source)
