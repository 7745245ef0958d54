from __future__ import annotations

import logging
from typing import BinaryIO, List, Optional

from ..errors import SourceReadFailed, TrailingData, TruncatedStream
from ..image import Image
from ..pixel import PIXEL_BYTES, Pixel
from ..settings import READ_CHUNK_SIZE, CodecSettings, resolve_settings
from .header import EXTENDED_HEADER_SIZE, HEADER_SIZE, VERSION_OFFSET, Header, decode_header, header_size

logger = logging.getLogger(__name__)


def decode_pixels(data: bytes, count: int) -> List[Pixel]:
    """Unpack ``count`` RGB triplets from the start of ``data``."""
    size = count * PIXEL_BYTES
    if len(data) < size:
        raise TruncatedStream(size, len(data))
    return [Pixel(data[i], data[i + 1], data[i + 2]) for i in range(0, size, PIXEL_BYTES)]


def decode(data: bytes, settings: Optional[CodecSettings] = None) -> Image:
    """Rebuild an image from a complete limg byte string."""
    settings = resolve_settings(settings)
    view = memoryview(data).cast("B")
    header = decode_header(view[:EXTENDED_HEADER_SIZE], settings)
    available = len(view) - header.size
    if available < header.data_size:
        raise TruncatedStream(header.encoded_size, len(view))
    _check_trailing(header, available - header.data_size, settings)
    pixels = decode_pixels(view[header.size :], header.num_pixels)
    return Image.from_pixels(header.width, header.height, pixels, header.transparent_color)


def read_image(source: BinaryIO, settings: Optional[CodecSettings] = None) -> Image:
    """Read exactly one limg image from ``source``."""
    settings = resolve_settings(settings)
    prefix = read_exact(source, HEADER_SIZE, allow_short=True)
    if len(prefix) == HEADER_SIZE and settings.accepts_version(prefix[VERSION_OFFSET]):
        prefix += read_exact(source, header_size(prefix[VERSION_OFFSET]) - HEADER_SIZE, allow_short=True)
    header = decode_header(prefix, settings)
    logger.debug("Read limg header v%d %dx%d", header.version, header.width, header.height)
    data = read_exact(source, header.data_size, allow_short=True)
    if len(data) < header.data_size:
        raise TruncatedStream(header.encoded_size, header.size + len(data))
    if settings.strict_trailing:
        _check_trailing(header, len(read_exact(source, 1, allow_short=True)), settings)
    pixels = decode_pixels(data, header.num_pixels)
    return Image.from_pixels(header.width, header.height, pixels, header.transparent_color)


def read_exact(source: BinaryIO, size: int, allow_short: bool = False) -> bytes:
    """Read ``size`` bytes, looping over short reads until EOF.

    Reads are capped at READ_CHUNK_SIZE so memory grows with the data that
    actually arrives, not with the size a header claims.
    """
    out = bytearray()
    try:
        while len(out) < size:
            chunk = source.read(min(size - len(out), READ_CHUNK_SIZE))
            if chunk is None:
                raise SourceReadFailed(None, "non-blocking source has no data available")
            if not chunk:
                break
            out += chunk
    except (OSError, ValueError) as exc:
        raise SourceReadFailed(exc, f"after {len(out)} bytes") from exc
    if len(out) < size and not allow_short:
        raise TruncatedStream(size, len(out))
    return bytes(out)


def _check_trailing(header: Header, extra: int, settings: CodecSettings) -> None:
    if not extra:
        return
    if settings.strict_trailing:
        raise TrailingData(f"Unexpected data after {header.encoded_size} bytes of image")
    logger.debug("Ignoring %d trailing bytes after limg pixel data", extra)
