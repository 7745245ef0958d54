from __future__ import annotations

import logging
from typing import BinaryIO, Iterable

from ..errors import SinkWriteFailed
from ..image import Image
from ..pixel import Pixel
from .header import encode_header

logger = logging.getLogger(__name__)


def encode_pixels(pixels: Iterable[Pixel]) -> bytes:
    """Pack pixels into consecutive RGB triplets with no padding."""
    out = bytearray()
    for pixel in pixels:
        out += bytes((pixel.r, pixel.g, pixel.b))
    return bytes(out)


def encode(image: Image) -> bytes:
    """Serialize an image into a complete limg byte string."""
    width, height = image.dimensions()
    return encode_header(width, height, image.transparent_color) + encode_pixels(image.pixels)


def write_image(image: Image, sink: BinaryIO) -> int:
    """Write ``image`` to ``sink`` and return the number of bytes written.

    Raw sinks may accept fewer bytes than offered; the remainder is written
    until the whole stream is out. On failure the sink may already hold part
    of the stream and that output must be discarded by the caller.
    """
    data = encode(image)
    view = memoryview(data)
    offset = 0
    try:
        while offset < len(data):
            written = sink.write(view[offset:])
            if written is None:
                written = len(data) - offset
            if written <= 0:
                raise SinkWriteFailed(None, f"sink accepted no data at byte {offset}")
            offset += written
        flush = getattr(sink, "flush", None)
        if callable(flush):
            flush()
    except (OSError, ValueError) as exc:
        raise SinkWriteFailed(exc, f"after {offset} of {len(data)} bytes") from exc
    logger.debug("Wrote limg %dx%d (%d bytes)", image.width, image.height, offset)
    return offset
