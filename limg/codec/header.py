from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import DimensionsTooLarge, InvalidDimensions, InvalidFormat, TruncatedStream, UnsupportedVersion
from ..image import validate_dimensions
from ..pixel import PIXEL_BYTES, Pixel
from ..settings import (
    FORMAT_VERSION,
    MAGIC,
    SUPPORTED_VERSIONS,
    TRANSPARENT_FORMAT_VERSION,
    CodecSettings,
)

DIMENSION_BYTES = 4
HEADER_SIZE = len(MAGIC) + 1 + 2 * DIMENSION_BYTES
# Version 2 appends a flag byte and an RGB triplet for the transparent color.
TRANSPARENT_FIELD_SIZE = 1 + PIXEL_BYTES
EXTENDED_HEADER_SIZE = HEADER_SIZE + TRANSPARENT_FIELD_SIZE
VERSION_OFFSET = len(MAGIC)


@dataclass(frozen=True)
class Header:
    version: int
    width: int
    height: int
    transparent_color: Optional[Pixel] = None

    @property
    def size(self) -> int:
        return header_size(self.version)

    @property
    def num_pixels(self) -> int:
        return self.width * self.height

    @property
    def data_size(self) -> int:
        """Length of the pixel data that follows the header."""
        return self.num_pixels * PIXEL_BYTES

    @property
    def encoded_size(self) -> int:
        return self.size + self.data_size


def header_size(version: int) -> int:
    """Header length for ``version``; unknown versions use the base layout."""
    if version == TRANSPARENT_FORMAT_VERSION:
        return EXTENDED_HEADER_SIZE
    return HEADER_SIZE


def encode_header(
    width: int,
    height: int,
    transparent_color: Optional[Pixel] = None,
    version: Optional[int] = None,
) -> bytes:
    """Build the limg header.

    Without an explicit ``version`` the oldest layout able to carry the
    fields is used: version 1, or version 2 when a transparent color is set.
    """
    validate_dimensions(width, height)
    if version is None:
        version = FORMAT_VERSION if transparent_color is None else TRANSPARENT_FORMAT_VERSION
    if version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersion(version)
    if transparent_color is not None and version < TRANSPARENT_FORMAT_VERSION:
        raise ValueError(f"Version {version} cannot store a transparent color")
    out = bytearray(MAGIC)
    out.append(version)
    out += width.to_bytes(DIMENSION_BYTES, "little", signed=False)
    out += height.to_bytes(DIMENSION_BYTES, "little", signed=False)
    if version >= TRANSPARENT_FORMAT_VERSION:
        if transparent_color is None:
            out += bytes(TRANSPARENT_FIELD_SIZE)
        else:
            out.append(1)
            out += transparent_color.to_bytes()
    return bytes(out)


def decode_header(data: bytes, settings: CodecSettings) -> Header:
    """Parse and validate a header from the start of ``data``.

    Fields are checked in stream order, so a short buffer whose available
    bytes already contradict the magic or version reports that problem
    instead of truncation.
    """
    if bytes(data[:VERSION_OFFSET]) != MAGIC[: len(data)]:
        raise InvalidFormat("Not a limg stream (bad magic marker)")
    if len(data) <= VERSION_OFFSET:
        raise TruncatedStream(HEADER_SIZE, len(data))
    version = data[VERSION_OFFSET]
    if not settings.accepts_version(version):
        raise UnsupportedVersion(version)
    size = header_size(version)
    if len(data) < size:
        raise TruncatedStream(size, len(data))
    offset = VERSION_OFFSET + 1
    width = int.from_bytes(data[offset : offset + DIMENSION_BYTES], "little", signed=False)
    offset += DIMENSION_BYTES
    height = int.from_bytes(data[offset : offset + DIMENSION_BYTES], "little", signed=False)
    offset += DIMENSION_BYTES
    if width == 0 or height == 0:
        raise InvalidDimensions(width, height)
    transparent_color = None
    if version >= TRANSPARENT_FORMAT_VERSION:
        flag = data[offset]
        if flag not in (0, 1):
            raise InvalidFormat(f"Invalid transparent color flag: {flag}")
        if flag:
            transparent_color = Pixel.from_bytes(bytes(data[offset + 1 : offset + TRANSPARENT_FIELD_SIZE]))
    header = Header(version, width, height, transparent_color)
    if header.data_size > settings.max_data_size:
        raise DimensionsTooLarge(width, height, settings.max_data_size)
    return header
