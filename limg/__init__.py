from .codec import decode, encode, read_image, write_image
from .coordinates import Coordinates
from .errors import (
    DimensionsTooLarge,
    InvalidDimensions,
    InvalidFormat,
    LimgError,
    OutOfBounds,
    SinkOpenFailed,
    SinkWriteFailed,
    SourceOpenFailed,
    SourceReadFailed,
    StreamError,
    TrailingData,
    TruncatedStream,
    UnsupportedVersion,
)
from .files import load, save
from .image import Image
from .pixel import BLACK, BLUE, CYAN, GRAY, GREEN, MAGENTA, RED, WHITE, YELLOW, Pixel, px
from .settings import FORMAT_VERSION, MAGIC, TRANSPARENT_FORMAT_VERSION, CodecSettings

__version__ = "0.1.0"

__all__ = [
    "BLACK",
    "BLUE",
    "CodecSettings",
    "Coordinates",
    "CYAN",
    "decode",
    "DimensionsTooLarge",
    "encode",
    "FORMAT_VERSION",
    "GRAY",
    "GREEN",
    "Image",
    "InvalidDimensions",
    "InvalidFormat",
    "LimgError",
    "load",
    "MAGIC",
    "MAGENTA",
    "OutOfBounds",
    "Pixel",
    "px",
    "read_image",
    "RED",
    "save",
    "SinkOpenFailed",
    "SinkWriteFailed",
    "SourceOpenFailed",
    "SourceReadFailed",
    "StreamError",
    "TRANSPARENT_FORMAT_VERSION",
    "TrailingData",
    "TruncatedStream",
    "UnsupportedVersion",
    "WHITE",
    "write_image",
    "YELLOW",
]
