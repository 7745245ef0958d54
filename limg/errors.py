from __future__ import annotations

from typing import Optional


class LimgError(Exception):
    """Base class for every error raised by limg."""


class InvalidDimensions(LimgError, ValueError):
    """Width or height is zero or does not fit an unsigned 32-bit field."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"Invalid image dimensions: {width}x{height}")
        self.width = width
        self.height = height


class OutOfBounds(LimgError, IndexError):
    """Pixel coordinate outside the image."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Pixel ({x}, {y}) is outside a {width}x{height} image")
        self.x = x
        self.y = y


class InvalidFormat(LimgError, ValueError):
    """Data does not start with the limg magic marker."""


class UnsupportedVersion(LimgError, ValueError):
    def __init__(self, version: int) -> None:
        super().__init__(f"Unsupported limg version: {version}")
        self.version = version


class DimensionsTooLarge(LimgError, ValueError):
    """Declared pixel data would exceed the configured size limit."""

    def __init__(self, width: int, height: int, limit: int) -> None:
        super().__init__(f"Image {width}x{height} exceeds the pixel data limit of {limit} bytes")
        self.width = width
        self.height = height
        self.limit = limit


class TruncatedStream(LimgError, ValueError):
    def __init__(self, expected: int, received: int) -> None:
        super().__init__(f"Unexpected end of stream: expected {expected} bytes, got {received}")
        self.expected = expected
        self.received = received


class TrailingData(LimgError, ValueError):
    """Bytes follow the pixel data while strict decoding is enabled."""


class StreamError(LimgError):
    """Wraps a failure of the underlying byte source or sink."""

    action = "I/O"

    def __init__(self, cause: Optional[BaseException], detail: str = "") -> None:
        message = f"{self.action} failed"
        if detail:
            message += f": {detail}"
        if cause is not None:
            message += f" ({cause})"
        super().__init__(message)
        self.cause = cause


class SinkOpenFailed(StreamError):
    action = "Opening output"


class SinkWriteFailed(StreamError):
    action = "Writing output"


class SourceOpenFailed(StreamError):
    action = "Opening input"


class SourceReadFailed(StreamError):
    action = "Reading input"
