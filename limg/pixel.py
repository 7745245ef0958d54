from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

PIXEL_BYTES = 3


@dataclass(frozen=True)
class Pixel:
    """One RGB sample with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Channel {name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= 0xFF:
                raise ValueError(f"Channel {name} must be in 0..255, got {value}")

    @classmethod
    def from_bytes(cls, data: bytes) -> "Pixel":
        """Build a pixel from a 3-byte RGB triplet."""
        if len(data) != PIXEL_BYTES:
            raise ValueError(f"Pixel needs {PIXEL_BYTES} bytes, got {len(data)}")
        return cls(data[0], data[1], data[2])

    def to_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b))

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"


def px(r: int, g: int, b: int) -> Pixel:
    """Shorthand constructor: ``px(255, 0, 0)``."""
    return Pixel(r, g, b)


def require_pixel(value: object) -> Pixel:
    if not isinstance(value, Pixel):
        raise TypeError(f"Expected Pixel, got {type(value).__name__}")
    return value


BLACK = px(0x00, 0x00, 0x00)
RED = px(0xFF, 0x00, 0x00)
GREEN = px(0x00, 0xFF, 0x00)
BLUE = px(0x00, 0x00, 0xFF)
MAGENTA = px(0xFF, 0x00, 0xFF)
CYAN = px(0x00, 0xFF, 0xFF)
YELLOW = px(0xFF, 0xFF, 0x00)
GRAY = px(0x7B, 0x7D, 0x7B)
WHITE = px(0xFF, 0xFF, 0xFF)
