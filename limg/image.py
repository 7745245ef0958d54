from __future__ import annotations

import os
from typing import BinaryIO, Iterable, List, Optional, Tuple, Union

from .coordinates import Coordinates, is_index
from .errors import InvalidDimensions, OutOfBounds
from .pixel import BLACK, Pixel, require_pixel
from .settings import MAX_DIMENSION, CodecSettings

PathLike = Union[str, "os.PathLike[str]"]


class Image:
    """Row-major RGB pixel buffer.

    ``(0, 0)`` is the top-left corner and position ``(x, y)`` is stored at
    linear index ``y * width + x``. Dimensions are fixed at construction.
    """

    __slots__ = ("_width", "_height", "_pixels", "_transparent_color")

    def __init__(
        self,
        width: int,
        height: int,
        fill: Pixel = BLACK,
        transparent_color: Optional[Pixel] = None,
    ) -> None:
        validate_dimensions(width, height)
        require_pixel(fill)
        self._width = width
        self._height = height
        self._pixels: List[Pixel] = [fill] * (width * height)
        self.transparent_color = transparent_color

    @classmethod
    def from_pixels(
        cls,
        width: int,
        height: int,
        pixels: List[Pixel],
        transparent_color: Optional[Pixel] = None,
    ) -> "Image":
        """Wrap an existing row-major pixel list without copying it."""
        validate_dimensions(width, height)
        if len(pixels) != width * height:
            raise ValueError(f"Expected {width * height} pixels for {width}x{height}, got {len(pixels)}")
        image = cls.__new__(cls)
        image._width = width
        image._height = height
        image._pixels = pixels
        image.transparent_color = transparent_color
        return image

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def dimensions(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def transparent_color(self) -> Optional[Pixel]:
        """Color that viewers should treat as transparent, or ``None``."""
        return self._transparent_color

    @transparent_color.setter
    def transparent_color(self, value: Optional[Pixel]) -> None:
        self._transparent_color = None if value is None else require_pixel(value)

    @property
    def pixels(self) -> Tuple[Pixel, ...]:
        """Snapshot of every pixel in row-major order.

        Assigning an iterable of pixels replaces the whole buffer; its length
        must equal ``width * height``.
        """
        return tuple(self._pixels)

    @pixels.setter
    def pixels(self, values: Iterable[Pixel]) -> None:
        pixels = [require_pixel(value) for value in values]
        if len(pixels) != len(self._pixels):
            raise ValueError(f"Expected {len(self._pixels)} pixels, got {len(pixels)}")
        self._pixels = pixels

    def coordinates(self) -> Coordinates:
        return Coordinates(self._width, self._height)

    def get(self, x: int, y: int) -> Pixel:
        return self._pixels[self._index(x, y)]

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        self._pixels[self._index(x, y)] = require_pixel(pixel)

    def fill(self, pixel: Pixel) -> None:
        """Overwrite every pixel with ``pixel``."""
        self._pixels = [require_pixel(pixel)] * (self._width * self._height)

    def _index(self, x: int, y: int) -> int:
        if not (is_index(x) and is_index(y)):
            raise TypeError(f"Pixel coordinates must be ints, got ({x!r}, {y!r})")
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise OutOfBounds(x, y, self._width, self._height)
        return y * self._width + x

    def __getitem__(self, position: Tuple[int, int]) -> Pixel:
        x, y = position
        return self.get(x, y)

    def __setitem__(self, position: Tuple[int, int], pixel: Pixel) -> None:
        x, y = position
        self.set(x, y, pixel)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.dimensions() == other.dimensions()
            and self._transparent_color == other._transparent_color
            and self._pixels == other._pixels
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._transparent_color is None:
            return f"Image(width={self._width}, height={self._height})"
        return f"Image(width={self._width}, height={self._height}, transparent_color={self._transparent_color})"

    # Codec shortcuts. The codec imports this module, so imports stay local.

    @classmethod
    def from_bytes(cls, data: bytes, settings: Optional[CodecSettings] = None) -> "Image":
        from .codec import decode

        return decode(data, settings)

    def to_bytes(self) -> bytes:
        from .codec import encode

        return encode(self)

    @classmethod
    def read_from(cls, source: BinaryIO, settings: Optional[CodecSettings] = None) -> "Image":
        from .codec import read_image

        return read_image(source, settings)

    def write_to(self, sink: BinaryIO) -> int:
        from .codec import write_image

        return write_image(self, sink)

    @classmethod
    def open(cls, path: PathLike, settings: Optional[CodecSettings] = None) -> "Image":
        from .files import load

        return load(path, settings)

    def save(self, path: PathLike) -> None:
        from .files import save

        save(self, path)


def validate_dimensions(width: int, height: int) -> None:
    """Reject dimensions that cannot be stored in an unsigned 32-bit field."""
    if not (is_index(width) and is_index(height)):
        raise InvalidDimensions(width, height)
    if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
        raise InvalidDimensions(width, height)
