from __future__ import annotations

from PIL import Image as PILImage

from .codec import decode_pixels, encode_pixels
from .image import Image
from .pixel import Pixel


def to_pil(image: Image) -> PILImage.Image:
    """Return an RGB Pillow image holding the same pixels.

    A transparent color is stored in ``info["transparency"]``, which Pillow
    writes out for RGB PNG files.
    """
    img = PILImage.frombytes("RGB", image.dimensions(), encode_pixels(image.pixels))
    if image.transparent_color is not None:
        img.info["transparency"] = image.transparent_color.as_tuple()
    return img


def from_pil(img: PILImage.Image) -> Image:
    """Copy a Pillow image into an :class:`Image`, converting to RGB if needed."""
    transparent_color = None
    if img.mode == "RGB":
        transparency = img.info.get("transparency")
        if isinstance(transparency, tuple) and len(transparency) == 3:
            transparent_color = Pixel(*transparency)
    else:
        img = img.convert("RGB")
    width, height = img.size
    pixels = decode_pixels(img.tobytes(), width * height)
    return Image.from_pixels(width, height, pixels, transparent_color)
