from __future__ import annotations

import pytest

from limg import Image, px


@pytest.fixture
def sample_image() -> Image:
    """3x2 image where every pixel is distinct."""
    image = Image(3, 2)
    for x, y in image.coordinates():
        image[x, y] = px(x * 40, y * 100, x + y)
    return image
