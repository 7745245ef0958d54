import pytest

from limg import BLACK, RED, Coordinates, Image, InvalidDimensions, OutOfBounds, px


@pytest.mark.parametrize("width,height", [(0, 0), (0, 1), (1, 0), (-1, 4), (4, -1), (2**32, 1), (1, 2**32)])
def test_create_rejects_invalid_dimensions(width, height):
    with pytest.raises(InvalidDimensions):
        Image(width, height)


@pytest.mark.parametrize("width,height", [(1, 1), (1, 5), (5, 1), (7, 3)])
def test_create_defaults_to_black(width, height):
    image = Image(width, height)
    assert image.dimensions() == (width, height)
    assert len(image.pixels) == width * height
    assert all(pixel == BLACK for pixel in image.pixels)


def test_invalid_dimensions_is_a_value_error():
    with pytest.raises(ValueError):
        Image(0, 3)


@pytest.mark.parametrize("x,y", [(-1, 0), (3, 0), (0, -1), (0, 2), (3, 2)])
def test_access_outside_bounds_fails(sample_image, x, y):
    with pytest.raises(OutOfBounds):
        sample_image.get(x, y)
    with pytest.raises(OutOfBounds):
        sample_image.set(x, y, RED)
    with pytest.raises(IndexError):
        sample_image[x, y]


def test_access_inside_bounds_succeeds(sample_image):
    for x, y in sample_image.coordinates():
        sample_image.set(x, y, px(x, y, 7))
    for x, y in sample_image.coordinates():
        assert sample_image.get(x, y) == px(x, y, 7)
    assert sample_image.dimensions() == (3, 2)


def test_storage_is_row_major():
    image = Image(3, 2)
    image[1, 1] = RED
    assert image.pixels.index(RED) == 1 * 3 + 1


def test_set_requires_pixel():
    image = Image(1, 1)
    with pytest.raises(TypeError):
        image.set(0, 0, (1, 2, 3))


def test_fill_and_equality():
    a = Image(2, 2)
    b = Image(2, 2, fill=RED)
    assert a != b
    a.fill(RED)
    assert a == b
    assert Image(2, 1) != Image(1, 2)


def test_from_pixels_checks_length():
    with pytest.raises(ValueError):
        Image.from_pixels(2, 2, [BLACK] * 3)


def test_coordinates_cover_grid_in_row_major_order():
    coords = Image(3, 2).coordinates()
    assert list(coords) == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
    assert len(coords) == 6


def test_coordinates_are_restartable_and_complete():
    coords = Coordinates(4, 5)
    first = list(coords)
    assert first == list(coords)
    assert len(set(first)) == 20
    assert all(pair in coords for pair in first)
    assert [coords.index(x, y) for x, y in first] == list(range(20))
    assert (4, 0) not in coords
    assert (0, 5) not in coords
    assert "0,0" not in coords


@pytest.mark.parametrize("width,height", [(2.0, 1), (1, 2.0), ("3", 1), (True, 1)])
def test_create_rejects_non_int_dimensions(width, height):
    with pytest.raises(InvalidDimensions):
        Image(width, height)


def test_fill_requires_pixel():
    with pytest.raises(TypeError):
        Image(2, 2, fill=(1, 2, 3))
    image = Image(2, 2)
    with pytest.raises(TypeError):
        image.fill((1, 2, 3))
    assert image == Image(2, 2)


def test_access_requires_int_coordinates(sample_image):
    with pytest.raises(TypeError):
        sample_image.get(0.5, 0)
    with pytest.raises(TypeError):
        sample_image[0, 1.0] = RED


def test_replace_all_pixels():
    image = Image(2, 1)
    image.pixels = [RED, px(1, 2, 3)]
    assert image[1, 0] == px(1, 2, 3)
    with pytest.raises(ValueError):
        image.pixels = [RED]
    with pytest.raises(TypeError):
        image.pixels = [RED, (1, 2, 3)]
    assert image.pixels == (RED, px(1, 2, 3))


def test_transparent_color():
    image = Image(2, 2, transparent_color=RED)
    assert image.transparent_color == RED
    assert image != Image(2, 2)
    image.transparent_color = None
    assert image == Image(2, 2)
    with pytest.raises(TypeError):
        image.transparent_color = (255, 0, 0)


def test_coordinates_require_int_components():
    coords = Coordinates(2, 2)
    assert (0.5, 0) not in coords
    assert (0, 1.0) not in coords
    assert (True, 0) not in coords
