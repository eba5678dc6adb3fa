import pytest
from PIL import Image

from nft_filters.errors import InvalidParameter
from nft_filters.processing.buffer import PixelBuffer


def test_blank_buffer_is_transparent_black():
    buf = PixelBuffer.blank(3, 2)

    assert buf.size == (3, 2)
    assert set(buf.pixels()) == {(0, 0, 0, 0)}


@pytest.mark.parametrize("width, height", [(0, 4), (4, 0), (-1, 3)])
def test_blank_rejects_empty_dimensions(width, height):
    with pytest.raises(InvalidParameter):
        PixelBuffer.blank(width, height)


def test_from_image_converts_to_rgba():
    gray = Image.new("L", (2, 2), color=77)

    buf = PixelBuffer.from_image(gray)

    assert buf.get_pixel(1, 1) == (77, 77, 77, 255)


def test_from_image_copies_rgba_source():
    src = Image.new("RGBA", (2, 2), color=(1, 2, 3, 4))
    buf = PixelBuffer.from_image(src)

    src.putpixel((0, 0), (9, 9, 9, 9))

    assert buf.get_pixel(0, 0) == (1, 2, 3, 4)


def test_put_and_get_pixel():
    buf = PixelBuffer.blank(4, 3)

    buf.put_pixel(3, 2, (10, 20, 30, 40))

    assert buf.get_pixel(3, 2) == (10, 20, 30, 40)
    assert buf.get_pixel(2, 2) == (0, 0, 0, 0)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_range_access_raises(x, y):
    buf = PixelBuffer.blank(4, 3)

    with pytest.raises(IndexError):
        buf.get_pixel(x, y)
    with pytest.raises(IndexError):
        buf.put_pixel(x, y, (0, 0, 0, 0))


def test_pixels_are_row_major():
    buf = PixelBuffer.blank(2, 2)
    buf.put_pixel(1, 0, (1, 1, 1, 1))
    buf.put_pixel(0, 1, (2, 2, 2, 2))

    assert list(buf.pixels()) == [
        (0, 0, 0, 0),
        (1, 1, 1, 1),
        (2, 2, 2, 2),
        (0, 0, 0, 0),
    ]


def test_copy_and_to_image_do_not_alias():
    buf = PixelBuffer.blank(2, 2)
    clone = buf.copy()
    img = buf.to_image()

    clone.put_pixel(0, 0, (5, 5, 5, 5))
    img.putpixel((1, 1), (6, 6, 6, 6))

    assert buf.get_pixel(0, 0) == (0, 0, 0, 0)
    assert buf.get_pixel(1, 1) == (0, 0, 0, 0)
    assert clone != buf


def test_equality_compares_size_and_pixels():
    assert PixelBuffer.blank(2, 3) == PixelBuffer.blank(2, 3)
    assert PixelBuffer.blank(2, 3) != PixelBuffer.blank(3, 2)


def test_constructor_rejects_non_rgba_image():
    with pytest.raises(InvalidParameter):
        PixelBuffer(Image.new("RGB", (2, 2)))
