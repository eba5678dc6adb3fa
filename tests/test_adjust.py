import pytest
from PIL import Image

from nft_filters.processing.adjust import blur, hue_matrix, huerotate
from nft_filters.processing.buffer import PixelBuffer


def test_blur_keeps_uniform_field_and_alpha():
    buf = PixelBuffer.from_image(Image.new("RGBA", (12, 12), color=(90, 120, 150, 200)))

    out = blur(buf, 5.0)

    assert out.size == (12, 12)
    for pixel in out.pixels():
        assert all(abs(a - b) <= 1 for a, b in zip(pixel, (90, 120, 150, 200)))


def test_blur_softens_hard_edges():
    img = Image.new("RGBA", (20, 20), color=(0, 0, 0, 255))
    img.paste((255, 255, 255, 255), (10, 0, 20, 20))
    buf = PixelBuffer.from_image(img)

    out = blur(buf, 2.0)

    r, _, _, _ = out.get_pixel(9, 10)
    assert 0 < r < 255


def test_huerotate_moves_red_towards_green():
    buf = PixelBuffer.from_image(Image.new("RGBA", (4, 4), color=(255, 0, 0, 128)))

    out = huerotate(buf, 120)

    r, g, b, a = out.get_pixel(2, 2)
    assert g > r and g > b
    assert a == 128


def test_huerotate_quarter_turn_on_red():
    buf = PixelBuffer.from_image(Image.new("RGBA", (2, 2), color=(255, 0, 0, 255)))

    out = huerotate(buf, 90)

    # Green row weight is 0.213 + 0.143 at 90 degrees: 255 * 0.356 = 90.78.
    assert set(out.pixels()) == {(0, 90, 0, 255)}


@pytest.mark.parametrize("degrees", [0, 90, 180, 270])
def test_huerotate_leaves_grays_alone(degrees):
    buf = PixelBuffer.from_image(Image.new("RGBA", (3, 3), color=(128, 128, 128, 77)))

    out = huerotate(buf, degrees)

    for r, g, b, a in out.pixels():
        assert all(abs(channel - 128) <= 1 for channel in (r, g, b))
        assert a == 77


@pytest.mark.parametrize("degrees", [0, 90, 180])
def test_hue_matrix_rows_sum_to_one(degrees):
    for row in hue_matrix(degrees):
        assert sum(row) == pytest.approx(1.0)
