from __future__ import annotations

from .buffer import PixelBuffer
from .convolution import EMBOSS_KERNEL, SHARPEN_KERNEL, apply_convolution
from ..errors import InvalidParameter


def _map_pixels(buffer: PixelBuffer, transform) -> PixelBuffer:
    out = buffer.copy()
    pixels = out._access()
    width, height = out.size
    for y in range(height):
        for x in range(width):
            pixels[x, y] = transform(pixels[x, y])
    return out


def luma(r: int, g: int, b: int) -> int:
    # Rec. 709 weights in fixed point.
    return (2126 * r + 7152 * g + 722 * b) // 10000


def grayscale(buffer: PixelBuffer) -> PixelBuffer:
    """Replace each pixel with its luma. Alpha is forced to fully opaque."""

    def _gray(pixel):
        value = luma(pixel[0], pixel[1], pixel[2])
        return (value, value, value, 255)

    return _map_pixels(buffer, _gray)


def invert(buffer: PixelBuffer) -> PixelBuffer:
    return _map_pixels(buffer, lambda p: (255 - p[0], 255 - p[1], 255 - p[2], p[3]))


def sepia(buffer: PixelBuffer) -> PixelBuffer:
    def _tone(pixel):
        r, g, b, a = pixel
        return (
            int(min(255.0, 0.393 * r + 0.769 * g + 0.189 * b)),
            int(min(255.0, 0.349 * r + 0.686 * g + 0.168 * b)),
            int(min(255.0, 0.272 * r + 0.534 * g + 0.131 * b)),
            a,
        )

    return _map_pixels(buffer, _tone)


def posterize(buffer: PixelBuffer, levels: int = 4) -> PixelBuffer:
    """Quantize the colour channels down to multiples of ``255 // (levels - 1)``.

    ``levels`` must be between 2 and 256: one level would divide by zero and
    more than 256 would make the step zero.
    """

    if not 2 <= levels <= 256:
        raise InvalidParameter(f"posterize levels must be in 2..256, got {levels}")
    step = 255 // (levels - 1)
    return _map_pixels(
        buffer,
        lambda p: ((p[0] // step) * step, (p[1] // step) * step, (p[2] // step) * step, p[3]),
    )


def sharpen(buffer: PixelBuffer) -> PixelBuffer:
    return apply_convolution(buffer, SHARPEN_KERNEL)


def emboss(buffer: PixelBuffer) -> PixelBuffer:
    return apply_convolution(buffer, EMBOSS_KERNEL)
