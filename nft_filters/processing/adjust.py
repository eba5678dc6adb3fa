from __future__ import annotations

import math

from PIL import ImageFilter

from .buffer import PixelBuffer


def blur(buffer: PixelBuffer, sigma: float = 5.0) -> PixelBuffer:
    img = buffer.to_image()
    return PixelBuffer(img.filter(ImageFilter.GaussianBlur(radius=sigma)))


def hue_matrix(degrees: float):
    """Return the 3x3 luminance-preserving hue rotation matrix, row-major."""
    cosv = math.cos(math.radians(degrees))
    sinv = math.sin(math.radians(degrees))
    return (
        (
            0.213 + cosv * 0.787 - sinv * 0.213,
            0.715 - cosv * 0.715 - sinv * 0.715,
            0.072 - cosv * 0.072 + sinv * 0.928,
        ),
        (
            0.213 - cosv * 0.213 + sinv * 0.143,
            0.715 + cosv * 0.285 + sinv * 0.140,
            0.072 - cosv * 0.072 - sinv * 0.283,
        ),
        (
            0.213 - cosv * 0.213 - sinv * 0.787,
            0.715 - cosv * 0.715 + sinv * 0.715,
            0.072 + cosv * 0.928 + sinv * 0.072,
        ),
    )


def _clamp(value: float) -> int:
    return int(min(255.0, max(0.0, value)))


def huerotate(buffer: PixelBuffer, degrees: int = 90) -> PixelBuffer:
    """Rotate the hue of every pixel by ``degrees``, keeping alpha as is.

    Each row of the matrix sums to one, so grays come through unchanged.
    """
    (m0, m1, m2), (m3, m4, m5), (m6, m7, m8) = hue_matrix(degrees)
    out = buffer.copy()
    pixels = out._access()
    width, height = out.size
    for y in range(height):
        for x in range(width):
            r, g, b, a = pixels[x, y]
            pixels[x, y] = (
                _clamp(m0 * r + m1 * g + m2 * b),
                _clamp(m3 * r + m4 * g + m5 * b),
                _clamp(m6 * r + m7 * g + m8 * b),
                a,
            )
    return out
