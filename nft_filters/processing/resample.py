from __future__ import annotations

from .buffer import PixelBuffer
from ..errors import InvalidParameter


def resample_nearest(buffer: PixelBuffer, width: int, height: int) -> PixelBuffer:
    """Resize ``buffer`` to ``width`` x ``height`` by picking the nearest pixel.

    Destination ``(dx, dy)`` reads source ``(dx * src_w // width,
    dy * src_h // height)``. No blending happens, so every output value is a
    copy of some input pixel.
    """

    src_w, src_h = buffer.size
    out = PixelBuffer.blank(width, height)
    src = buffer._access()
    dst = out._access()
    columns = [dx * src_w // width for dx in range(width)]
    for dy in range(height):
        sy = dy * src_h // height
        for dx, sx in enumerate(columns):
            dst[dx, dy] = src[sx, sy]
    return out


def pixelate(buffer: PixelBuffer, factor: int = 10) -> PixelBuffer:
    if factor < 1:
        raise InvalidParameter(f"pixelate factor must be positive, got {factor}")
    width, height = buffer.size
    # Images smaller than the factor still get a one pixel strip.
    small = resample_nearest(buffer, max(1, width // factor), max(1, height // factor))
    return resample_nearest(small, width, height)
