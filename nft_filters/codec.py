from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, EncodeError
from .processing.buffer import PixelBuffer

_WIDE_GRAY_MODES = ("I;16", "I;16B", "I;16L", "I;16N", "I")


def _to_8bit(img: Image.Image) -> Image.Image:
    """Scale 16-bit gray samples down to 8 bits; ``convert`` alone would clip them."""
    if img.mode not in _WIDE_GRAY_MODES:
        return img
    return img.convert("I").point(lambda v: v / 257).convert("L")


def decode(data: bytes) -> PixelBuffer:
    """Open ``data`` with whatever format Pillow sniffs and convert it to RGBA."""
    if not data:
        raise DecodeError("No image data")
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return PixelBuffer.from_image(_to_8bit(img))
    except (
        Image.DecompressionBombError,
        UnidentifiedImageError,
        OSError,
        EOFError,
        SyntaxError,
        ValueError,
    ) as exc:
        raise DecodeError(f"Failed to load image: {exc}") from exc


def encode(buffer: PixelBuffer) -> bytes:
    out = io.BytesIO()
    try:
        buffer.to_image().save(out, "PNG")
    except (OSError, ValueError) as exc:
        raise EncodeError(f"Failed to encode image: {exc}") from exc
    return out.getvalue()
