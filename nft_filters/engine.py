"""Bytes in, bytes out: the single call a host makes into the engine."""

from __future__ import annotations

from .codec import decode, encode
from .config import SETTINGS, FilterSettings
from .processing.dispatch import apply_filter


def process_image(data: bytes, filter_name: str, settings: FilterSettings = SETTINGS) -> bytes:
    """Decode ``data``, run ``filter_name`` over it and return RGBA PNG bytes.

    Raises ``DecodeError`` when ``data`` is not a readable image and
    ``EncodeError`` when the result cannot be written. Unknown filter names
    re-encode the decoded image unchanged.
    """

    return encode(apply_filter(decode(data), filter_name, settings=settings))
