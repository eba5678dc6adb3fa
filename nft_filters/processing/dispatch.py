from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional

from .adjust import blur, huerotate
from .buffer import PixelBuffer
from .color import emboss, grayscale, invert, posterize, sepia, sharpen
from .resample import pixelate
from ..config import SETTINGS, FilterSettings


class FilterKind(str, Enum):
    GRAYSCALE = "grayscale"
    BLUR = "blur"
    HUEROTATE = "huerotate"
    INVERT = "invert"
    SEPIA = "sepia"
    PIXELATE = "pixelate"
    EMBOSS = "emboss"
    SHARPEN = "sharpen"
    POSTERIZE = "posterize"

    @classmethod
    def parse(cls, name: str) -> Optional["FilterKind"]:
        """Return the filter for ``name``, or ``None`` when it is not one of ours.

        Matching is exact and case-sensitive.
        """
        try:
            return cls(name)
        except ValueError:
            return None


FilterFn = Callable[[PixelBuffer, FilterSettings], PixelBuffer]

_FILTERS: Dict[FilterKind, FilterFn] = {
    FilterKind.GRAYSCALE: lambda buf, _: grayscale(buf),
    FilterKind.BLUR: lambda buf, s: blur(buf, s.blur_sigma),
    FilterKind.HUEROTATE: lambda buf, s: huerotate(buf, s.hue_rotate_degrees),
    FilterKind.INVERT: lambda buf, _: invert(buf),
    FilterKind.SEPIA: lambda buf, _: sepia(buf),
    FilterKind.PIXELATE: lambda buf, s: pixelate(buf, s.pixelate_factor),
    FilterKind.EMBOSS: lambda buf, _: emboss(buf),
    FilterKind.SHARPEN: lambda buf, _: sharpen(buf),
    FilterKind.POSTERIZE: lambda buf, s: posterize(buf, s.posterize_levels),
}


def available_filters() -> List[str]:
    return [kind.value for kind in FilterKind]


def apply_filter(
    buffer: PixelBuffer, name: str, settings: FilterSettings = SETTINGS
) -> PixelBuffer:
    """Run the filter called ``name`` over ``buffer``.

    An unrecognised name is not an error: the caller's buffer is returned
    untouched.
    """

    kind = FilterKind.parse(name)
    if kind is None:
        return buffer
    return _FILTERS[kind](buffer, settings)
