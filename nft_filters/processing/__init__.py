"""Pixel filters and the dispatcher that selects between them."""

from .adjust import blur, huerotate
from .buffer import PixelBuffer
from .color import emboss, grayscale, invert, luma, posterize, sepia, sharpen
from .convolution import EMBOSS_KERNEL, SHARPEN_KERNEL, Kernel, apply_convolution
from .dispatch import FilterKind, apply_filter, available_filters
from .resample import pixelate, resample_nearest

__all__ = [
    "blur",
    "huerotate",
    "PixelBuffer",
    "emboss",
    "grayscale",
    "invert",
    "luma",
    "posterize",
    "sepia",
    "sharpen",
    "EMBOSS_KERNEL",
    "SHARPEN_KERNEL",
    "Kernel",
    "apply_convolution",
    "FilterKind",
    "apply_filter",
    "available_filters",
    "pixelate",
    "resample_nearest",
]
