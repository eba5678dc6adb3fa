"""Exceptions raised by the filter engine."""


class FilterError(Exception):
    """Base class for every failure the engine reports to its caller."""


class DecodeError(FilterError, ValueError):
    """The input bytes are not an image container Pillow can read."""


class EncodeError(FilterError, RuntimeError):
    """The processed buffer could not be written out as PNG."""


class InvalidParameter(FilterError, ValueError):
    """A filter argument is outside the range the filter is defined for."""
