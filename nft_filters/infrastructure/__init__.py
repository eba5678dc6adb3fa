"""Infrastructure helpers for fetching sources and shaping responses."""

from .network import SourceFetchError, SourceFetcher, validate_source_url
from .responses import send_png

__all__ = [
    "SourceFetchError",
    "SourceFetcher",
    "validate_source_url",
    "send_png",
]
