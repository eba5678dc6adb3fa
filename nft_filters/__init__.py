"""Application package exports."""

from .app import APP_VERSION, create_app
from .engine import process_image
from . import infrastructure, processing

__version__ = APP_VERSION

__all__ = ["APP_VERSION", "__version__", "create_app", "process_image", "infrastructure", "processing"]
