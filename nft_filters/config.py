import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class FilterSettings:
    port: int
    log_level: str
    blur_sigma: float
    hue_rotate_degrees: int
    pixelate_factor: int
    posterize_levels: int
    source_timeout: float
    source_retries: int
    max_upload_mb: int

    @classmethod
    def from_env(cls) -> "FilterSettings":
        return cls(
            port=int(os.getenv("PORT", "5600")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            blur_sigma=float(os.getenv("BLUR_SIGMA", "5.0")),
            hue_rotate_degrees=int(os.getenv("HUE_ROTATE_DEG", "90")),
            pixelate_factor=int(os.getenv("PIXELATE_FACTOR", "10")),
            posterize_levels=int(os.getenv("POSTERIZE_LEVELS", "4")),
            source_timeout=float(os.getenv("SOURCE_TIMEOUT", "10.0")),
            source_retries=int(os.getenv("SOURCE_RETRIES", "2")),
            max_upload_mb=int(os.getenv("MAX_UPLOAD_MB", "16")),
        )

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


SETTINGS = FilterSettings.from_env()


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=SETTINGS.log_level)
    return logging.getLogger("nft-filters")
