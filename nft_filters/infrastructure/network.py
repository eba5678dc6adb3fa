from __future__ import annotations

import logging
import time
from typing import Callable
from urllib.parse import urlsplit

import requests

from ..config import SETTINGS, FilterSettings


SessionFactory = Callable[[], requests.Session]

LOGGER = logging.getLogger("nft-filters.network")


class SourceFetchError(RuntimeError):
    """Every attempt to download the source image failed."""


def validate_source_url(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Invalid source_url: {url}")
    return url


class SourceFetcher:
    def __init__(
        self,
        session_factory: SessionFactory | None = None,
        settings: FilterSettings = SETTINGS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._session_factory = session_factory or requests.Session
        self._settings = settings
        self._sleep = sleep
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        session = self._session_factory()
        session.headers.update({"User-Agent": "nft-filters/1.0"})
        return session

    def fetch_bytes(self, source_url: str) -> bytes:
        target_url = validate_source_url(source_url)
        last_exception: Exception | None = None
        for attempt in range(1, self._settings.source_retries + 2):
            try:
                response = self._session.get(target_url, timeout=self._settings.source_timeout)
                response.raise_for_status()
                return response.content
            except requests.RequestException as exc:
                LOGGER.warning("Fetch attempt %d for %s failed: %s", attempt, target_url, exc)
                last_exception = exc
                self._sleep(0.4 * attempt)
        raise SourceFetchError(str(last_exception))
