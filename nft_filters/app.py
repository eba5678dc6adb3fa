from __future__ import annotations

from dataclasses import asdict
from html import escape
from string import Template
from typing import Mapping, Optional

from flask import Flask, jsonify, request

from .config import SETTINGS, FilterSettings, configure_logging
from .engine import process_image
from .errors import DecodeError, EncodeError, InvalidParameter
from .infrastructure.network import SourceFetchError, SourceFetcher
from .infrastructure.responses import send_png
from .processing.dispatch import available_filters

APP_VERSION = "1.0.0"

DOWNLOAD_NAME = "rusty_nft.png"

_INDEX_TEMPLATE = Template(
    """<!doctype html>
<html>
<head><meta charset="utf-8"><title>Rusty NFTs $APP_VERSION</title></head>
<body>
  <h2>Welcome to Rusty NFTs</h2>
  <h4>Make NFTs from your favourite images!</h4>
  <form id="filter-form" method="post" enctype="multipart/form-data">
    <input type="file" name="image" accept="image/*" required>
    <label for="filter-select">Filter:</label>
    <select id="filter-select" onchange="this.form.action='/filter/' + this.value">
      $filter_options
    </select>
    <label><input type="checkbox" name="download" value="1"> Download</label>
    <button type="submit">Apply</button>
  </form>
  <script>
    var form = document.getElementById("filter-form");
    form.action = "/filter/" + document.getElementById("filter-select").value;
  </script>
</body>
</html>
"""
)

_FILTER_LABELS = {
    "grayscale": "Grayscale",
    "blur": "Blur",
    "huerotate": "Hue Rotate",
    "invert": "Invert Colors",
    "sepia": "Sepia",
    "pixelate": "Pixelate",
    "emboss": "Emboss",
    "sharpen": "Sharpen",
    "posterize": "Posterize",
}


def _wants_download(args: Mapping[str, str]) -> bool:
    return (args.get("download") or "").lower() in ("1", "true", "yes")


def read_upload(req) -> Optional[bytes]:
    """Return the uploaded image bytes from a multipart ``image`` field or the raw body."""
    upload = req.files.get("image")
    if upload is not None:
        data = upload.read()
        return data or None
    data = req.get_data(cache=False)
    return data or None


def create_app(
    settings: FilterSettings = SETTINGS,
    fetcher: SourceFetcher | None = None,
) -> Flask:
    logger = configure_logging()
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_bytes
    source_fetcher = fetcher or SourceFetcher(settings=settings)

    def _render(data: bytes, name: str):
        try:
            png = process_image(data, name, settings=settings)
        except (DecodeError, InvalidParameter) as exc:
            logger.info("Rejected %r request: %s", name, exc)
            return (str(exc), 400)
        except EncodeError as exc:
            logger.error("Encoding %r result failed: %s", name, exc)
            return (str(exc), 500)
        download_name = DOWNLOAD_NAME if _wants_download(request.values) else None
        return send_png(png, download_name=download_name)

    @app.route("/filter/<name>", methods=["POST"])
    def filter_upload(name: str):
        data = read_upload(request)
        if data is None:
            return ("No image supplied", 400)
        return _render(data, name)

    @app.route("/filter/<name>", methods=["GET"])
    def filter_source(name: str):
        source_url = request.args.get("source_url")
        if not source_url:
            return ("source_url is required", 400)
        try:
            data = source_fetcher.fetch_bytes(source_url)
        except ValueError as exc:
            return (str(exc), 400)
        except SourceFetchError as exc:
            logger.error("Source fetch failed for %s: %s", source_url, exc)
            return (f"Source Error: {exc}", 502)
        return _render(data, name)

    @app.route("/filters")
    def filters():
        return jsonify(filters=available_filters())

    @app.route("/health")
    def health():
        return jsonify(ok=True, version=APP_VERSION, settings=asdict(settings))

    @app.route("/")
    def index():
        filter_options = "\n      ".join(
            f'<option value="{escape(name)}">{escape(_FILTER_LABELS.get(name, name))}</option>'
            for name in available_filters()
        )
        return _INDEX_TEMPLATE.substitute(
            APP_VERSION=escape(APP_VERSION),
            filter_options=filter_options,
        )

    return app


# Module-level application for WSGI servers (``nft_filters.app:app``).
app = create_app()
application = app
