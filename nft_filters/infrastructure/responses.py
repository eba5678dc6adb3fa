from __future__ import annotations

import io

from flask import send_file


def send_png(data: bytes, *, download_name: str | None = None):
    return send_file(
        io.BytesIO(data),
        mimetype="image/png",
        as_attachment=download_name is not None,
        download_name=download_name,
    )
