from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, request

from ..core.exceptions import ServerError
from .config import ServerConfig


def install_cors(app: Flask, config: ServerConfig) -> None:
    """Echo allowed origins back in ``Access-Control-Allow-Origin``."""

    if not config.cors:
        return

    allow_any = "*" in config.allow_origins
    allowed = set(config.allow_origins)

    @app.after_request
    def _cors_headers(response):
        origin = request.headers.get("Origin")
        if not origin:
            return response
        if allow_any or origin in allowed:
            response.headers["Access-Control-Allow-Origin"] = "*" if allow_any else origin
            response.headers["Access-Control-Allow-Headers"] = "Content-Type"
            response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
            if not allow_any:
                response.headers.add("Vary", "Origin")
        return response


def run_server(app: Optional[Flask], config: Optional[ServerConfig], logger: Optional[logging.Logger] = None) -> None:
    if app is None:
        raise ServerError("server is not initialized")
    if config is None:
        raise ServerError("server config is not initialized")

    log = logger or logging.getLogger(__name__)
    ssl_context = None
    if config.use_tls:
        if not config.tls_crt or not config.tls_key:
            raise ServerError("use_tls is set but tls_crt/tls_key are missing")
        ssl_context = (config.tls_crt, config.tls_key)

    log.info("starting server on %s (tls=%s)", config.addr(), config.use_tls)
    app.run(host="0.0.0.0", port=config.port, ssl_context=ssl_context, debug=bool(app.config.get("DEBUG", False)))
