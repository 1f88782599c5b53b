from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .accounts.controller import register as register_accounts
from .config import get_settings_module
from .container import Container, build_container
from .core.logging import configure_logging, new_logger
from .database.bootstrap import apply_schema, list_tables
from .server.config import ServerConfig, load_server_config
from .server.server import install_cors, run_server

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def create_app(
    container: Optional[Container] = None,
    server_config: Optional[ServerConfig] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")))
    log = new_logger("main")
    log.debug("settings=%s", settings_module)

    if bool(getattr(settings, "AUTO_INIT_DB", False)) and str(getattr(settings, "ACCOUNT_STORE", "")) == "mysql":
        db_config = getattr(settings, "DB_CONFIG")
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        log.info("schema ready (tables=%d)", len(list_tables(db_config)))

    if server_config is None:
        server_config = load_server_config(getattr(settings, "SERVER_CONFIG_PATH", None))
    app.config["SERVER"] = server_config

    if container is None:
        container = build_container(settings=settings)

    @app.route("/healthz", methods=["GET"], endpoint="healthz")
    def healthz():
        return jsonify(status="ok")

    register_accounts(app, container)
    install_cors(app, server_config)

    return app


def main() -> None:
    app = create_app()
    run_server(app, app.config["SERVER"], logger=new_logger("server"))


if __name__ == "__main__":
    main()
