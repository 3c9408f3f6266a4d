"""HTTP application: routes, servers and the command entry point."""

import argparse
import logging
import threading
from pathlib import Path
from typing import Any, List, Optional, Sequence
from wsgiref.simple_server import WSGIServer, make_server

from flask import Flask, jsonify, request

from .config import AppConfig, load_config
from .database import create_db
from .repository import UserRepository
from .results import Result, error_default, error_message_data, ok_data, ok_default
from .service import UserDbService
from .validation import CreateUpdateCt, translate

log = logging.getLogger(__name__)

PLAIN_SERVER_PORT = 18081


def _payload() -> Any:
    if request.is_json:
        payload = request.get_json(silent=True)
        if payload is None:
            raise ValueError("malformed JSON body")
        return payload
    return request.form.to_dict()


def _bind() -> CreateUpdateCt:
    return CreateUpdateCt.from_payload(_payload())


def _respond(result: Result, status: int):
    return jsonify(result.to_dict()), status


def _rejection(exc: ValueError):
    messages = translate(exc)
    if messages:
        return _respond(error_message_data(messages), 500)
    return _respond(error_default(), 500)


def create_app(config: AppConfig, service: UserDbService) -> Flask:
    """Build the main application with its routes and the /assets static folder."""
    app = Flask(
        __name__,
        static_folder=str(Path("assets").resolve()),
        static_url_path="/assets",
    )
    app.json.ensure_ascii = False

    @app.get("/")
    def index():
        data = {"tpl": "Index", "port": config.server.port, "Domain": config.server.domain}
        return _respond(ok_data(data), 200)

    @app.get("/port")
    def port():
        data = {"port": config.server.port, "Domain": config.server.domain}
        return _respond(ok_data(data), 200)

    @app.post("/admin/user/create")
    def user_create():
        try:
            ct = _bind()
        except ValueError as exc:
            return _rejection(exc)
        log.info("ct: %s", ct)
        return _respond(ok_default(), 200)

    @app.get("/db-config")
    def db_config():
        data = {"URL": config.database.url, "Enabled": config.database.enabled}
        return _respond(ok_data(data), 200)

    @app.post("/admin/user-db/create")
    def user_db_create():
        try:
            ct = _bind()
        except ValueError as exc:
            return _rejection(exc)
        return _respond(service.save(ct), 200)

    return app


def create_plain_app() -> Flask:
    """Build the secondary application, which serves no routes."""
    return Flask("userdemo.plain", static_folder=None)


def _serve(servers: List[WSGIServer]) -> None:
    threads = [
        threading.Thread(target=server.serve_forever, daemon=True) for server in servers
    ]
    for thread in threads:
        thread.start()
    try:
        while any(thread.is_alive() for thread in threads):
            for thread in threads:
                thread.join(timeout=0.5)
    except KeyboardInterrupt:
        log.info("shutting down")
    finally:
        for server in servers:
            server.shutdown()
            server.server_close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load settings, open the database and serve until interrupted."""
    parser = argparse.ArgumentParser(prog="userdemo", description="User demo web service.")
    parser.add_argument("--config", default="./config", help="settings directory")
    parser.add_argument(
        "--more-servers",
        action="store_true",
        help=f"also start the plain server on port {PLAIN_SERVER_PORT}",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    config = load_config(args.config)
    engine = create_db(config.database)
    service = UserDbService(UserRepository(engine))

    servers = [make_server("", config.server.port, create_app(config, service))]
    if args.more_servers:
        servers.append(make_server("", PLAIN_SERVER_PORT, create_plain_app()))
    for server in servers:
        log.info("starting successfully... Port: :%s", server.server_port)
    log.info("starting successfully. Port: %s", config.server.port)
    _serve(servers)
    return 0