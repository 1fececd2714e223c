from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

from flask import Flask, g, render_template
from werkzeug.exceptions import HTTPException

from gamestore.app.config import Config
from gamestore.app.extensions import db, migrate
from gamestore.app.common.context import Scope, current_scope, with_scope
from gamestore.app.common.request_context import init_request_id, echo_request_id
from gamestore.app.cli import cli_bp
from gamestore.modules.auth.routes import bp as auth_bp
from gamestore.modules.catalog.routes import bp as catalog_bp
from gamestore.modules.profile.routes import bp as profile_bp


def _has_file_handler(logger: logging.Logger, path: str) -> bool:
    """app.logger is shared by every app the factory builds."""
    target = os.path.abspath(path)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def configure_logging(app: Flask) -> None:
    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    log_file = app.config.get("LOG_FILE")
    if log_file and not _has_file_handler(app.logger, log_file):
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        app.logger.addHandler(handler)


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    configure_logging(app)

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    app.after_request(echo_request_id)

    @app.context_processor
    def inject_nav():
        """Navbar data for every template."""
        scope = current_scope()
        return {
            "nav_user": scope.user if scope.is_user else None,
            "current_year": datetime.now(timezone.utc).year,
        }

    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    @app.get("/")
    @with_scope
    def home(scope: Scope):
        return render_template(
            "pages/home.html",
            user=scope.user if scope.is_user else "",
            pageTitle="Home",
        )

    app.register_blueprint(auth_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(profile_bp)

    # CLI (flask init-db / flask seed)
    app.register_blueprint(cli_bp)

    # Error handlers
    @app.errorhandler(400)
    def bad_request(err):
        return render_template("400.html"), 400

    @app.errorhandler(404)
    def not_found(err):
        return render_template("404.html"), 404

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        if isinstance(err, HTTPException):
            return err
        app.logger.exception("Unhandled exception")
        return render_template("500.html", request_id=getattr(g, "request_id", None)), 500

    return app