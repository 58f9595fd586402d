from __future__ import annotations
import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from core.errors import BlogWriterError

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    app = Flask(__name__, static_folder="static", template_folder="templates")
    app.config.update(
        TEMPLATES_AUTO_RELOAD=True,
    )

    # Register blueprints
    from .routes.home_routes import bp as home_bp
    from .routes.generate_routes import bp as generate_bp

    app.register_blueprint(home_bp)
    app.register_blueprint(generate_bp)

    @app.before_request
    def _log_request():
        logger.info("[request] %s %s", request.method, request.path)

    @app.errorhandler(BlogWriterError)
    def _handle_blog_writer_error(e: BlogWriterError):
        return jsonify({"error": str(e)}), e.status_code

    @app.errorhandler(Exception)
    def _handle_exception(e):
        # HTTP errors (404, 405, ...) keep their own responses
        if isinstance(e, HTTPException):
            return e
        logger.exception("[app] unhandled error on %s", request.path)
        if request.path.startswith("/api/"):
            return jsonify({"error": str(e) or "Failed to generate blog post"}), 500
        return ("Internal error", 500, {"Content-Type": "text/plain; charset=utf-8"})

    return app

