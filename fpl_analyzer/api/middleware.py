"""Flask middleware — CORS and no-cache headers, JSON error handlers."""

from flask import Flask, jsonify, request

from fpl_analyzer.config import server_cfg


def register_middleware(app: Flask) -> None:
    """Register middleware on the Flask app."""

    @app.after_request
    def add_cors_headers(response):
        for name, value in server_cfg.cors_headers:
            response.headers[name] = value
        if request.path.startswith("/api/"):
            response.headers["Cache-Control"] = "no-store"
        return response

    @app.errorhandler(404)
    def not_found(_):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(_):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(_):
        return jsonify({"error": "Internal server error"}), 500
