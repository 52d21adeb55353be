"""Flask application factory."""

from flask import Flask


def create_app() -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)

    from fpl_analyzer.api.middleware import register_middleware
    register_middleware(app)

    from fpl_analyzer.api.analyze_bp import analyze_bp

    app.register_blueprint(analyze_bp)

    return app
