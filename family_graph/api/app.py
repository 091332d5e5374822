"""Quart application for the Family Graph API."""

from quart import Quart, jsonify
from quart_cors import cors

from family_graph import __version__
from family_graph.api.config import get_config
from family_graph.api.tree import tree_bp


def create_app(config_name: str = "development") -> Quart:
    """Create and configure the Quart application.

    Args:
        config_name: Configuration environment name

    Returns:
        Configured Quart app
    """
    app = Quart(__name__)

    # Load configuration
    config = get_config(config_name)
    app.config.from_object(config)

    # Enable CORS for frontend (only needed in development)
    if config.DEBUG:
        app = cors(
            app,
            allow_origin=config.CORS_ORIGINS,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        )

    app.register_blueprint(tree_bp)
    register_routes(app)

    return app


def register_routes(app: Quart) -> None:
    """Register API routes.

    Args:
        app: Quart application
    """

    @app.route("/api/health", methods=["GET"])
    async def health_check():
        """Health check endpoint."""
        return jsonify(
            {
                "status": "healthy",
                "service": "family-graph",
                "version": __version__,
            }
        )


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5001, debug=True)
