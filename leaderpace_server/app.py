"""Flask application setup for leaderpace server"""

import logging
from typing import Callable, Optional

from flask import Flask
from flask_cors import CORS

from leaderpace_core.config import config
from leaderpace_core.rendering import PlaywrightStrategy, RenderStrategy
from leaderpace_core.tracker import LeaderTracker, create_tracker
from leaderpace_server.routes.health import health_bp
from leaderpace_server.routes.pace import pace_bp
from leaderpace_server.routes.render import render_bp

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.enable_debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def _default_render_strategy(wait_until: str) -> RenderStrategy:
    return PlaywrightStrategy(wait_until=wait_until, headless=config.headless)


def create_app(
    tracker: Optional[LeaderTracker] = None,
    render_strategy_factory: Optional[Callable[[str], RenderStrategy]] = None,
) -> Flask:
    app = Flask(__name__)
    app.config["LEADERPACE_EXPOSE_CACHE"] = config.enable_debug
    CORS(app)

    app.extensions["leaderpace"] = tracker or create_tracker(config)
    app.extensions["leaderpace.render_strategy_factory"] = render_strategy_factory or _default_render_strategy

    # Register blueprints
    app.register_blueprint(health_bp)
    app.register_blueprint(pace_bp)
    app.register_blueprint(render_bp)
    return app


app = create_app()
