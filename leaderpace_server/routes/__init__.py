"""Routes module for Flask endpoints"""

from leaderpace_server.routes.health import health_bp
from leaderpace_server.routes.pace import pace_bp
from leaderpace_server.routes.render import render_bp

__all__ = ['health_bp', 'pace_bp', 'render_bp']
