"""
leaderpace_server - HTTP API for live-race pace advice
Exposes the pace calculation, a headless render endpoint and a health check
"""

from leaderpace_server.app import app, create_app

__all__ = [
    'app',
    'create_app',
]
