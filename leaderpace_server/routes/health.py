"""Health check endpoint"""

from flask import Blueprint, current_app, jsonify

from leaderpace_core import __version__

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    payload = {
        "status": "healthy",
        "service": "leaderpace",
        "version": __version__,
    }
    # Cached race URLs and ages are debug output only
    if current_app.config.get("LEADERPACE_EXPOSE_CACHE"):
        payload["cache"] = current_app.extensions["leaderpace"].cache.summary()
    return jsonify(payload)
