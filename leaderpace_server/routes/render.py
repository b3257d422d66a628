"""Render endpoint: headless-browser HTML for another leaderpace instance to consume"""

import logging

from flask import Blueprint, current_app, jsonify, request

from leaderpace_server.runner import run_in_new_loop

logger = logging.getLogger(__name__)

render_bp = Blueprint('render', __name__)

# Timing pages need far longer than the client-side default to settle
RENDER_TIMEOUT_MS = 90000


@render_bp.route('/render', methods=['POST'])
def render_page():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    url = data.get('url')
    wait_until = data.get('waitUntil') or 'networkidle'

    if not url:
        return jsonify({"success": False, "error": "Missing required field: url"}), 400

    logger.info(f"Rendering: {url}")
    strategy = current_app.extensions["leaderpace.render_strategy_factory"](wait_until)
    result = run_in_new_loop(strategy.attempt(url, RENDER_TIMEOUT_MS))

    if not result.success:
        logger.error(f"Error rendering page {url}: {result.error}")
        return jsonify({
            "success": False,
            "error": str(result.error),
            "duration": result.duration_ms,
        }), 500

    logger.info(f"Successfully rendered {url} in {result.duration_ms}ms ({result.size} chars)")
    return jsonify({
        "success": True,
        "html": result.html,
        "url": url,
        "duration": result.duration_ms,
        "size": result.size,
    })
