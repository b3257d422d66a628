"""Required-pace endpoint"""

import logging
import math

from flask import Blueprint, current_app, jsonify, request

from leaderpace_core.errors import LeaderPaceError, create_error_response, status_for
from leaderpace_core.request_parsing import parse_pace_request
from leaderpace_server.runner import run_in_new_loop

logger = logging.getLogger(__name__)

pace_bp = Blueprint('pace', __name__)

# Returned instead of a non-finite pace so watch clients always get a number
NON_FINITE_PACE_FALLBACK = 0.1


@pace_bp.route('/api/pace', methods=['GET', 'POST'])
@pace_bp.route('/api/TempoDelta', methods=['GET', 'POST'])
def tempo_delta():
    """Pace the caller must hold to finish within 1.5x of the leader."""
    logger.info(f"Pace request: {request.method} {request.full_path}")
    tracker = current_app.extensions["leaderpace"]

    try:
        pace_request = parse_pace_request(request.args, request.get_data(as_text=True))
        outcome = run_in_new_loop(tracker.derive_tempo(pace_request))
    except LeaderPaceError as e:
        status = status_for(e)
        if status >= 500:
            logger.error(f"Error deriving tempo delta: {e}")
        return jsonify(create_error_response(e, include_details=status >= 500)), status
    except Exception as e:
        logger.exception(f"Unexpected error deriving tempo delta: {e}")
        return jsonify(create_error_response(e, include_details=True)), 500

    if not math.isfinite(outcome.new_speed):
        logger.error("Derived new speed is infinity or NaN")
        outcome.new_speed = NON_FINITE_PACE_FALLBACK

    return jsonify(outcome.to_dict())
