"""Main entry point for leaderpace server"""

import logging

from leaderpace_core.config import config
from leaderpace_server.app import app

logger = logging.getLogger(__name__)


def main():
    """Run the leaderpace API server"""
    missing = config.missing_live_settings()
    if missing:
        logger.warning(f"Missing live settings: {', '.join(missing)}")
        logger.warning("  The server will start, but only dryRun requests will succeed until they are set.")
    logger.info(f"Starting leaderpace API server on port {config.api_port}...")
    for key, value in config.describe().items():
        logger.info(f"  {key}: {value}")
    app.run(host='0.0.0.0', port=config.api_port, debug=False, use_reloader=False)


if __name__ == '__main__':
    main()
