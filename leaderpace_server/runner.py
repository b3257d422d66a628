"""Run pipeline coroutines from Flask's synchronous views."""

import asyncio
import logging

logger = logging.getLogger(__name__)


def run_in_new_loop(coro):
    """Run a coroutine in a fresh event loop per request to avoid loop state issues."""
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        return loop.run_until_complete(coro)
    finally:
        try:
            loop.run_until_complete(loop.shutdown_asyncgens())
        except RuntimeError as e:
            logger.debug(f"Async generator shutdown skipped: {e}")
        loop.close()
        asyncio.set_event_loop(None)
