"""Plain HTTP GET. Last resort: sees only the static HTML, no JavaScript."""

import asyncio
import functools
import logging

import requests

from .base import RenderStrategy
from .local import USER_AGENT

logger = logging.getLogger(__name__)


class HttpFetchStrategy(RenderStrategy):
    name = "http"

    def __init__(self, session: requests.Session = None):
        self.session = session or requests.Session()

    def _get(self, url: str, timeout_ms: int) -> str:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }
        resp = self.session.get(url, headers=headers, timeout=timeout_ms / 1000.0)
        resp.raise_for_status()
        return resp.text

    async def _render(self, url: str, timeout_ms: int) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(self._get, url, timeout_ms))
