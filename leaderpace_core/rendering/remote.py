#!/usr/bin/env python3
"""Strategies that delegate rendering to a remote HTTP service."""

import logging
from typing import Optional

import aiohttp

from .base import RenderStrategy

logger = logging.getLogger(__name__)

# Browserless caps waitForTimeout at 30 s
BROWSERLESS_MAX_WAIT_MS = 30000


class RemoteRenderServiceStrategy(RenderStrategy):
    """Our own render microservice: POST {base}/render -> {success, html, ...}."""

    name = "render-service"

    def __init__(self, base_url: Optional[str], wait_until: str = "networkidle"):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.wait_until = wait_until

    @property
    def available(self) -> bool:
        return bool(self.base_url)

    async def _render(self, url: str, timeout_ms: int) -> str:
        payload = {"url": url, "waitUntil": self.wait_until}
        timeout_obj = aiohttp.ClientTimeout(total=timeout_ms / 1000.0)
        async with aiohttp.ClientSession(timeout=timeout_obj) as session:
            async with session.post(f"{self.base_url}/render", json=payload) as resp:
                if resp.status != 200:
                    error_text = await resp.text()
                    raise RuntimeError(f"Render service error {resp.status}: {error_text[:300]}")
                data = await resp.json()

        if not isinstance(data, dict) or not data.get("success"):
            error = data.get("error") if isinstance(data, dict) else data
            raise RuntimeError(f"Render service reported failure: {error}")
        logger.debug(f"Render service took {data.get('duration')} ms for {url}")
        return data.get("html") or ""


class BrowserlessStrategy(RenderStrategy):
    """Commercial headless-browser API (Browserless /content endpoint)."""

    name = "browserless"

    def __init__(self, token: Optional[str], base_url: str = "https://chrome.browserless.io"):
        self.token = token
        self.base_url = base_url.rstrip("/")

    @property
    def available(self) -> bool:
        return bool(self.token)

    async def _render(self, url: str, timeout_ms: int) -> str:
        payload = {
            "url": url,
            "waitForTimeout": min(timeout_ms, BROWSERLESS_MAX_WAIT_MS),
            "gotoOptions": {"waitUntil": "networkidle0"},
        }
        timeout_obj = aiohttp.ClientTimeout(total=timeout_ms / 1000.0)
        async with aiohttp.ClientSession(timeout=timeout_obj) as session:
            async with session.post(
                f"{self.base_url}/content",
                params={"token": self.token},
                json=payload,
            ) as resp:
                if resp.status != 200:
                    error_text = await resp.text()
                    raise RuntimeError(f"Browserless error {resp.status}: {error_text[:300]}")
                return await resp.text()
