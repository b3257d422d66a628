#!/usr/bin/env python3
import logging
from typing import List, Optional, Sequence

from ..config import Config
from ..errors import RenderError
from .base import RenderResult, RenderStrategy
from .http_fetch import HttpFetchStrategy
from .local import PlaywrightStrategy
from .remote import BrowserlessStrategy, RemoteRenderServiceStrategy

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30000


class RendererSelector:
    """
    Tries strategies in order and returns the first rendered HTML.

    A failed strategy is logged and the next one is tried. When all fail,
    RenderError is raised from the last underlying cause.
    """

    def __init__(self, strategies: Sequence[RenderStrategy], timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.strategies = list(strategies)
        self.timeout_ms = timeout_ms

    @property
    def active_strategies(self) -> List[RenderStrategy]:
        return [s for s in self.strategies if s.available]

    async def render_result(self, url: str, timeout_ms: Optional[int] = None) -> RenderResult:
        timeout_ms = timeout_ms or self.timeout_ms
        attempts = {}
        last_error: Optional[BaseException] = None

        for strategy in self.active_strategies:
            logger.info(f"Rendering {url} via {strategy.name} (timeout {timeout_ms} ms)")
            result = await strategy.attempt(url, timeout_ms)
            if result.success:
                logger.info(f"{strategy.name} returned {result.size} chars in {result.duration_ms} ms")
                return result
            logger.warning(f"{strategy.name} failed after {result.duration_ms} ms: {result.error}")
            attempts[strategy.name] = str(result.error)
            last_error = result.error

        raise RenderError(url, attempts) from last_error

    async def render(self, url: str, timeout_ms: Optional[int] = None) -> str:
        result = await self.render_result(url, timeout_ms)
        return result.html


def build_default_strategies(config: Config) -> List[RenderStrategy]:
    """Remote render service -> Browserless -> local Playwright [-> plain HTTP]."""
    strategies: List[RenderStrategy] = [
        RemoteRenderServiceStrategy(config.scraper_service_url, config.render_wait_until),
        BrowserlessStrategy(config.browserless_token, config.browserless_url),
        PlaywrightStrategy(config.render_wait_until, config.headless),
    ]
    if config.http_fallback:
        strategies.append(HttpFetchStrategy())
    return strategies


def create_renderer(config: Config) -> RendererSelector:
    return RendererSelector(build_default_strategies(config), timeout_ms=config.render_timeout_ms)
