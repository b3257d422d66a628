"""
Rendering - turn a race page URL into JavaScript-executed HTML.

Strategies are tried in order by RendererSelector until one succeeds.
"""

from .base import RenderResult, RenderStrategy
from .remote import RemoteRenderServiceStrategy, BrowserlessStrategy
from .local import PlaywrightStrategy, render_with_playwright, ensure_playwright_browsers
from .http_fetch import HttpFetchStrategy
from .selector import RendererSelector, build_default_strategies, create_renderer

__all__ = [
    'RenderResult',
    'RenderStrategy',
    'RemoteRenderServiceStrategy',
    'BrowserlessStrategy',
    'PlaywrightStrategy',
    'HttpFetchStrategy',
    'RendererSelector',
    'build_default_strategies',
    'create_renderer',
    'render_with_playwright',
    'ensure_playwright_browsers',
]
