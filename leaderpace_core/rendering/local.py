#!/usr/bin/env python3
import asyncio
import logging
import subprocess
import sys
import threading
from pathlib import Path
from typing import Optional

from .base import RenderStrategy

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]
# Timing sites fill their result tables from JS after load
RESULTS_SELECTOR = "table tbody tr, .col-point-scroll, [data-checkpoint]"
RESULTS_WAIT_MS = 8000
INITIAL_SETTLE_MS = 3000
TABLE_SETTLE_MS = 2000

_install_lock = threading.Lock()
_install_checked = False


def _chromium_present(cache_dir: Optional[Path] = None) -> bool:
    cache_dir = cache_dir or Path.home() / ".cache" / "ms-playwright"
    if not cache_dir.exists():
        return False
    for d in cache_dir.glob("chromium*"):
        if (d / "chrome-linux" / "chrome").exists() or \
           (d / "chrome-linux" / "headless_shell").exists():
            return True
    return False


def ensure_playwright_browsers() -> None:
    """Install chromium for Playwright if missing; checked once per process."""
    global _install_checked
    with _install_lock:
        if _install_checked:
            return
        _install_checked = True
        if _chromium_present():
            return
        logger.info("Playwright browsers not found, installing chromium...")
        try:
            result = subprocess.run(
                [sys.executable, "-m", "playwright", "install", "chromium"],
                capture_output=True,
                text=True,
                timeout=300,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Playwright install timed out, continuing anyway")
            return
        if result.returncode == 0:
            logger.info("Playwright chromium installed")
        else:
            logger.warning(f"Playwright install warning: {result.stderr[:200]}")


async def render_with_playwright(url: str, timeout_ms: int, wait_until: str = "networkidle",
                                 headless: bool = True) -> str:
    from playwright.async_api import async_playwright, TimeoutError as PlaywrightTimeoutError

    # The install blocks for minutes; keep it off the loop so attempt timeouts still fire
    await asyncio.get_running_loop().run_in_executor(None, ensure_playwright_browsers)

    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=headless, args=LAUNCH_ARGS)
        try:
            context = await browser.new_context(user_agent=USER_AGENT)
            page = await context.new_page()
            page.set_default_timeout(timeout_ms)
            await page.goto(url, wait_until=wait_until, timeout=timeout_ms)

            await page.wait_for_timeout(INITIAL_SETTLE_MS)
            try:
                await page.wait_for_selector(RESULTS_SELECTOR, timeout=RESULTS_WAIT_MS)
                logger.info("Results table detected, waiting for data population")
            except PlaywrightTimeoutError:
                logger.info("No results table found after wait, continuing anyway")
            await page.wait_for_timeout(TABLE_SETTLE_MS)

            return await page.content()
        finally:
            await browser.close()


class PlaywrightStrategy(RenderStrategy):
    """Headless chromium launched in this process."""

    name = "playwright"

    def __init__(self, wait_until: str = "networkidle", headless: bool = True):
        self.wait_until = wait_until
        self.headless = headless

    async def _render(self, url: str, timeout_ms: int) -> str:
        return await render_with_playwright(url, timeout_ms, self.wait_until, self.headless)
