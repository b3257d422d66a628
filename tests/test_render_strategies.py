"""
Tests for the concrete render strategies.

Remote strategies talk to an in-process aiohttp test server.
"""

import subprocess
import time
from unittest.mock import MagicMock

import pytest
import requests
from aiohttp import test_utils, web

from leaderpace_core.rendering import (
    BrowserlessStrategy,
    HttpFetchStrategy,
    PlaywrightStrategy,
    RemoteRenderServiceStrategy,
    local,
)

URL = "https://live.eqtiming.com/76514#result"


def _render_service_app(reply, status=200):
    received = []

    async def render(request):
        received.append(await request.json())
        return web.json_response(reply, status=status)

    app = web.Application()
    app.router.add_post("/render", render)
    return app, received


class TestRemoteRenderService:
    def test_unavailable_without_url(self):
        assert RemoteRenderServiceStrategy(None).available is False
        assert RemoteRenderServiceStrategy("http://render").available is True

    @pytest.mark.asyncio
    async def test_render(self):
        app, received = _render_service_app({"success": True, "html": "<html>ok</html>", "duration": 12})
        async with test_utils.TestServer(app) as server:
            strategy = RemoteRenderServiceStrategy(str(server.make_url("/")), wait_until="load")
            result = await strategy.attempt(URL, 5000)
        assert result.success
        assert result.html == "<html>ok</html>"
        assert received == [{"url": URL, "waitUntil": "load"}]

    @pytest.mark.asyncio
    async def test_reported_failure(self):
        app, _ = _render_service_app({"success": False, "error": "navigation timeout"})
        async with test_utils.TestServer(app) as server:
            result = await RemoteRenderServiceStrategy(str(server.make_url("/"))).attempt(URL, 5000)
        assert not result.success
        assert "navigation timeout" in str(result.error)

    @pytest.mark.asyncio
    async def test_http_error(self):
        app, _ = _render_service_app({"error": "boom"}, status=502)
        async with test_utils.TestServer(app) as server:
            result = await RemoteRenderServiceStrategy(str(server.make_url("/"))).attempt(URL, 5000)
        assert not result.success
        assert "502" in str(result.error)


class TestBrowserless:
    def test_unavailable_without_token(self):
        assert BrowserlessStrategy(None).available is False

    @pytest.mark.asyncio
    async def test_content_request(self):
        seen = {}

        async def content(request):
            seen["token"] = request.query.get("token")
            seen["body"] = await request.json()
            return web.Response(text="<html>rendered</html>", content_type="text/html")

        app = web.Application()
        app.router.add_post("/content", content)
        async with test_utils.TestServer(app) as server:
            strategy = BrowserlessStrategy("bl-token", str(server.make_url("/")))
            result = await strategy.attempt(URL, 60000)

        assert result.html == "<html>rendered</html>"
        assert seen["token"] == "bl-token"
        assert seen["body"]["url"] == URL
        assert seen["body"]["waitForTimeout"] == 30000
        assert seen["body"]["gotoOptions"] == {"waitUntil": "networkidle0"}


class TestHttpFetch:
    @pytest.mark.asyncio
    async def test_get(self):
        session = MagicMock(spec=requests.Session)
        session.get.return_value.text = "<html>static</html>"
        result = await HttpFetchStrategy(session).attempt(URL, 4000)
        assert result.html == "<html>static</html>"
        _, kwargs = session.get.call_args
        assert kwargs["timeout"] == 4.0
        assert "Mozilla" in kwargs["headers"]["User-Agent"]

    @pytest.mark.asyncio
    async def test_http_error(self):
        session = MagicMock(spec=requests.Session)
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        result = await HttpFetchStrategy(session).attempt(URL, 4000)
        assert not result.success
        assert "404" in str(result.error)


class TestPlaywright:
    @pytest.mark.asyncio
    async def test_browser_install_does_not_block_attempt_timeout(self, monkeypatch):
        """A slow chromium install must not stretch the per-attempt timeout."""
        def slow_install(*args, **kwargs):
            time.sleep(2)
            return subprocess.CompletedProcess(args, 0, "", "")

        monkeypatch.setattr(local, "_install_checked", False)
        monkeypatch.setattr(local, "_chromium_present", lambda cache_dir=None: False)
        monkeypatch.setattr(local.subprocess, "run", slow_install)

        start = time.monotonic()
        result = await PlaywrightStrategy().attempt(URL, 200)
        elapsed = time.monotonic() - start

        assert not result.success
        assert isinstance(result.error, TimeoutError)
        assert elapsed < 1.0
