"""Tests for the rendering fallback chain."""

import pytest

from leaderpace_core.errors import RenderError
from leaderpace_core.rendering import RendererSelector, build_default_strategies
from tests.mocks.fakes import FakeStrategy, make_config

URL = "https://live.eqtiming.com/76514#result"


class TestRendererSelector:
    @pytest.mark.asyncio
    async def test_first_success_short_circuits(self):
        first = FakeStrategy("first", html="<html>one</html>")
        second = FakeStrategy("second", html="<html>two</html>")
        html = await RendererSelector([first, second]).render(URL)
        assert html == "<html>one</html>"
        assert second.calls == 0

    @pytest.mark.asyncio
    async def test_falls_through_on_failure(self):
        first = FakeStrategy("first", error=RuntimeError("connection refused"))
        second = FakeStrategy("second", html="<html>two</html>")
        result = await RendererSelector([first, second]).render_result(URL)
        assert result.strategy == "second"
        assert result.html == "<html>two</html>"
        assert first.calls == 1
        assert second.calls == 1

    @pytest.mark.asyncio
    async def test_unavailable_strategy_skipped(self):
        first = FakeStrategy("first", html="<html>one</html>", available=False)
        second = FakeStrategy("second", html="<html>two</html>")
        assert await RendererSelector([first, second]).render(URL) == "<html>two</html>"
        assert first.calls == 0

    @pytest.mark.asyncio
    async def test_timeout_counts_as_failure(self):
        slow = FakeStrategy("slow", html="<html>late</html>", delay=1.0)
        fast = FakeStrategy("fast", html="<html>fast</html>")
        result = await RendererSelector([slow, fast], timeout_ms=50).render_result(URL)
        assert result.strategy == "fast"

    @pytest.mark.asyncio
    async def test_empty_html_counts_as_failure(self):
        empty = FakeStrategy("empty", html="   ")
        good = FakeStrategy("good", html="<html>ok</html>")
        assert await RendererSelector([empty, good]).render(URL) == "<html>ok</html>"

    @pytest.mark.asyncio
    async def test_all_failed(self):
        last_cause = ValueError("bad gateway")
        strategies = [
            FakeStrategy("first", error=RuntimeError("refused")),
            FakeStrategy("second", error=last_cause),
        ]
        with pytest.raises(RenderError) as exc_info:
            await RendererSelector(strategies).render(URL)
        assert set(exc_info.value.attempts) == {"first", "second"}
        assert exc_info.value.__cause__ is last_cause
        assert URL in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_no_available_strategy(self):
        with pytest.raises(RenderError, match="no rendering strategy available"):
            await RendererSelector([FakeStrategy(available=False)]).render(URL)


class TestDefaultStrategies:
    def test_order(self):
        config = make_config(browserless_token="bl-token", http_fallback=True)
        names = [s.name for s in build_default_strategies(config)]
        assert names == ["render-service", "browserless", "playwright", "http"]

    def test_http_fallback_disabled(self):
        names = [s.name for s in build_default_strategies(make_config(http_fallback=False))]
        assert "http" not in names

    def test_unconfigured_remotes_unavailable(self):
        config = make_config(scraper_service_url=None, browserless_token=None)
        active = RendererSelector(build_default_strategies(config)).active_strategies
        assert [s.name for s in active] == ["playwright"]
