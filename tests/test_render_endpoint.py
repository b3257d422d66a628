import pytest

from leaderpace_server.app import create_app
from tests.mocks.fakes import FakeStrategy


@pytest.fixture
def strategies():
    return []


@pytest.fixture
def make_client(tracker, strategies):
    def _make(strategy):
        def factory(wait_until):
            strategies.append((wait_until, strategy))
            return strategy
        return create_app(tracker=tracker, render_strategy_factory=factory).test_client()
    return _make


def test_render_success(make_client, strategies):
    client = make_client(FakeStrategy(html="<html>rendered</html>"))
    resp = client.post('/render', json={"url": "https://live.eqtiming.com/76514#result", "waitUntil": "load"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['success'] is True
    assert data['html'] == "<html>rendered</html>"
    assert data['url'] == "https://live.eqtiming.com/76514#result"
    assert data['size'] == len("<html>rendered</html>")
    assert 'duration' in data
    assert strategies[0][0] == "load"


def test_render_default_wait_until(make_client, strategies):
    make_client(FakeStrategy(html="<html></html>")).post('/render', json={"url": "https://example.com"})
    assert strategies[0][0] == "networkidle"


def test_render_missing_url(make_client):
    resp = make_client(FakeStrategy(html="<html></html>")).post('/render', json={})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "error": "Missing required field: url"}


def test_render_failure(make_client):
    client = make_client(FakeStrategy(error=RuntimeError("browser crashed")))
    resp = client.post('/render', json={"url": "https://example.com"})
    assert resp.status_code == 500
    data = resp.get_json()
    assert data['success'] is False
    assert "browser crashed" in data['error']


@pytest.mark.parametrize("body", [["https://example.com"], "https://example.com", 42])
def test_render_non_object_body(make_client, body):
    resp = make_client(FakeStrategy(html="<html></html>")).post('/render', json=body)
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "error": "Missing required field: url"}
