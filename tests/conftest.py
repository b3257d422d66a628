import pytest

from tests.mocks.fakes import LEADER_HTML, FakeClock, FakeStrategy, make_tracker


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def leader_strategy():
    return FakeStrategy("fake", html=LEADER_HTML)


@pytest.fixture
def tracker(leader_strategy, clock):
    return make_tracker(leader_strategy, clock=clock)
