import pytest

from leaderpace_core.extraction import LeaderExtractor, LLMLeaderExtractor
from tests.mocks.fakes import FakeLLM


class TestLeaderExtractor:
    """Heuristics first, LLM only when they find nothing"""

    @pytest.mark.asyncio
    async def test_heuristics_hit_skips_llm(self):
        llm = FakeLLM("distance: 80, time: 4:00:00")
        extractor = LeaderExtractor(LLMLeaderExtractor(llm))
        data = await extractor.extract("<td>34.5 km</td><td>1:43:30</td>")
        assert data.distance_km == 34.5
        assert llm.prompts == []

    @pytest.mark.asyncio
    async def test_llm_fallback(self):
        llm = FakeLLM("distance: 45, time: 2:10:00")
        extractor = LeaderExtractor(LLMLeaderExtractor(llm))
        data = await extractor.extract("<p>Leader passed Oxberg</p>")
        assert data.distance_km == 45.0
        assert len(llm.prompts) == 1

    @pytest.mark.asyncio
    async def test_no_llm_configured(self):
        assert await LeaderExtractor().extract("<p>Leader passed Oxberg</p>") is None

    @pytest.mark.asyncio
    async def test_llm_distance_over_total_ignored(self):
        llm = FakeLLM("distance: 120, time: 5:00:00")
        extractor = LeaderExtractor(LLMLeaderExtractor(llm))
        assert await extractor.extract("<p>Leader passed Oxberg</p>", max_distance_km=90) is None

    @pytest.mark.asyncio
    async def test_empty_html(self):
        assert await LeaderExtractor().extract("") is None
