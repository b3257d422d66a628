import pytest

from leaderpace_core.errors import ConfigurationError
from tests.mocks.fakes import make_config


class TestConfig:
    def test_pipeline_deadline_default(self):
        config = make_config(render_timeout_ms=30000, llm_timeout=30)
        assert config.pipeline_deadline == 60.0

    def test_pipeline_deadline_override(self):
        assert make_config(pipeline_deadline_override=12).pipeline_deadline == 12

    def test_llm_built_from_settings(self):
        config = make_config(llm_provider="openai/gpt-4o-mini", llm_api_key="sk-test", llm_timeout=7)
        assert config.llm.provider_name == "openai"
        assert config.llm.resolved_api_token == "sk-test"
        assert config.llm.timeout == 7
        assert config.has_llm

    def test_live_ready(self):
        config = make_config()
        assert config.missing_live_settings() == []
        config.require_live()

    def test_missing_live_settings(self):
        config = make_config(scraper_service_url=None, llm_api_key="")
        assert config.missing_live_settings() == ["SCRAPER_SERVICE_URL", "GROQ_API_KEY"]
        with pytest.raises(ConfigurationError, match="SCRAPER_SERVICE_URL, GROQ_API_KEY"):
            config.require_live()

    def test_describe_masks_secrets(self):
        config = make_config(llm_api_key="gsk_supersecretvalue", browserless_token="bl_token_value")
        described = config.describe()
        assert described["llm_api_key"] == "present (gsk_...)"
        assert "supersecret" not in str(described)
        assert "bl_token_value" not in str(described)
        assert make_config(scraper_service_url=None).describe()["scraper_service_url"] == "(not set)"
