#!/usr/bin/env python3
from dataclasses import dataclass
import os
from typing import List, Optional
from dotenv import load_dotenv

from .errors import ConfigurationError
from .llm_config import LLMConfig

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ["true", "1", "yes"]


def _env_optional(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value.strip() if value and value.strip() else None


@dataclass
class Config:
    """Application configuration"""
    scraper_service_url: Optional[str] = _env_optional("SCRAPER_SERVICE_URL")
    browserless_token: Optional[str] = _env_optional("BROWSERLESS_TOKEN")
    browserless_url: str = os.getenv("BROWSERLESS_URL", "https://chrome.browserless.io")
    llm_provider: str = os.getenv("LEADERPACE_LLM_PROVIDER", "groq/llama-3.3-70b-versatile")
    llm_api_key: Optional[str] = _env_optional("LEADERPACE_LLM_API_KEY")
    llm_timeout: int = int(os.getenv("LEADERPACE_LLM_TIMEOUT", "30"))
    render_timeout_ms: int = int(os.getenv("LEADERPACE_RENDER_TIMEOUT_MS", "30000"))
    render_wait_until: str = os.getenv("LEADERPACE_RENDER_WAIT_UNTIL", "networkidle")
    http_fallback: bool = _env_flag("LEADERPACE_HTTP_FALLBACK", "true")
    headless: bool = _env_flag("LEADERPACE_HEADLESS", "true")
    cache_ttl_seconds: float = float(os.getenv("LEADERPACE_CACHE_TTL", "30"))
    # 0 means "render timeout + LLM timeout"
    pipeline_deadline_override: float = float(os.getenv("LEADERPACE_PIPELINE_DEADLINE", "0"))
    api_port: int = int(os.getenv("LEADERPACE_API_PORT", os.getenv("PORT", "8000")))
    enable_debug: bool = _env_flag("LEADERPACE_DEBUG", "false")

    def __post_init__(self):
        self.llm = LLMConfig(provider=self.llm_provider, api_token=self.llm_api_key, timeout=self.llm_timeout)

    @property
    def pipeline_deadline(self) -> float:
        if self.pipeline_deadline_override > 0:
            return self.pipeline_deadline_override
        return self.render_timeout_ms / 1000.0 + self.llm_timeout

    @property
    def has_llm(self) -> bool:
        return bool(self.llm.resolved_api_token)

    def missing_live_settings(self) -> List[str]:
        """Names of the settings a live (non dry-run) lookup cannot work without."""
        missing = []
        if not self.scraper_service_url:
            missing.append("SCRAPER_SERVICE_URL")
        if not self.has_llm:
            missing.append(self.llm.api_key_env_var or "LEADERPACE_LLM_API_KEY")
        return missing

    def require_live(self) -> None:
        missing = self.missing_live_settings()
        if missing:
            raise ConfigurationError(missing)

    def describe(self) -> dict:
        """Settings summary that is safe to log."""
        return {
            "scraper_service_url": self.scraper_service_url or "(not set)",
            "browserless_token": _mask(self.browserless_token),
            "llm_provider": self.llm.provider,
            "llm_api_key": _mask(self.llm.resolved_api_token),
            "render_timeout_ms": self.render_timeout_ms,
            "cache_ttl_seconds": self.cache_ttl_seconds,
        }


def _mask(secret: Optional[str]) -> str:
    if not secret:
        return "(not set)"
    return f"present ({secret[:4]}...)"


config = Config()
