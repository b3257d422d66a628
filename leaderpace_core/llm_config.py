#!/usr/bin/env python3
"""
LLMConfig - provider configuration for the extraction fallback.

All supported providers speak the OpenAI chat-completions dialect:
- groq/llama-3.3-70b-versatile (default)
- openai/gpt-4o-mini
- deepseek/deepseek-chat
- openrouter/meta-llama/llama-3.3-70b-instruct

Usage:
    llm_config = LLMConfig(provider="groq/llama-3.3-70b-versatile")        # Uses GROQ_API_KEY
    llm_config = LLMConfig(provider="openai/gpt-4o-mini", api_token="sk-...")
    llm_config = LLMConfig(provider="groq", api_token="env:MY_GROQ_KEY")
"""

import os
from dataclasses import dataclass
from typing import Optional


# Provider to environment variable mapping
PROVIDER_ENV_VARS = {
    "groq": "GROQ_API_KEY",
    "openai": "OPENAI_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}

# Provider to base URL mapping
PROVIDER_BASE_URLS = {
    "groq": "https://api.groq.com/openai/v1",
    "openai": "https://api.openai.com/v1",
    "deepseek": "https://api.deepseek.com/v1",
    "openrouter": "https://openrouter.ai/api/v1",
}

# Default models per provider
DEFAULT_MODELS = {
    "groq": "llama-3.3-70b-versatile",
    "openai": "gpt-4o-mini",
    "deepseek": "deepseek-chat",
    "openrouter": "meta-llama/llama-3.3-70b-instruct",
}


@dataclass
class LLMConfig:
    """
    LLM provider configuration.

    Parameters:
        provider: Format "provider/model" e.g. "groq/llama-3.3-70b-versatile"
        api_token: Optional. If not provided, reads from the provider's environment variable.
                   Can also use "env:VAR_NAME" format to specify custom env var.
        base_url: Optional. Custom API endpoint for the provider.
        temperature: LLM temperature (0.0-1.0)
        max_tokens: Maximum tokens to generate
        timeout: Request timeout in seconds
    """
    provider: str = "groq/llama-3.3-70b-versatile"
    api_token: Optional[str] = None
    base_url: Optional[str] = None
    temperature: float = 0.1
    max_tokens: int = 50
    timeout: int = 30

    def __post_init__(self):
        parts = self.provider.split("/", 1)
        self._provider_name = parts[0].lower()
        self._model_name = parts[1] if len(parts) > 1 else DEFAULT_MODELS.get(self._provider_name, "")
        self._resolved_token = self._resolve_api_token()

        if self.base_url is None:
            self.base_url = PROVIDER_BASE_URLS.get(self._provider_name)

    def _resolve_api_token(self) -> Optional[str]:
        """Resolve API token from various sources."""
        if self.api_token is None:
            env_var = PROVIDER_ENV_VARS.get(self._provider_name)
            if env_var:
                return os.getenv(env_var)
            return None

        if self.api_token.startswith("env:"):
            env_var = self.api_token[4:].strip()
            return os.getenv(env_var)

        return self.api_token

    @property
    def provider_name(self) -> str:
        return self._provider_name

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def resolved_api_token(self) -> Optional[str]:
        return self._resolved_token

    @property
    def api_key_env_var(self) -> Optional[str]:
        if self.api_token and self.api_token.startswith("env:"):
            return self.api_token[4:].strip()
        return PROVIDER_ENV_VARS.get(self._provider_name)

    def validate(self) -> bool:
        """Validate configuration"""
        if self._provider_name not in PROVIDER_BASE_URLS and not self.base_url:
            raise ValueError(
                f"Unknown provider: {self._provider_name}. "
                f"Use one of {', '.join(sorted(PROVIDER_BASE_URLS))} or set base_url."
            )
        if not self._resolved_token:
            env_var = self.api_key_env_var or "unknown"
            raise ValueError(
                f"API token required for {self._provider_name}. "
                f"Set api_token or {env_var} environment variable."
            )
        return True
