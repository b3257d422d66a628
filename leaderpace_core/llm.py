#!/usr/bin/env python3
import logging
from typing import List, Optional

import aiohttp

from .llm_config import LLMConfig

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Non-200 reply or malformed payload from the chat-completions API."""


class OpenAICompatibleClient:
    """
    OpenAI-compatible async client.
    Works with Groq, OpenAI, DeepSeek and other OpenAI-compatible APIs.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.groq.com/openai/v1",
        model: str = "llama-3.3-70b-versatile",
        temperature: float = 0.1,
        max_tokens: int = 50,
        timeout: int = 30,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout

    def _payload(self, prompt: str, system: Optional[str]) -> dict:
        messages: List[dict] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})
        return {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def ainvoke(self, prompt: str, system: Optional[str] = None) -> dict:
        """Single-shot completion; returns {"text": reply}."""
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        timeout_obj = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout_obj) as session:
            async with session.post(
                f"{self.base_url}/chat/completions",
                headers=headers,
                json=self._payload(prompt, system),
            ) as resp:
                if resp.status != 200:
                    error_text = await resp.text()
                    raise LLMError(f"API error {resp.status}: {error_text[:500]}")
                data = await resp.json()

        try:
            text = data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise LLMError(f"Unexpected completion payload: {e}") from e
        return {"text": text}


def create_llm_client(llm_config: LLMConfig) -> Optional[OpenAICompatibleClient]:
    """Build the extraction LLM client, or None when no API key is configured."""
    if not llm_config.resolved_api_token:
        logger.info(f"No API key for {llm_config.provider_name}, LLM extraction disabled")
        return None
    llm_config.validate()
    return OpenAICompatibleClient(
        api_key=llm_config.resolved_api_token,
        base_url=llm_config.base_url,
        model=llm_config.model_name,
        temperature=llm_config.temperature,
        max_tokens=llm_config.max_tokens,
        timeout=llm_config.timeout,
    )
