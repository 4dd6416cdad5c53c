"""Upstream language-model backends."""

import os
from functools import lru_cache

from config import get_settings
from .client import ChatClient, UpstreamError
from .ollama import OllamaChatClient


@lru_cache
def get_chat_client() -> ChatClient:
    """FastAPI dependency for the configured ChatClient."""
    settings = get_settings()

    if settings.llm_provider == "ollama":
        return OllamaChatClient(
            base_url=settings.ollama_base_url,
            model=settings.ollama_model,
            temperature=settings.ollama_temperature,
            timeout=settings.upstream_timeout,
        )

    if settings.llm_provider == "openrouter":
        from .agent import AgentChatClient

        # Pydantic AI reads the key from os.environ, not from our settings
        if settings.openrouter_api_key is not None:
            os.environ["OPENROUTER_API_KEY"] = settings.openrouter_api_key.get_secret_value()
        return AgentChatClient(f"openrouter:{settings.default_model}")

    raise ValueError(f"Unsupported llm provider: {settings.llm_provider}")


__all__ = ["ChatClient", "UpstreamError", "OllamaChatClient", "get_chat_client"]
