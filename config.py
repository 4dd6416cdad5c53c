"""Application configuration."""

from functools import lru_cache
from typing import Literal, Optional
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    environment: str = "development"
    debug: bool = True
    host: str = "0.0.0.0"
    port: int = 8080
    sse_ping_interval: int = 15  # seconds between keep-alive comments

    # Upstream model backend
    llm_provider: Literal["ollama", "openrouter"] = "ollama"
    upstream_timeout: Optional[float] = None  # seconds, None = wait forever

    # Ollama
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.2"
    ollama_temperature: Optional[float] = None

    # OpenRouter
    openrouter_api_key: Optional[SecretStr] = None
    default_model: str = "openai/gpt-4o"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
