"""Configuration module for mcp-local-llm using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Ollama's OpenAI-compatible endpoint. Docker Model Runner listens on
# http://localhost:12434/engines/v1 instead.
DEFAULT_BASE_URL = "http://localhost:11434/v1"
DOCKER_MODEL_RUNNER_URL = "http://localhost:12434/engines/v1"


class LocalLLMSettings(BaseSettings):
    """Main configuration settings for mcp-local-llm.

    All settings can be overridden via environment variables with the
    LOCAL_LLM_ prefix. For example, LOCAL_LLM_BASE_URL will override the
    base_url setting and LOCAL_LLM_MODEL the default model.
    """

    # Backend
    base_url: str = DEFAULT_BASE_URL
    model: str = "qwen2.5-coder:7b"
    max_tokens: int = 2048
    temperature: float = 0.7

    # Local backends don't check the key, but the client requires one
    api_key: str = "not-needed"
    request_timeout: float = 600.0

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8000

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="LOCAL_LLM_", frozen=True)
