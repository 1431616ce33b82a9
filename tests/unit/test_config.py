"""Unit tests for LocalLLMSettings."""

import pytest
from pydantic import ValidationError

from mcp_local_llm.config import LocalLLMSettings

ENV_VARS = [
    "LOCAL_LLM_BASE_URL",
    "LOCAL_LLM_MODEL",
    "LOCAL_LLM_MAX_TOKENS",
    "LOCAL_LLM_TEMPERATURE",
    "LOCAL_LLM_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_default_values(clean_env):
    """Test that settings have correct default values."""
    settings = LocalLLMSettings()

    assert settings.base_url == "http://localhost:11434/v1"
    assert settings.model == "qwen2.5-coder:7b"
    assert settings.max_tokens == 2048
    assert settings.temperature == 0.7
    assert settings.api_key == "not-needed"
    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.log_level == "INFO"


def test_settings_from_environment(clean_env):
    """Test that LOCAL_LLM_ environment variables override defaults."""
    clean_env.setenv("LOCAL_LLM_BASE_URL", "http://localhost:12434/engines/v1")
    clean_env.setenv("LOCAL_LLM_MODEL", "llama3.2:latest")
    clean_env.setenv("LOCAL_LLM_MAX_TOKENS", "512")
    clean_env.setenv("LOCAL_LLM_TEMPERATURE", "0")

    settings = LocalLLMSettings()

    assert settings.base_url == "http://localhost:12434/engines/v1"
    assert settings.model == "llama3.2:latest"
    assert settings.max_tokens == 512
    assert settings.temperature == 0.0


def test_settings_are_immutable(clean_env):
    """Test that settings can't be changed after startup."""
    settings = LocalLLMSettings()

    with pytest.raises(ValidationError):
        settings.model = "other"
