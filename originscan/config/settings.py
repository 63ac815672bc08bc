"""Scanner configuration loaded from environment variables.

Values are loaded from:
1. OS environment variables (ORIGINSCAN_ prefix, highest priority)
2. .env file (see ``resolve_env_file_path``)
3. Default values
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._utils import resolve_env_file_path

InferenceProvider = Literal["gemini", "ollama"]


class Settings(BaseSettings):
    """OriginScan configuration."""

    log_level: str = "INFO"

    # Inference oracle
    inference_provider: InferenceProvider = "gemini"
    # Upper bound for a single oracle call, connect + read + parse
    inference_timeout: float = Field(default=15.0, gt=0.0)

    gemini_api_key: SecretStr | None = None
    gemini_model: str = "gemini-3-flash-preview"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "qwen2.5:3b"

    # History
    history_max_size: int = Field(default=50, ge=1)

    model_config = SettingsConfigDict(
        env_file=resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="ORIGINSCAN_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
