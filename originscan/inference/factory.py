"""Oracle factory for creating the configured inference provider."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .gemini import GeminiOracle
from .ollama import OllamaOracle
from .oracle import InferenceOracle

if TYPE_CHECKING:
    from originscan.config import Settings

logger = logging.getLogger(__name__)


def create_oracle(settings: Settings) -> InferenceOracle:
    """Create an inference oracle based on settings.

    Raises
    ------
    ValueError
        If the inference provider is not supported.
    """
    provider = settings.inference_provider
    timeout = settings.inference_timeout

    if provider == "gemini":
        logger.info("Creating oracle: provider=gemini, model=%s", settings.gemini_model)
        api_key = settings.gemini_api_key
        return GeminiOracle(
            api_key=api_key.get_secret_value() if api_key else None,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=timeout,
        )

    if provider == "ollama":
        logger.info("Creating oracle: provider=ollama, model=%s", settings.ollama_model)
        return OllamaOracle(
            model=settings.ollama_model,
            base_url=settings.ollama_base_url,
            timeout=timeout,
        )

    msg = f"Unknown inference provider: {provider}"
    raise ValueError(msg)
