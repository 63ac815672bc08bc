"""Ollama-based inference oracle for self-hosted models.

Uses structured outputs (``format`` with a JSON schema) so that small local
models answer in the oracle's response shape.

Recommended models:
- qwen2.5:3b   (2GB)  - Default, good multilingual product knowledge
- llama3.2:3b  (2GB)  - Alternative
- mistral:7b   (4GB)  - Best accuracy, slower
"""

from __future__ import annotations

import httpx

from .oracle import DEFAULT_TIMEOUT, InferenceOracle
from .schema import RESPONSE_JSON_SCHEMA


class OllamaOracle(InferenceOracle):
    """Inference oracle backed by a local Ollama instance."""

    provider_name = "Ollama"

    def __init__(
        self,
        model: str = "qwen2.5:3b",
        base_url: str = "http://localhost:11434",
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__(timeout=timeout)
        self._model = model
        self._base_url = base_url.rstrip("/")

    @property
    def model_name(self) -> str:
        return self._model

    async def _complete(self, prompt: str) -> str | None:
        url = f"{self._base_url}/api/generate"

        payload = {
            "model": self._model,
            "prompt": prompt,
            "stream": False,
            "format": RESPONSE_JSON_SCHEMA,
            "options": {
                "temperature": 0.1,  # Low temperature for consistent output
                "num_predict": 200,  # Limit response length
            },
        }

        timeout = httpx.Timeout(connect=5.0, read=self._timeout, write=10.0, pool=5.0)
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(url, json=payload)
            response.raise_for_status()

            data = response.json()
            return data.get("response", "")
