"""Gemini-based inference oracle (Google Generative Language REST API)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from originscan.exceptions import InferenceError

from .oracle import DEFAULT_TIMEOUT, InferenceOracle
from .schema import RESPONSE_FIELDS

logger = logging.getLogger(__name__)

# OpenAPI-subset schema accepted by ``generationConfig.responseSchema``
GEMINI_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "productName": {"type": "STRING"},
        "countryOfOrigin": {"type": "STRING"},
        "isoCode": {
            "type": "STRING",
            "description": "ISO 3166-1 alpha-2 code, e.g., US, JP, CN",
        },
        "confidence": {"type": "STRING", "enum": ["high", "medium", "low"]},
        "description": {"type": "STRING"},
        "isProduct": {"type": "BOOLEAN"},
    },
    "required": list(RESPONSE_FIELDS),
}


class GeminiOracle(InferenceOracle):
    """Inference oracle backed by a hosted Gemini model."""

    provider_name = "Gemini"

    def __init__(
        self,
        api_key: str | None,
        model: str = "gemini-3-flash-preview",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__(timeout=timeout)
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")

        if not api_key:
            logger.warning("No Gemini API key configured; AI analysis will fall back")

    @property
    def model_name(self) -> str:
        return self._model

    def _build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": GEMINI_RESPONSE_SCHEMA,
                "temperature": 0.2,
            },
        }

    async def _complete(self, prompt: str) -> str | None:
        if not self._api_key:
            msg = "Gemini API key is not configured"
            raise InferenceError(msg)

        url = f"{self._base_url}/models/{self._model}:generateContent"
        timeout = httpx.Timeout(connect=5.0, read=self._timeout, write=10.0, pool=5.0)
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(
                url,
                json=self._build_request(prompt),
                headers={"x-goog-api-key": self._api_key},
            )
            response.raise_for_status()
            data = response.json()

        return self._extract_text(data)

    def _extract_text(self, data: dict[str, Any]) -> str:
        candidates = data.get("candidates") or []
        if not candidates:
            reason = (data.get("promptFeedback") or {}).get("blockReason")
            msg = f"Gemini returned no candidates (block reason: {reason})"
            raise InferenceError(msg)

        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts)
