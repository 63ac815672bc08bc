"""Inference oracle interface.

The oracle is the single place where instability of the external AI service
is absorbed. ``infer`` is total: transport errors, HTTP errors, malformed or
empty bodies, schema violations and timeouts all turn into
``FALLBACK_GUESS``. There is exactly one attempt per call.
"""

from __future__ import annotations

import asyncio
import json
import logging
from abc import ABC, abstractmethod

import httpx
from pydantic import ValidationError

from originscan.exceptions import InferenceError

from .prompt import build_prompt
from .result import FALLBACK_GUESS, InferenceGuess
from .schema import parse_response

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


class InferenceOracle(ABC):
    """Abstract AI oracle guessing product identity and origin for a code."""

    provider_name: str = "oracle"

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Identifier of the model answering the requests."""

    @abstractmethod
    async def _complete(self, prompt: str) -> str | None:
        """Send one structured-completion request and return the raw body.

        Implementations may raise anything; ``infer`` absorbs it.
        """

    async def infer(self, payload: str, symbology: str) -> InferenceGuess:
        """Guess product and origin for a scanned payload. Never raises."""
        prompt = build_prompt(payload, symbology)
        logger.debug("AI Prompt:\n%s", prompt)

        try:
            response_text = await asyncio.wait_for(
                self._complete(prompt),
                timeout=self._timeout,
            )
            logger.debug("AI Response: %s", response_text)
            guess = parse_response(response_text)
        except Exception as e:
            self._log_inference_error(e)
            return FALLBACK_GUESS

        logger.info(
            "%s guessed %r from %s (confidence: %s)",
            self.provider_name,
            guess.product_name,
            guess.country_name or "?",
            guess.confidence.value,
        )
        return guess

    def _log_inference_error(self, e: Exception) -> None:
        if isinstance(e, (asyncio.TimeoutError, httpx.TimeoutException)):
            logger.warning(
                "%s request timed out after %.1fs", self.provider_name, self._timeout
            )
        elif isinstance(e, httpx.ConnectError):
            logger.warning(
                "Could not connect to %s. Is it reachable?", self.provider_name
            )
        elif isinstance(e, httpx.HTTPStatusError):
            logger.warning(
                "%s returned HTTP %s",
                self.provider_name,
                e.response.status_code,
            )
        elif isinstance(e, (InferenceError, ValidationError, json.JSONDecodeError)):
            logger.warning(
                "%s returned an unusable response: %s",
                self.provider_name,
                str(e).splitlines()[0] if str(e) else type(e).__name__,
            )
        else:
            logger.warning(
                "AI analysis failed: %s (type: %s)",
                str(e) or repr(e),
                type(e).__name__,
            )
