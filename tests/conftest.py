"""Test fixtures for OriginScan."""

import asyncio
import json
from collections.abc import Generator

import pytest
from originscan.config import Settings, clear_settings_cache
from originscan.inference import InferenceOracle
from originscan.resolution import HistoryStore, ResolutionCoordinator

GERMAN_PAYLOAD = "4006381333931"
QR_PAYLOAD = "https://example.com/item/42"


def oracle_body(**overrides: object) -> str:
    """Build a well-formed oracle response body."""
    body = {
        "productName": "STABILO BOSS Original",
        "countryOfOrigin": "Czech Republic",
        "isoCode": "CZ",
        "confidence": "high",
        "description": "Highlighter pen by STABILO, produced in the Czech Republic.",
        "isProduct": True,
    }
    body.update(overrides)
    return json.dumps(body)


class StubOracle(InferenceOracle):
    """Oracle answering with canned bodies instead of calling a service.

    ``responses`` maps payloads to a body string or an exception to raise.
    ``gates`` holds one event per payload; the call blocks until it is set.
    """

    provider_name = "Stub"

    def __init__(self, default: str | Exception | None = None, timeout: float = 2.0):
        super().__init__(timeout=timeout)
        self.default = default if default is not None else oracle_body()
        self.responses: dict[str, str | Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.prompts: list[str] = []

    @property
    def model_name(self) -> str:
        return "stub-1"

    def gate(self, payload: str) -> asyncio.Event:
        event = asyncio.Event()
        self.gates[payload] = event
        return event

    async def _complete(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        for payload, gate in list(self.gates.items()):
            if json.dumps(payload) in prompt:
                await gate.wait()
        for payload, response in self.responses.items():
            if json.dumps(payload) in prompt:
                return _answer(response)
        return _answer(self.default)


def _answer(response: str | Exception) -> str:
    if isinstance(response, Exception):
        raise response
    return response


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep developer .env files and ORIGINSCAN_ variables out of tests."""
    monkeypatch.delenv("ORIGINSCAN_ENV_FILE", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        inference_provider="gemini",
        gemini_api_key="test-key",
        inference_timeout=2.0,
        history_max_size=50,
    )


@pytest.fixture
def oracle() -> StubOracle:
    return StubOracle()


@pytest.fixture
def history() -> HistoryStore:
    return HistoryStore()


@pytest.fixture
def coordinator(oracle: StubOracle, history: HistoryStore) -> ResolutionCoordinator:
    return ResolutionCoordinator(oracle=oracle, history=history)


@pytest.fixture
def make_oracle() -> type[StubOracle]:
    return StubOracle


@pytest.fixture
def make_body():
    return oracle_body
