"""Inference oracle adapters.

``InferenceOracle.infer`` is total: every call resolves to a complete
``InferenceGuess``, the fixed ``FALLBACK_GUESS`` on any failure.

Usage:
    from originscan.inference import create_oracle

    oracle = create_oracle(settings)
    guess = await oracle.infer("4006381333931", "EAN_13")
"""

from .factory import create_oracle
from .gemini import GeminiOracle
from .ollama import OllamaOracle
from .oracle import InferenceOracle
from .result import FALLBACK_GUESS, Confidence, InferenceGuess
from .schema import OracleResponse, parse_response

__all__ = [
    "FALLBACK_GUESS",
    "Confidence",
    "GeminiOracle",
    "InferenceGuess",
    "InferenceOracle",
    "OllamaOracle",
    "OracleResponse",
    "create_oracle",
    "parse_response",
]
