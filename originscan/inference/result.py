"""Inference guess value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Confidence(str, Enum):
    """Coarse reliability tier reported by the oracle."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class InferenceGuess:
    """Best-effort product and origin guess from the inference oracle.

    Always fully populated: adapters substitute ``FALLBACK_GUESS`` when the
    external service cannot produce a valid answer.
    """

    product_name: str
    country_name: str
    iso_code: str
    confidence: Confidence
    description: str
    is_product: bool

    @property
    def is_fallback(self) -> bool:
        return self == FALLBACK_GUESS


FALLBACK_GUESS = InferenceGuess(
    product_name="Unknown Item",
    country_name="Unknown",
    iso_code="XX",
    confidence=Confidence.LOW,
    description="Could not analyze this code with AI.",
    is_product=False,
)
