"""Deterministic (offline) country classifier."""

from __future__ import annotations

import logging

from originscan.registry import PrefixRegistry, get_registry

from .guess import DeterministicGuess

logger = logging.getLogger(__name__)


class DeterministicClassifier:
    """Classifies payloads against the GS1 prefix registry.

    Pure and synchronous: no I/O, same payload always yields the same guess.
    """

    name = "gs1_prefix"

    def __init__(self, registry: PrefixRegistry | None = None):
        self._registry = registry or get_registry()

    def classify(self, payload: str) -> DeterministicGuess:
        prefix_range = self._registry.lookup(payload)
        if prefix_range is None:
            logger.debug("No GS1 prefix match for %r", payload[:32])
            return DeterministicGuess.unmatched()

        logger.debug(
            "GS1 prefix %s matched %r -> %s",
            prefix_range.label,
            payload[:32],
            prefix_range.country_name,
        )
        return DeterministicGuess.from_range(prefix_range)


def classify(payload: str) -> DeterministicGuess:
    """Classify with the default registry."""
    return DeterministicClassifier().classify(payload)
