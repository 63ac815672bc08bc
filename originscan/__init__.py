"""OriginScan: country-of-origin resolution for scanned product codes."""

__version__ = "0.1.0"

from originscan.classification import DeterministicClassifier, DeterministicGuess, classify
from originscan.inference import FALLBACK_GUESS, Confidence, InferenceGuess, InferenceOracle
from originscan.registry import PrefixRange, PrefixRegistry, get_registry, iso_to_glyph
from originscan.resolution import (
    DecodeEvent,
    HistoryStore,
    ResolutionCoordinator,
    ScanRecord,
    ScanState,
)
from originscan.session import ScanSession

__all__ = [
    "FALLBACK_GUESS",
    "Confidence",
    "DecodeEvent",
    "DeterministicClassifier",
    "DeterministicGuess",
    "HistoryStore",
    "InferenceGuess",
    "InferenceOracle",
    "PrefixRange",
    "PrefixRegistry",
    "ResolutionCoordinator",
    "ScanRecord",
    "ScanSession",
    "ScanState",
    "__version__",
    "classify",
    "get_registry",
    "iso_to_glyph",
]
