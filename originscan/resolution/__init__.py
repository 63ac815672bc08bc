"""Scan resolution: coordinator, history and presentation boundary."""

from .coordinator import PendingScan, ResolutionCoordinator, ScanUpdate
from .history import DEFAULT_MAX_SIZE, HistoryStore
from .presentation import (
    UNKNOWN_ORIGIN,
    HistoryEntryView,
    ResultView,
    display_country,
    display_glyph,
    display_product,
)
from .record import DecodeEvent, ScanRecord, ScanState

__all__ = [
    "DEFAULT_MAX_SIZE",
    "UNKNOWN_ORIGIN",
    "DecodeEvent",
    "HistoryEntryView",
    "HistoryStore",
    "PendingScan",
    "ResolutionCoordinator",
    "ResultView",
    "ScanRecord",
    "ScanState",
    "ScanUpdate",
    "display_country",
    "display_glyph",
    "display_product",
]
