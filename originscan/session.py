"""Per-session wiring of the scanner core.

A UI shell creates one ScanSession when it starts and feeds it decode events.
The session owns the history store; nothing is shared between sessions and
nothing outlives the process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from originscan.classification import DeterministicClassifier
from originscan.config import Settings, get_settings
from originscan.inference import InferenceOracle, create_oracle
from originscan.log import log_settings
from originscan.resolution import (
    DecodeEvent,
    HistoryEntryView,
    HistoryStore,
    PendingScan,
    ResolutionCoordinator,
    ResultView,
)

logger = logging.getLogger(__name__)


@dataclass
class ScanSession:
    """Scanner state for one UI session."""

    coordinator: ResolutionCoordinator
    history: HistoryStore
    oracle: InferenceOracle

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        oracle: InferenceOracle | None = None,
    ) -> ScanSession:
        """Build a session from settings.

        ``oracle`` overrides the configured provider (e.g. in tests).
        """
        settings = settings or get_settings()
        log_settings(settings)

        oracle = oracle or create_oracle(settings)
        history = HistoryStore(max_size=settings.history_max_size)
        coordinator = ResolutionCoordinator(
            oracle=oracle,
            history=history,
            classifier=DeterministicClassifier(),
        )
        return cls(coordinator=coordinator, history=history, oracle=oracle)

    def handle_decode(self, event: DecodeEvent) -> PendingScan:
        """Start resolving a decode event. Every event is a new scan."""
        return self.coordinator.submit_event(event)

    def current_view(self) -> ResultView | None:
        record = self.coordinator.current
        return ResultView.from_record(record) if record else None

    def history_views(self) -> list[HistoryEntryView]:
        return [HistoryEntryView.from_record(r) for r in self.history.list()]

    def open_history_item(self, scan_id: UUID) -> ResultView | None:
        record = self.history.find(scan_id)
        if record is None:
            logger.debug("Scan %s is no longer in history", scan_id)
            return None
        self.coordinator.show(record)
        return ResultView.from_record(record)

    def close_result(self) -> None:
        self.coordinator.dismiss()

    async def close(self) -> None:
        """Let outstanding scans finish so their history entries resolve."""
        if self.coordinator.in_flight:
            logger.info("Waiting for %d scans in flight", self.coordinator.in_flight)
        await self.coordinator.drain()
