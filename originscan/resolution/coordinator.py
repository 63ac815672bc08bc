"""Scan resolution coordinator.

This module provides the ResolutionCoordinator, which drives one scan at a
time through its two phases:

1. Classified: the GS1 prefix guess is computed synchronously, the record is
   inserted into history and published immediately.
2. Resolved: the inference oracle is awaited in a background task; the same
   record receives the inference guess, its history entry is replaced in
   place and it is published again.

Usage:
    coordinator = ResolutionCoordinator(oracle, HistoryStore())
    coordinator.subscribe(render)

    # Inside the UI's event loop, once per decode event
    pending = coordinator.submit("4006381333931", "EAN_13")
    record = await pending
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import Any

from originscan.classification import DeterministicClassifier
from originscan.inference import FALLBACK_GUESS, InferenceGuess, InferenceOracle

from .history import HistoryStore
from .record import DecodeEvent, ScanRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanUpdate:
    """A record published to the presentation boundary.

    ``is_current`` is False for results of scans the user has moved away
    from; those may refresh history views but not the result on display.
    """

    record: ScanRecord
    is_current: bool


Listener = Callable[[ScanUpdate], None]


@dataclass
class PendingScan:
    """Handle for a scan whose inference is in flight. Awaitable."""

    record: ScanRecord
    task: asyncio.Task[ScanRecord]

    @property
    def done(self) -> bool:
        return self.task.done()

    def __await__(self) -> Generator[Any, None, ScanRecord]:
        return self.task.__await__()


class ResolutionCoordinator:
    """Orchestrates classification, inference and history for each scan.

    Concurrent scans are allowed; each is keyed by its record identity.
    Only the oracle call suspends, everything else runs synchronously on the
    event loop thread.
    """

    def __init__(
        self,
        oracle: InferenceOracle,
        history: HistoryStore,
        classifier: DeterministicClassifier | None = None,
    ) -> None:
        self._oracle = oracle
        self._history = history
        self._classifier = classifier or DeterministicClassifier()
        self._listeners: list[Listener] = []
        self._pending: set[asyncio.Task[ScanRecord]] = set()
        self._current: ScanRecord | None = None

    @property
    def history(self) -> HistoryStore:
        return self._history

    @property
    def current(self) -> ScanRecord | None:
        """The record on display, partial or resolved."""
        return self._current

    @property
    def in_flight(self) -> int:
        return len(self._pending)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def submit(
        self,
        payload: str,
        symbology: str,
        captured_at_epoch_millis: int | None = None,
    ) -> PendingScan:
        """Start a scan. Must be called from a running event loop.

        Returns after the partial result has been published; the inference
        result arrives later through listeners and the returned handle.
        """
        return self.submit_event(
            DecodeEvent(raw_payload=payload, symbology=symbology),
            captured_at_epoch_millis=captured_at_epoch_millis,
        )

    def submit_event(
        self,
        event: DecodeEvent,
        captured_at_epoch_millis: int | None = None,
    ) -> PendingScan:
        loop = asyncio.get_running_loop()

        record = ScanRecord.from_event(event, captured_at_epoch_millis)
        record.mark_classified(self._classifier.classify(record.raw_payload))
        self._history.insert(record)
        self._current = record

        guess = record.deterministic_guess
        logger.info(
            "Scan %s (%s): GS1 %s",
            record.scan_id,
            record.symbology,
            guess.country_name if guess and guess.matched else "no match",
        )
        self._publish(record)

        record.mark_awaiting_inference()
        task = loop.create_task(
            self._resolve(record),
            name=f"originscan-infer-{record.scan_id}",
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return PendingScan(record=record, task=task)

    async def scan(self, payload: str, symbology: str) -> ScanRecord:
        """Run a scan to completion."""
        return await self.submit(payload, symbology)

    def show(self, record: ScanRecord) -> None:
        """Put a record (e.g. one opened from history) on display."""
        self._current = record

    def dismiss(self) -> None:
        """Close the result view. Outstanding results stop affecting it."""
        self._current = None

    async def drain(self) -> None:
        """Wait until every in-flight scan is resolved."""
        if self._pending:
            await asyncio.gather(*list(self._pending))

    async def _resolve(self, record: ScanRecord) -> ScanRecord:
        guess = await self._infer(record)
        record.resolve(guess)
        if not self._history.replace(record):
            logger.debug("Scan %s resolved after leaving history", record.scan_id)

        if self._current is not record:
            logger.debug("Scan %s resolved after the user moved on", record.scan_id)
        self._publish(record)
        return record

    async def _infer(self, record: ScanRecord) -> InferenceGuess:
        try:
            return await self._oracle.infer(record.raw_payload, record.symbology)
        except Exception:
            # Oracles must not raise; a broken one still cannot strand a scan
            logger.exception(
                "Oracle %s raised for scan %s",
                type(self._oracle).__name__,
                record.scan_id,
            )
            return FALLBACK_GUESS

    def _publish(self, record: ScanRecord) -> None:
        update = ScanUpdate(record=record, is_current=self._current is record)
        for listener in list(self._listeners):
            try:
                listener(update)
            except Exception:
                logger.exception("Scan listener %r failed", listener)
