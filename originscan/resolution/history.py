"""Bounded scan history."""

from __future__ import annotations

import logging
from collections import deque
from uuid import UUID

from .record import ScanRecord

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 50


class HistoryStore:
    """Most-recent-first record of scans, capped at ``max_size``.

    Eviction is pure recency: the oldest records are dropped first. Owned by
    one session and mutated only from its event loop thread.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE):
        if max_size < 1:
            msg = f"max_size must be at least 1, got {max_size}"
            raise ValueError(msg)
        self._records: deque[ScanRecord] = deque(maxlen=max_size)

    @property
    def max_size(self) -> int:
        return self._records.maxlen or DEFAULT_MAX_SIZE

    def __len__(self) -> int:
        return len(self._records)

    def insert(self, record: ScanRecord) -> None:
        """Add a record at the front, or replace it in place if already held."""
        if self.replace(record):
            return

        if len(self._records) == self.max_size:
            evicted = self._records[-1]
            logger.debug("History full, evicting scan %s", evicted.scan_id)
        # deque(maxlen) drops from the right, which holds the oldest record
        self._records.appendleft(record)

    def replace(self, record: ScanRecord) -> bool:
        """Update a held record in place. Records no longer held stay evicted."""
        for i, existing in enumerate(self._records):
            if existing is record or existing.scan_id == record.scan_id:
                self._records[i] = record
                return True
        return False

    def list(self) -> list[ScanRecord]:
        """Snapshot of the history, newest first."""
        return list(self._records)

    def find(self, scan_id: UUID) -> ScanRecord | None:
        return next((r for r in self._records if r.scan_id == scan_id), None)

    def clear(self) -> None:
        self._records.clear()
