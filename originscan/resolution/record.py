"""Scan record and its lifecycle."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from originscan.classification import DeterministicGuess
from originscan.exceptions import InvalidScanTransition
from originscan.inference import InferenceGuess

UNKNOWN_SYMBOLOGY = "UNKNOWN"


class ScanState(str, Enum):
    DECODED = "decoded"
    CLASSIFIED = "classified"
    AWAITING_INFERENCE = "awaiting_inference"
    RESOLVED = "resolved"


_NEXT_STATE = {
    ScanState.DECODED: ScanState.CLASSIFIED,
    ScanState.CLASSIFIED: ScanState.AWAITING_INFERENCE,
    ScanState.AWAITING_INFERENCE: ScanState.RESOLVED,
}


def epoch_millis() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class DecodeEvent:
    """One successful decode reported by the camera decoder."""

    raw_payload: str
    symbology: str = UNKNOWN_SYMBOLOGY

    def __post_init__(self) -> None:
        if not self.symbology:
            object.__setattr__(self, "symbology", UNKNOWN_SYMBOLOGY)


@dataclass(eq=False)
class ScanRecord:
    """The unit of history.

    Records compare by identity: the in-flight record is updated in place as
    it moves ``decoded -> classified -> awaiting_inference -> resolved`` and
    is terminal once resolved.
    """

    raw_payload: str
    symbology: str
    captured_at_epoch_millis: int = field(default_factory=epoch_millis)
    deterministic_guess: DeterministicGuess | None = None
    inference_guess: InferenceGuess | None = None
    state: ScanState = ScanState.DECODED
    scan_id: UUID = field(default_factory=uuid4)

    @classmethod
    def from_event(
        cls,
        event: DecodeEvent,
        captured_at_epoch_millis: int | None = None,
    ) -> ScanRecord:
        return cls(
            raw_payload=event.raw_payload,
            symbology=event.symbology,
            captured_at_epoch_millis=(
                captured_at_epoch_millis
                if captured_at_epoch_millis is not None
                else epoch_millis()
            ),
        )

    @property
    def is_resolved(self) -> bool:
        return self.state is ScanState.RESOLVED

    @property
    def captured_at(self) -> datetime:
        return datetime.fromtimestamp(self.captured_at_epoch_millis / 1000, tz=timezone.utc)

    def mark_classified(self, guess: DeterministicGuess) -> None:
        self._advance(ScanState.CLASSIFIED)
        self.deterministic_guess = guess

    def mark_awaiting_inference(self) -> None:
        self._advance(ScanState.AWAITING_INFERENCE)

    def resolve(self, guess: InferenceGuess) -> None:
        self._advance(ScanState.RESOLVED)
        self.inference_guess = guess

    def _advance(self, target: ScanState) -> None:
        if _NEXT_STATE.get(self.state) is not target:
            raise InvalidScanTransition(self.scan_id, self.state.value, target.value)
        self.state = target
