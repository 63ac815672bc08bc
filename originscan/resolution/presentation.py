"""Merge policy and view models for the presentation boundary.

The inference guess is preferred for the displayed origin because it can
name the actual brand or maker; the GS1 guess is ground truth for where the
barcode was registered. Both stay on the record and both are shown.
"""

from __future__ import annotations

from dataclasses import dataclass

from originscan.inference import Confidence, InferenceGuess
from originscan.registry import GLOBE_GLYPH, PACKAGE_GLYPH, iso_to_glyph

from .record import ScanRecord, ScanState

UNKNOWN_ORIGIN = "Unknown Origin"
UNKNOWN_ITEM = "Unknown Item"
UNKNOWN_PRODUCT = "Unknown Product"
NO_DESCRIPTION = "No detailed description available."
PREVIEW_LENGTH = 15


def _inferred_country(guess: InferenceGuess | None) -> str | None:
    # The fallback's "Unknown" is a placeholder, not a country
    if guess is None or guess.is_fallback:
        return None
    country = guess.country_name.strip()
    return country or None


def _inferred_glyph(guess: InferenceGuess | None) -> str | None:
    if guess is None or guess.is_fallback or not guess.iso_code:
        return None
    try:
        return iso_to_glyph(guess.iso_code)
    except ValueError:
        return None


def display_country(record: ScanRecord) -> str:
    inferred = _inferred_country(record.inference_guess)
    if inferred:
        return inferred
    registered = record.deterministic_guess
    if registered and registered.matched and registered.country_name:
        return registered.country_name
    return UNKNOWN_ORIGIN


def display_glyph(record: ScanRecord, default: str = GLOBE_GLYPH) -> str:
    inferred = _inferred_glyph(record.inference_guess)
    if inferred:
        return inferred
    registered = record.deterministic_guess
    if registered and registered.matched and registered.glyph:
        return registered.glyph
    return default


def display_product(record: ScanRecord) -> str:
    guess = record.inference_guess
    if guess and guess.product_name:
        return guess.product_name
    registered = record.deterministic_guess
    if registered and registered.matched and registered.country_name:
        return registered.country_name
    return UNKNOWN_ITEM


def display_description(record: ScanRecord) -> str:
    guess = record.inference_guess
    if guess and guess.description:
        return guess.description
    return NO_DESCRIPTION


def payload_preview(raw_payload: str, length: int = PREVIEW_LENGTH) -> str:
    if len(raw_payload) > length:
        return f"{raw_payload[:length]}..."
    return raw_payload


@dataclass(frozen=True)
class ResultView:
    """Everything the result card shows for one scan."""

    raw_payload: str
    loading: bool
    country: str
    glyph: str
    product_name: str
    description: str
    confidence_label: str | None
    registration_note: str | None

    @classmethod
    def from_record(cls, record: ScanRecord) -> ResultView:
        guess = record.inference_guess
        confidence_label = None
        if guess is not None:
            confidence_label = (
                "High Confidence"
                if guess.confidence is Confidence.HIGH
                else "Medium/Low Confidence"
            )

        registration_note = None
        registered = record.deterministic_guess
        if registered and registered.matched:
            registration_note = (
                f"Barcode registered in {registered.country_name} {registered.glyph}."
            )

        product_name = UNKNOWN_PRODUCT
        if guess and guess.product_name:
            product_name = guess.product_name

        return cls(
            raw_payload=record.raw_payload,
            loading=record.state is not ScanState.RESOLVED,
            country=display_country(record),
            glyph=display_glyph(record),
            product_name=product_name,
            description=display_description(record),
            confidence_label=confidence_label,
            registration_note=registration_note,
        )


@dataclass(frozen=True)
class HistoryEntryView:
    """One row of the recent scans list."""

    scan_id: str
    glyph: str
    title: str
    payload_preview: str
    time_label: str

    @classmethod
    def from_record(cls, record: ScanRecord) -> HistoryEntryView:
        # Local wall-clock time, as shown on the device
        captured = record.captured_at.astimezone()
        return cls(
            scan_id=str(record.scan_id),
            glyph=display_glyph(record, default=PACKAGE_GLYPH),
            title=display_product(record),
            payload_preview=payload_preview(record.raw_payload),
            time_label=captured.strftime("%H:%M"),
        )
