"""Tests for the merge policy and view models."""

from datetime import datetime, timezone

import pytest
from originscan.classification import DeterministicGuess, classify
from originscan.inference import FALLBACK_GUESS, Confidence, InferenceGuess
from originscan.resolution import (
    HistoryEntryView,
    ResultView,
    ScanRecord,
    display_country,
    display_glyph,
    display_product,
)
from originscan.resolution.presentation import display_description, payload_preview


def _guess(**overrides: object) -> InferenceGuess:
    values = {
        "product_name": "STABILO BOSS Original",
        "country_name": "Czech Republic",
        "iso_code": "CZ",
        "confidence": Confidence.HIGH,
        "description": "Highlighter pen.",
        "is_product": True,
    }
    values.update(overrides)
    return InferenceGuess(**values)


def _record(
    payload: str = "4006381333931",
    inference: InferenceGuess | None = None,
    captured_at_epoch_millis: int = 0,
) -> ScanRecord:
    record = ScanRecord(
        raw_payload=payload,
        symbology="EAN_13",
        captured_at_epoch_millis=captured_at_epoch_millis,
    )
    record.mark_classified(classify(payload))
    if inference is not None:
        record.mark_awaiting_inference()
        record.resolve(inference)
    return record


class TestDisplayCountry:
    def test_inference_wins_over_registry(self) -> None:
        assert display_country(_record(inference=_guess())) == "Czech Republic"

    def test_registry_before_inference_arrives(self) -> None:
        assert display_country(_record()) == "Germany"

    def test_fallback_keeps_registry_country(self) -> None:
        assert display_country(_record(inference=FALLBACK_GUESS)) == "Germany"

    def test_empty_inference_country_keeps_registry_country(self) -> None:
        assert display_country(_record(inference=_guess(country_name="  "))) == "Germany"

    def test_unknown_origin(self) -> None:
        record = _record(payload="not a barcode", inference=FALLBACK_GUESS)
        assert display_country(record) == "Unknown Origin"

    def test_unknown_origin_without_any_guess(self) -> None:
        record = ScanRecord(raw_payload="x", symbology="QR_CODE")
        assert display_country(record) == "Unknown Origin"


class TestDisplayGlyph:
    def test_inference_code(self) -> None:
        assert display_glyph(_record(inference=_guess())) == "🇨🇿"

    def test_registry_glyph(self) -> None:
        assert display_glyph(_record()) == "🇩🇪"

    def test_fallback_code_is_not_a_flag(self) -> None:
        assert display_glyph(_record(inference=FALLBACK_GUESS)) == "🇩🇪"

    @pytest.mark.parametrize("iso_code", ["", "CZE", "1A"])
    def test_malformed_code_falls_through(self, iso_code: str) -> None:
        assert display_glyph(_record(inference=_guess(iso_code=iso_code))) == "🇩🇪"

    def test_globe_when_nothing_known(self) -> None:
        record = _record(payload="https://example.com", inference=FALLBACK_GUESS)
        assert display_glyph(record) == "🌍"

    def test_custom_default(self) -> None:
        record = _record(payload="https://example.com")
        assert display_glyph(record, default="?") == "?"


class TestDisplayProduct:
    def test_inference_product(self) -> None:
        assert display_product(_record(inference=_guess())) == "STABILO BOSS Original"

    def test_registry_country_while_loading(self) -> None:
        assert display_product(_record()) == "Germany"

    def test_fallback_product(self) -> None:
        assert display_product(_record(inference=FALLBACK_GUESS)) == "Unknown Item"

    def test_nothing_known(self) -> None:
        assert display_product(_record(payload="abc")) == "Unknown Item"

    def test_description(self) -> None:
        assert display_description(_record(inference=_guess())) == "Highlighter pen."
        assert display_description(_record()) == "No detailed description available."


class TestResultView:
    def test_loading(self) -> None:
        view = ResultView.from_record(_record())

        assert view.loading
        assert view.country == "Germany"
        assert view.glyph == "🇩🇪"
        assert view.product_name == "Unknown Product"
        assert view.confidence_label is None
        assert view.registration_note == "Barcode registered in Germany 🇩🇪."

    def test_resolved(self) -> None:
        view = ResultView.from_record(_record(inference=_guess()))

        assert not view.loading
        assert view.raw_payload == "4006381333931"
        assert view.country == "Czech Republic"
        assert view.product_name == "STABILO BOSS Original"
        assert view.confidence_label == "High Confidence"
        assert view.registration_note == "Barcode registered in Germany 🇩🇪."

    @pytest.mark.parametrize("confidence", [Confidence.MEDIUM, Confidence.LOW])
    def test_lower_confidence_label(self, confidence: Confidence) -> None:
        view = ResultView.from_record(_record(inference=_guess(confidence=confidence)))
        assert view.confidence_label == "Medium/Low Confidence"

    def test_no_registration_note_without_match(self) -> None:
        view = ResultView.from_record(_record(payload="https://example.com", inference=_guess()))
        assert view.registration_note is None


class TestHistoryEntryView:
    def test_fields(self) -> None:
        captured = int(datetime(2024, 5, 1, 9, 7).timestamp() * 1000)
        record = _record(inference=_guess(), captured_at_epoch_millis=captured)

        view = HistoryEntryView.from_record(record)

        assert view.scan_id == str(record.scan_id)
        assert view.glyph == "🇨🇿"
        assert view.title == "STABILO BOSS Original"
        assert view.payload_preview == "4006381333931"
        assert view.time_label == "09:07"

    def test_time_label_is_local_time_of_capture(self) -> None:
        captured = datetime(2024, 5, 1, 23, 45, tzinfo=timezone.utc)
        record = _record(captured_at_epoch_millis=int(captured.timestamp() * 1000))

        view = HistoryEntryView.from_record(record)

        assert view.time_label == captured.astimezone().strftime("%H:%M")
        assert view.time_label == record.captured_at.astimezone().strftime("%H:%M")

    def test_package_glyph_when_nothing_known(self) -> None:
        record = _record(payload="https://example.com/item/42", inference=FALLBACK_GUESS)
        view = HistoryEntryView.from_record(record)

        assert view.glyph == "📦"
        assert view.payload_preview == "https://example..."

    def test_registry_glyph(self) -> None:
        assert HistoryEntryView.from_record(_record()).glyph == "🇩🇪"


class TestPayloadPreview:
    def test_short_payload_unchanged(self) -> None:
        assert payload_preview("12345") == "12345"

    def test_exactly_at_limit(self) -> None:
        assert payload_preview("a" * 15) == "a" * 15

    def test_truncated(self) -> None:
        assert payload_preview("a" * 16) == "a" * 15 + "..."


def test_unmatched_guess_has_no_note() -> None:
    record = ScanRecord(raw_payload="123", symbology="EAN_13")
    record.mark_classified(DeterministicGuess.unmatched())
    assert ResultView.from_record(record).registration_note is None
