"""Deterministic classification result."""

from __future__ import annotations

from dataclasses import dataclass

from originscan.registry import PrefixRange


@dataclass(frozen=True)
class DeterministicGuess:
    """Country guess derived from the barcode's GS1 prefix.

    ``matched`` is False when the payload is not GS1-numeric or its prefix is
    unassigned; the country fields are None in that case.
    """

    matched: bool
    country_name: str | None = None
    iso_code: str | None = None
    glyph: str | None = None

    @classmethod
    def unmatched(cls) -> DeterministicGuess:
        return cls(matched=False)

    @classmethod
    def from_range(cls, prefix_range: PrefixRange) -> DeterministicGuess:
        return cls(
            matched=True,
            country_name=prefix_range.country_name,
            iso_code=prefix_range.iso_code,
            glyph=prefix_range.glyph,
        )
