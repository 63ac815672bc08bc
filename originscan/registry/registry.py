"""GS1 prefix registry lookup."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache

from originscan.exceptions import RegistryError

from .data import GS1_PREFIXES
from .glyphs import iso_to_glyph
from .prefix_range import PrefixRange

logger = logging.getLogger(__name__)


class PrefixRegistry:
    """Immutable table of prefix ranges with unambiguous lookup.

    Ranges of different widths may coexist. Lookups try the longest width
    first and fall back to shorter ones; within one width at most one range
    can match because overlapping ranges are rejected at construction.
    """

    def __init__(self, ranges: Iterable[PrefixRange]):
        by_width: dict[int, list[PrefixRange]] = {}
        for prefix_range in ranges:
            by_width.setdefault(prefix_range.width, []).append(prefix_range)

        for width, width_ranges in by_width.items():
            width_ranges.sort(key=lambda r: r.range_start)
            _check_disjoint(width, width_ranges)

        self._by_width = {
            width: tuple(by_width[width]) for width in sorted(by_width, reverse=True)
        }

    @classmethod
    def from_rows(cls, rows: Iterable[tuple[int, int, int, str, str]]) -> PrefixRegistry:
        """Build a registry from ``(width, start, end, country, iso)`` rows."""
        return cls(
            PrefixRange(
                range_start=start,
                range_end=end,
                country_name=country,
                iso_code=iso_code,
                glyph=iso_to_glyph(iso_code),
                width=width,
            )
            for width, start, end, country, iso_code in rows
        )

    @property
    def widths(self) -> tuple[int, ...]:
        """Prefix widths in lookup order (longest first)."""
        return tuple(self._by_width)

    @property
    def ranges(self) -> tuple[PrefixRange, ...]:
        return tuple(r for width_ranges in self._by_width.values() for r in width_ranges)

    def __len__(self) -> int:
        return sum(len(width_ranges) for width_ranges in self._by_width.values())

    def lookup(self, payload: str) -> PrefixRange | None:
        """Find the range covering the payload's leading digits.

        Returns None for payloads that are not purely decimal digits and for
        prefixes no organisation owns.
        """
        if not payload or not (payload.isascii() and payload.isdigit()):
            return None

        for width, width_ranges in self._by_width.items():
            if len(payload) < width:
                continue
            prefix = int(payload[:width])
            for prefix_range in width_ranges:
                if prefix_range.range_start > prefix:
                    break
                if prefix_range.contains(prefix):
                    return prefix_range

        return None


def _check_disjoint(width: int, sorted_ranges: list[PrefixRange]) -> None:
    for previous, current in zip(sorted_ranges, sorted_ranges[1:]):
        if previous.overlaps(current):
            msg = (
                f"Overlapping {width}-digit ranges: {previous.label} "
                f"({previous.country_name}) and {current.label} "
                f"({current.country_name})"
            )
            raise RegistryError(msg)


@lru_cache
def get_registry() -> PrefixRegistry:
    """Get the process-wide GS1 registry (built once)."""
    registry = PrefixRegistry.from_rows(GS1_PREFIXES)
    logger.debug(
        "Loaded GS1 registry: %d ranges, widths=%s", len(registry), registry.widths
    )
    return registry
