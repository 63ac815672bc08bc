"""Prefix range value object."""

from dataclasses import dataclass

from originscan.exceptions import RegistryError


@dataclass(frozen=True)
class PrefixRange:
    """A block of GS1 prefixes allocated to one issuing organisation.

    ``range_start`` and ``range_end`` are inclusive bounds over the first
    ``width`` digits of a code.
    """

    range_start: int
    range_end: int
    country_name: str
    iso_code: str
    glyph: str
    width: int = 3

    def __post_init__(self) -> None:
        if self.width < 1:
            msg = f"Prefix width must be positive, got {self.width}"
            raise RegistryError(msg)
        if not 0 <= self.range_start <= self.range_end < 10**self.width:
            msg = (
                f"Invalid {self.width}-digit range "
                f"{self.range_start}-{self.range_end} for {self.country_name}"
            )
            raise RegistryError(msg)

    def contains(self, prefix: int) -> bool:
        return self.range_start <= prefix <= self.range_end

    def overlaps(self, other: "PrefixRange") -> bool:
        return (
            self.width == other.width
            and self.range_start <= other.range_end
            and other.range_start <= self.range_end
        )

    @property
    def label(self) -> str:
        """Human readable bounds, zero padded (e.g. ``"400-440"``)."""
        start = str(self.range_start).zfill(self.width)
        if self.range_start == self.range_end:
            return start
        return f"{start}-{str(self.range_end).zfill(self.width)}"
