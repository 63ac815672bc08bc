"""GS1 prefix registry.

Maps the leading digits of a retail barcode to the country whose GS1
organisation issued it. Registration country is not necessarily the country
of manufacture.
"""

from .data import GS1_PREFIXES
from .glyphs import GLOBE_GLYPH, PACKAGE_GLYPH, iso_to_glyph
from .prefix_range import PrefixRange
from .registry import PrefixRegistry, get_registry

__all__ = [
    "GLOBE_GLYPH",
    "GS1_PREFIXES",
    "PACKAGE_GLYPH",
    "PrefixRange",
    "PrefixRegistry",
    "get_registry",
    "iso_to_glyph",
]
