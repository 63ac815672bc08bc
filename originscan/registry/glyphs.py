"""Country code to flag glyph conversion."""

# Distance between an uppercase ASCII letter and its regional indicator symbol
REGIONAL_INDICATOR_OFFSET = 127397

GLOBE_GLYPH = "\U0001F30D"  # 🌍
PACKAGE_GLYPH = "\U0001F4E6"  # 📦


def iso_to_glyph(iso_code: str) -> str:
    """Convert an ISO 3166-1 alpha-2 code into its flag glyph.

    Each letter maps to the regional indicator symbol at
    ``ord(letter) + 127397``; the pair renders as a flag. Lowercase input is
    accepted.

    Raises
    ------
    ValueError
        If the code is not exactly two ASCII letters.
    """
    code = iso_code.upper()
    if len(code) != 2 or not code.isascii() or not code.isalpha():
        msg = f"Expected a two-letter ISO country code, got {iso_code!r}"
        raise ValueError(msg)
    return "".join(chr(ord(char) + REGIONAL_INDICATOR_OFFSET) for char in code)
