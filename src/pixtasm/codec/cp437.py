"""CP437 (IBM PC) character set conversion."""

from pixtasm.core.constants import CP437_GLYPHS


# Build reverse mapping
UNICODE_TO_CP437: dict[str, int] = {
    char: idx for idx, char in enumerate(CP437_GLYPHS)
}


def glyph(code: int) -> str:
    """Displayable glyph for a CP437 character code."""
    return CP437_GLYPHS[code & 0xFF]


def cp437_to_unicode(data: bytes) -> str:
    """Convert CP437-encoded bytes to Unicode string."""
    return ''.join(CP437_GLYPHS[b] for b in data)


def unicode_to_cp437(text: str) -> bytes:
    """Convert Unicode string to CP437 bytes, '?' for unmappable chars."""
    return bytes(char_to_cp437(char) for char in text)


def char_to_cp437(char: str) -> int:
    """Map one Unicode character to a CP437 code."""
    if char in UNICODE_TO_CP437:
        return UNICODE_TO_CP437[char]
    if ord(char) < 128:
        # Control characters render as symbols in the table
        return ord(char)
    return 0x3F
