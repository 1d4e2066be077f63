"""Shared constants for DOS text-mode cells."""

# Attribute bit-fields
BLINK_MASK = 0b10000000
BACKGROUND_MASK = 0b01110000
FOREGROUND_MASK = 0b00001111

# White on black, not blinking
DEFAULT_ATTRIBUTE = 0x07
# Space, used for attribute-only cells
DEFAULT_CHAR = 0x20
# '$' terminates strings for DOS INT 21h/09h
DOLLAR = 0x24

# Palette swatches, indexed the same way as the attribute fields
BACKGROUND_PALETTE: tuple[str, ...] = (
    "#000", "#00A", "#0A0", "#0AA", "#A00", "#A0A", "#AA0", "#AAA",
)

FOREGROUND_PALETTE: tuple[str, ...] = BACKGROUND_PALETTE + (
    "#555", "#55F", "#5F5", "#5FF", "#F55", "#F5A", "#FF5", "#FFF",
)

# CP437 to Unicode, sixteen code points per line (0x00-0xFF)
# Source: https://en.wikipedia.org/wiki/Code_page_437
_CP437_ROWS = (
    "\u0000☺☻♥♦♣♠•◘○◙♂♀♪♫☼",
    "►◄↕‼¶§▬↨↑↓→←∟↔▲▼",
    " !\"#$%&'()*+,-./",
    "0123456789:;<=>?",
    "@ABCDEFGHIJKLMNO",
    "PQRSTUVWXYZ[\\]^_",
    "`abcdefghijklmno",
    "pqrstuvwxyz{|}~⌂",
    "ÇüéâäàåçêëèïîìÄÅ",
    "ÉæÆôöòûùÿÖÜ¢£¥₧ƒ",
    "áíóúñÑªº¿⌐¬½¼¡«»",
    "░▒▓│┤╡╢╖╕╣║╗╝╜╛┐",
    "└┴┬├─┼╞╟╚╔╩╦╠═╬╧",
    "╨╤╥╙╘╒╓╫╪┘┌█▄▌▐▀",
    "αßΓπΣσµτΦΘΩδ∞φε∩",
    "≡±≥≤⌠⌡÷≈°∙·√ⁿ²■\u00a0",
)

CP437_GLYPHS: tuple[str, ...] = tuple("".join(_CP437_ROWS))

assert len(CP437_GLYPHS) == 256
