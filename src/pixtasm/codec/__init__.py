"""Character set conversion."""

from pixtasm.codec.cp437 import char_to_cp437, cp437_to_unicode, glyph, unicode_to_cp437

__all__ = ["char_to_cp437", "cp437_to_unicode", "glyph", "unicode_to_cp437"]
