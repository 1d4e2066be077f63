"""Attribute - the 8-bit colour/blink byte of a DOS text-mode cell."""

from dataclasses import dataclass

from pixtasm.core.constants import (
    BACKGROUND_MASK,
    BACKGROUND_PALETTE,
    BLINK_MASK,
    FOREGROUND_MASK,
    FOREGROUND_PALETTE,
)


@dataclass(frozen=True, slots=True)
class Attribute:
    """
    Decoded form of an attribute byte.

    Layout (most significant bit first):
        bit 7     blink
        bits 6-4  background index (0-7)
        bits 3-0  foreground index (0-15)
    """
    background: int = 0
    foreground: int = 7
    blink: bool = False

    @classmethod
    def from_byte(cls, value: int) -> "Attribute":
        """Decode an attribute byte. Every byte value is valid."""
        return cls(
            background=(value & BACKGROUND_MASK) >> 4,
            foreground=value & FOREGROUND_MASK,
            blink=(value & BLINK_MASK) != 0,
        )

    def to_byte(self) -> int:
        """Pack back into a single byte."""
        return encode(self.background, self.foreground, self.blink)

    @property
    def background_color(self) -> str:
        """Hex swatch for the background index."""
        return BACKGROUND_PALETTE[self.background]

    @property
    def foreground_color(self) -> str:
        """Hex swatch for the foreground index."""
        return FOREGROUND_PALETTE[self.foreground]


def encode(bg_index: int, fg_index: int, blink: bool = False) -> int:
    """
    Pack palette indices and the blink flag into an attribute byte.

    Indices are expected to be in range already (bg 0-7, fg 0-15); they
    are masked so the result always fits in a byte.
    """
    value = BLINK_MASK if blink else 0
    value |= (bg_index << 4) & BACKGROUND_MASK
    value |= fg_index & FOREGROUND_MASK
    return value


def decode(value: int) -> Attribute:
    """Unpack an attribute byte."""
    return Attribute.from_byte(value)
