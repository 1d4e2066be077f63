"""Cell - one character position of the text-mode grid."""

from dataclasses import dataclass

from pixtasm.core.attribute import Attribute
from pixtasm.core.constants import DEFAULT_ATTRIBUTE, DEFAULT_CHAR


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A grid cell holding an optional CP437 character code and an
    optional attribute byte.

    A cell with neither field set is blank and is treated exactly like
    a grid position with no cell at all.
    """
    char_code: int | None = None
    attribute: int | None = None

    def __post_init__(self) -> None:
        if self.char_code is not None and not 0 <= self.char_code <= 255:
            raise ValueError(f"Character code must be 0-255, got {self.char_code}")
        if self.attribute is not None and not 0 <= self.attribute <= 255:
            raise ValueError(f"Attribute must be 0-255, got {self.attribute}")

    @property
    def is_empty(self) -> bool:
        """True if neither character nor attribute is set."""
        return self.char_code is None and self.attribute is None

    @property
    def effective_char(self) -> int:
        """Character code, or space for attribute-only cells."""
        return DEFAULT_CHAR if self.char_code is None else self.char_code

    @property
    def effective_attribute(self) -> int:
        """Attribute byte, or white-on-black for character-only cells."""
        return DEFAULT_ATTRIBUTE if self.attribute is None else self.attribute

    def decoded(self) -> Attribute:
        """Decode the effective attribute."""
        return Attribute.from_byte(self.effective_attribute)

