"""Render a grid to plain text (strip colors)."""

from pixtasm.codec.cp437 import glyph
from pixtasm.core.grid import Grid


class TextRenderer:
    """Render a Grid to plain text without any styling."""

    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace

    def render(self, grid: Grid) -> str:
        """Render grid to text; cells without a character become spaces."""
        lines: list[str] = []

        for row in grid.iter_rows():
            line = ''.join(
                ' ' if cell is None or cell.char_code is None else glyph(cell.char_code)
                for cell in row
            )
            if not self.preserve_whitespace:
                line = line.rstrip()
            lines.append(line)

        result = '\n'.join(lines)

        if not self.preserve_whitespace:
            # Remove trailing empty lines
            result = result.rstrip()

        return result
