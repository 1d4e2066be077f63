"""Plain-text import/export (clipboard copy and paste of ASCII art)."""

from pixtasm.codec.cp437 import char_to_cp437
from pixtasm.core.attribute import encode
from pixtasm.core.cell import Cell
from pixtasm.core.grid import Grid
from pixtasm.render.text import TextRenderer


def export_text(grid: Grid) -> str:
    """
    Render the grid's characters as text.

    Cells without a character become spaces; trailing whitespace is
    trimmed from each line and from the end of the text.
    """
    return TextRenderer().render(grid)


def paste_text(
    grid: Grid,
    text: str,
    row: int = 0,
    col: int = 0,
    bg_index: int = 0,
    fg_index: int = 7,
) -> None:
    """
    Write text into the grid starting at (row, col), clipped to its bounds.

    Every pasted character gets the attribute built from the given
    palette indices.
    """
    attribute = encode(bg_index, fg_index)
    for y, line in enumerate(text.splitlines()):
        target_row = row + y
        if target_row >= grid.rows:
            break
        for x, char in enumerate(line):
            target_col = col + x
            if target_col >= grid.cols:
                break
            grid.set(target_row, target_col, Cell(char_to_cp437(char), attribute))


def import_text(
    text: str,
    rows: int | None = None,
    cols: int | None = None,
    bg_index: int = 0,
    fg_index: int = 7,
) -> Grid:
    """Create a grid sized to the text (or to rows/cols) holding the pasted text."""
    lines = text.splitlines() or ['']
    grid = Grid(
        rows or len(lines),
        cols or max(1, max(len(line) for line in lines)),
    )
    paste_text(grid, text, bg_index=bg_index, fg_index=fg_index)
    return grid
