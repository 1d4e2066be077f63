"""Sprite tables: one letter per cell, keyed by background colour."""

from typing import Any, Sequence

from pixtasm.core.attribute import decode
from pixtasm.core.grid import Grid, to_cell

# K=Black, B=Blue, G=Green, C=Cyan, R=Red, M=Magenta, Y=Yellow, W=White
SPRITE_LETTERS = "KBGCRMYW"
PLACEHOLDER = "."


def _quote(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


def sprite_row(cells: Sequence[Any]) -> str:
    """Letters for one row; cells without an attribute become the placeholder."""
    letters = []
    for value in cells:
        cell = to_cell(value)
        if cell is None or cell.attribute is None:
            letters.append(PLACEHOLDER)
        else:
            letters.append(SPRITE_LETTERS[decode(cell.attribute).background])
    return "".join(letters)


def generate_sprite_db(grid: Grid | Sequence[Sequence[Any]], label: str = "SPRITE") -> str:
    """
    Render the grid as DB lines.

    Example:
        SPRITE  DB '....KKK....|'
                DB '..WWWWW....|'
                DB '...........$'

    Every row but the last ends in '|', the last in '$'. Only the first
    line carries the label. Raw nested rows are accepted as well as a
    Grid, so an empty list yields an empty string.
    """
    rows = list(grid.iter_rows()) if isinstance(grid, Grid) else list(grid)

    lines: list[str] = []
    for y, cells in enumerate(rows):
        terminator = "$" if y == len(rows) - 1 else "|"
        literal = _quote(sprite_row(cells) + terminator)
        if y == 0:
            lines.append(f"{label}\tDB {literal}")
        else:
            lines.append(f"\t\tDB {literal}")

    return "\n".join(lines)
