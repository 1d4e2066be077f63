"""
Split grid rows into runs that the TASM emitter can draw in one go.

Two kinds of run are produced:

- TEXT: consecutive cells that all have a character (other than '$')
  and share one attribute. Drawn with DOS INT 21h/09h from a
  '$'-terminated string.
- BLOCK: consecutive cells with the same character and attribute.
  Drawn with BIOS INT 10h/09h and a repeat count. Covers attribute-only
  cells and '$' characters, which a DOS string cannot contain.

Blank cells are skipped and never belong to a run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

from pixtasm.core.cell import Cell
from pixtasm.core.constants import DOLLAR
from pixtasm.core.grid import Grid


class SegmentKind(Enum):
    """How a segment is drawn."""
    TEXT = "text"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of cells within one row."""
    kind: SegmentKind
    row: int
    col: int
    chars: tuple[int, ...]
    attribute: int

    @property
    def length(self) -> int:
        return len(self.chars)

    @property
    def end_col(self) -> int:
        """Column just past the last cell of the run."""
        return self.col + len(self.chars)

    @property
    def char_code(self) -> int:
        """The repeated character of a BLOCK segment."""
        return self.chars[0]


def _is_blank(cell: Cell | None) -> bool:
    return cell is None or cell.is_empty


def _starts_text(cell: Cell) -> bool:
    return cell.char_code is not None and cell.char_code != DOLLAR


def group_row(cells: Sequence[Cell | None], row: int = 0) -> list[Segment]:
    """
    Partition one row into TEXT and BLOCK segments, left to right.

    At every position a TEXT segment is tried first, so a lone character
    between differently coloured neighbours still becomes a one-character
    string rather than joining a block.
    """
    segments: list[Segment] = []
    width = len(cells)
    col = 0

    while col < width:
        cell = cells[col]
        if _is_blank(cell):
            col += 1
            continue
        assert cell is not None
        attribute = cell.effective_attribute
        end = col + 1

        if _starts_text(cell):
            while end < width:
                nxt = cells[end]
                if _is_blank(nxt) or not _starts_text(nxt):
                    break
                if nxt.effective_attribute != attribute:
                    break
                end += 1
            chars = tuple(c.char_code for c in cells[col:end])
            segments.append(Segment(SegmentKind.TEXT, row, col, chars, attribute))
        else:
            key = cell.effective_char
            while end < width:
                nxt = cells[end]
                if _is_blank(nxt):
                    break
                if nxt.effective_char != key or nxt.effective_attribute != attribute:
                    break
                end += 1
            segments.append(
                Segment(SegmentKind.BLOCK, row, col, (key,) * (end - col), attribute)
            )

        col = end

    return segments


def group_grid(grid: Grid) -> Iterator[Segment]:
    """Yield the segments of every row in row-major order."""
    for y, row in enumerate(grid.iter_rows()):
        yield from group_row(row, y)
