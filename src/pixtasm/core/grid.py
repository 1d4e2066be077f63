"""Grid - rectangular matrix of cells."""

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from pixtasm.core.cell import Cell
from pixtasm.errors import GridShapeError


def to_cell(value: Any) -> Cell | None:
    """
    Coerce one grid entry to a Cell, or None when it is blank.

    Accepts None, a Cell, a (char_code, attribute) pair or the editor's
    {"charCode": ..., "attribute": ...} mapping.
    """
    if value is None:
        return None
    if isinstance(value, Cell):
        cell = value
    elif isinstance(value, dict):
        cell = Cell(value.get("charCode"), value.get("attribute"))
    elif isinstance(value, (tuple, list)) and len(value) == 2:
        cell = Cell(value[0], value[1])
    else:
        raise TypeError(f"Cannot interpret {value!r} as a cell")
    return None if cell.is_empty else cell


@dataclass
class Grid:
    """
    A rows x cols matrix of optional Cells.

    Blank positions are stored as None; an explicit empty Cell is
    normalized to None on the way in, so consumers only ever see one
    representation of "nothing here".
    """
    rows: int
    cols: int
    _buffer: list[list[Cell | None]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise GridShapeError(f"Grid must be at least 1x1, got {self.rows}x{self.cols}")
        if not self._buffer:
            self._buffer = [[None] * self.cols for _ in range(self.rows)]
        else:
            self._check_shape(self._buffer, self.rows, self.cols)

    @staticmethod
    def _check_shape(buffer: list[list[Any]], rows: int, cols: int) -> None:
        if len(buffer) != rows:
            raise GridShapeError(f"Expected {rows} rows, got {len(buffer)}")
        for y, row in enumerate(buffer):
            if len(row) != cols:
                raise GridShapeError(
                    f"Row {y} has {len(row)} cells, expected {cols}"
                )

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> "Grid":
        """Build a grid from nested rows of cell-like values."""
        buffer = [[to_cell(value) for value in row] for row in rows]
        if not buffer or not buffer[0]:
            raise GridShapeError("Grid must have at least one row and one column")
        return cls(rows=len(buffer), cols=len(buffer[0]), _buffer=buffer)

    def _check_bounds(self, row: int, col: int) -> None:
        if not 0 <= row < self.rows:
            raise IndexError(f"row={row} out of bounds (rows={self.rows})")
        if not 0 <= col < self.cols:
            raise IndexError(f"col={col} out of bounds (cols={self.cols})")

    def get(self, row: int, col: int) -> Cell | None:
        """Get the cell at (row, col), None if blank."""
        self._check_bounds(row, col)
        return self._buffer[row][col]

    def set(self, row: int, col: int, cell: Any) -> None:
        """Set the cell at (row, col)."""
        self._check_bounds(row, col)
        self._buffer[row][col] = to_cell(cell)

    def __getitem__(self, pos: tuple[int, int]) -> Cell | None:
        """Get cell using indexing: grid[row, col]."""
        row, col = pos
        return self.get(row, col)

    def __setitem__(self, pos: tuple[int, int], cell: Any) -> None:
        """Set cell using indexing: grid[row, col] = cell."""
        row, col = pos
        self.set(row, col, cell)

    def iter_rows(self) -> Iterator[list[Cell | None]]:
        """Iterate over rows (each a list of length ``cols``)."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over non-blank cells as (row, col, cell) tuples."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                if cell is not None:
                    yield y, x, cell

    def is_blank(self) -> bool:
        return next(self.cells(), None) is None

    def snapshot(self) -> "Grid":
        """Return an independent copy; cells are immutable so rows are shallow-copied."""
        return Grid(self.rows, self.cols, [list(row) for row in self._buffer])

    def resize(self, rows: int, cols: int) -> "Grid":
        """Return a new grid of the given size keeping the overlapping content."""
        resized = Grid(rows, cols)
        for y in range(min(rows, self.rows)):
            for x in range(min(cols, self.cols)):
                resized._buffer[y][x] = self._buffer[y][x]
        return resized

    def fill_rect(self, top: int, left: int, height: int, width: int, cell: Any) -> None:
        """Fill a rectangle, clipped to the grid, with one cell value."""
        value = to_cell(cell)
        for y in range(max(top, 0), min(top + height, self.rows)):
            for x in range(max(left, 0), min(left + width, self.cols)):
                self._buffer[y][x] = value

    def clear_rect(self, top: int, left: int, height: int, width: int) -> None:
        self.fill_rect(top, left, height, width, None)

    def crop(self, top: int, left: int, bottom: int, right: int) -> "Grid":
        """
        Return the inclusive region [top..bottom] x [left..right].

        Corners may be given in either order, as a drag selection would
        produce them.
        """
        top, bottom = sorted((top, bottom))
        left, right = sorted((left, right))
        self._check_bounds(top, left)
        self._check_bounds(bottom, right)
        return Grid(
            bottom - top + 1,
            right - left + 1,
            [list(row[left:right + 1]) for row in self._buffer[top:bottom + 1]],
        )
