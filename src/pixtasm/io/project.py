"""
Project files: a named grid serialized as JSON.

Three cell layouts exist in the wild and all are read back:

- full grid: ``[[{"charCode": 65, "attribute": 7} | null, ...], ...]``
- cell tuples: ``[[row, col, charCode, attribute], ...]`` (blank cells omitted)
- packed: ``[row << 24 | col << 16 | charCode << 8 | attribute, ...]``

Top-level keys come in a long form (``name``/``rows``/``cols``/``gridData``)
and a short form (``n``/``r``/``c``/``d``) used by share links.
"""

import json
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from pixtasm.core.cell import Cell
from pixtasm.core.grid import Grid
from pixtasm.errors import GridShapeError, ProjectFormatError

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Untitled Project"


class PayloadFormat(Enum):
    """Layout of the cell data in a project payload."""
    FULL_GRID = "full"
    CELL_TUPLES = "tuples"
    PACKED = "packed"


@dataclass
class Project:
    """A grid plus the name and save time shown in the editor's load dialog."""
    grid: Grid
    name: str = DEFAULT_NAME
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))


def pack_cell(row: int, col: int, cell: Cell) -> int:
    """Pack a cell and its position into one 32-bit integer."""
    if not (0 <= row <= 0xFF and 0 <= col <= 0xFF):
        raise ProjectFormatError(f"Cell position ({row}, {col}) does not fit the packed format")
    return (row << 24) | (col << 16) | ((cell.char_code or 0) << 8) | (cell.attribute or 0)


def unpack_cell(packed: int) -> tuple[int, int, Cell]:
    """
    Inverse of pack_cell.

    A zero character or attribute byte reads back as unset, so
    black-on-black and NUL do not survive the packed format.
    """
    row = (packed >> 24) & 0xFF
    col = (packed >> 16) & 0xFF
    char_code = (packed >> 8) & 0xFF
    attribute = packed & 0xFF
    return row, col, Cell(char_code or None, attribute or None)


def sniff_format(data: Any) -> PayloadFormat:
    """Work out the cell layout from the shape of the first element."""
    if not isinstance(data, list):
        raise ProjectFormatError(f"Cell data must be a list, got {type(data).__name__}")
    if not data:
        return PayloadFormat.FULL_GRID

    first = data[0]
    if isinstance(first, bool):
        raise ProjectFormatError("Cell data contains booleans")
    if isinstance(first, int):
        return PayloadFormat.PACKED
    if isinstance(first, list):
        # Full grid rows hold dicts or nulls, never bare position ints
        if len(first) == 4 and isinstance(first[0], int) and isinstance(first[1], int):
            return PayloadFormat.CELL_TUPLES
        return PayloadFormat.FULL_GRID
    raise ProjectFormatError(f"Unrecognized cell data element: {first!r}")


def _cell_from_json(value: Any) -> Cell | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ProjectFormatError(f"Expected cell object, got {value!r}")
    return Cell(value.get("charCode"), value.get("attribute"))


def _decode_cells(data: Any, rows: int, cols: int) -> Grid:
    fmt = sniff_format(data)
    logger.debug("Decoding %s cell payload for %dx%d grid", fmt.value, rows, cols)
    grid = Grid(rows, cols)
    dropped = 0

    try:
        if fmt is PayloadFormat.PACKED:
            for packed in data:
                row, col, cell = unpack_cell(packed)
                if row < rows and col < cols:
                    grid.set(row, col, cell)
                else:
                    dropped += 1
        elif fmt is PayloadFormat.CELL_TUPLES:
            for row, col, char_code, attribute in data:
                if 0 <= row < rows and 0 <= col < cols:
                    grid.set(row, col, Cell(char_code, attribute))
                else:
                    dropped += 1
        else:
            for y, row_data in enumerate(data[:rows]):
                for x, value in enumerate((row_data or [])[:cols]):
                    grid.set(y, x, _cell_from_json(value))
    except (TypeError, ValueError) as e:
        raise ProjectFormatError(f"Invalid cell data: {e}") from e

    if dropped:
        logger.warning("Dropped %d cells outside the %dx%d grid", dropped, rows, cols)
    return grid


def project_from_dict(payload: dict[str, Any]) -> Project:
    """Build a Project from a decoded JSON payload (long or short keys)."""
    if not isinstance(payload, dict):
        raise ProjectFormatError("Project payload must be a JSON object")

    rows = payload.get("rows", payload.get("r"))
    cols = payload.get("cols", payload.get("c"))
    if not isinstance(rows, int) or not isinstance(cols, int):
        raise ProjectFormatError("Project payload is missing rows/cols")

    data = payload.get("gridData", payload.get("d", []))
    try:
        grid = _decode_cells(data, rows, cols)
    except GridShapeError as e:
        raise ProjectFormatError(str(e)) from e

    name = payload.get("name", payload.get("n")) or DEFAULT_NAME
    timestamp = payload.get("timestamp")
    if isinstance(timestamp, int):
        return Project(grid=grid, name=name, timestamp=timestamp)
    return Project(grid=grid, name=name)


def project_to_dict(
    project: Project,
    fmt: PayloadFormat = PayloadFormat.FULL_GRID,
) -> dict[str, Any]:
    """Serialize a project; FULL_GRID uses long keys, the compact layouts short ones."""
    grid = project.grid

    if fmt is PayloadFormat.FULL_GRID:
        return {
            "name": project.name,
            "timestamp": project.timestamp,
            "rows": grid.rows,
            "cols": grid.cols,
            "gridData": [
                [
                    None if cell is None
                    else {"charCode": cell.char_code, "attribute": cell.attribute}
                    for cell in row
                ]
                for row in grid.iter_rows()
            ],
        }

    if fmt is PayloadFormat.CELL_TUPLES:
        data: list[Any] = [
            [row, col, cell.char_code, cell.attribute]
            for row, col, cell in grid.cells()
        ]
    else:
        data = [pack_cell(row, col, cell) for row, col, cell in grid.cells()]

    return {"n": project.name, "r": grid.rows, "c": grid.cols, "d": data}


def loads_project(text: str) -> Project:
    """Parse a project from a JSON string."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProjectFormatError(f"Invalid project JSON: {e}") from e
    return project_from_dict(payload)


def dumps_project(
    project: Project,
    fmt: PayloadFormat = PayloadFormat.FULL_GRID,
    indent: int | None = None,
) -> str:
    """Serialize a project to a JSON string."""
    return json.dumps(project_to_dict(project, fmt), indent=indent)


def load_project(path: str | Path) -> Project:
    """Load a project file from disk."""
    path = Path(path)
    project = loads_project(path.read_text(encoding="utf-8"))
    if project.name == DEFAULT_NAME:
        project.name = path.stem
    return project


def save_project(
    project: Project,
    path: str | Path,
    fmt: PayloadFormat = PayloadFormat.FULL_GRID,
) -> None:
    """Write a project file to disk."""
    Path(path).write_text(dumps_project(project, fmt, indent=2), encoding="utf-8")
