"""Tests for project files, share strings and text import/export."""

import base64
import json
from pathlib import Path

import pytest

from pixtasm.core.cell import Cell
from pixtasm.core.grid import Grid
from pixtasm.errors import ProjectFormatError
from pixtasm.io.project import (
    PayloadFormat,
    Project,
    dumps_project,
    load_project,
    loads_project,
    pack_cell,
    project_from_dict,
    save_project,
    sniff_format,
    unpack_cell,
)
from pixtasm.io.share import (
    compress_string,
    decode_share_payload,
    decompress_string,
    encode_share_payload,
)
from pixtasm.io.text import export_text, import_text, paste_text


class TestPayloadFormats:
    """Tests for the three cell layouts."""

    def test_sniff(self) -> None:
        assert sniff_format([]) is PayloadFormat.FULL_GRID
        assert sniff_format([[None, {"charCode": 65, "attribute": 7}]]) is PayloadFormat.FULL_GRID
        assert sniff_format([[None, None, None, None]]) is PayloadFormat.FULL_GRID
        assert sniff_format([[0, 1, 65, 7]]) is PayloadFormat.CELL_TUPLES
        assert sniff_format([0x0001_4107]) is PayloadFormat.PACKED

    def test_sniff_rejects_garbage(self) -> None:
        with pytest.raises(ProjectFormatError):
            sniff_format({"a": 1})
        with pytest.raises(ProjectFormatError):
            sniff_format(["x"])

    def test_pack_cell(self) -> None:
        packed = pack_cell(2, 3, Cell(65, 0x1E))
        assert packed == (2 << 24) | (3 << 16) | (65 << 8) | 0x1E
        assert unpack_cell(packed) == (2, 3, Cell(65, 0x1E))

    def test_unpack_zero_fields(self) -> None:
        assert unpack_cell(pack_cell(0, 0, Cell(None, 0x10))) == (0, 0, Cell(None, 0x10))
        assert unpack_cell(pack_cell(0, 0, Cell(65, None))) == (0, 0, Cell(65, None))

    def test_unpack_signed_value(self) -> None:
        # Row 200 packs to a negative 32-bit integer in JavaScript
        packed = (200 << 24 | 1 << 16 | 65 << 8 | 7) - (1 << 32)
        assert unpack_cell(packed) == (200, 1, Cell(65, 7))

    def test_pack_rejects_large_position(self) -> None:
        with pytest.raises(ProjectFormatError):
            pack_cell(256, 0, Cell(65))

    @pytest.mark.parametrize("fmt", list(PayloadFormat))
    def test_every_format_reads_back(self, hello_grid: Grid, fmt: PayloadFormat) -> None:
        project = Project(grid=hello_grid, name="hello", timestamp=1)
        restored = loads_project(dumps_project(project, fmt))
        assert restored.name == "hello"
        assert list(restored.grid.cells()) == list(hello_grid.cells())

    def test_short_and_long_keys(self) -> None:
        short = project_from_dict({"n": "a", "r": 1, "c": 2, "d": [[0, 1, 66, None]]})
        long = project_from_dict({"name": "a", "rows": 1, "cols": 2, "gridData": [[None, {"charCode": 66, "attribute": None}]]})
        assert list(short.grid.cells()) == list(long.grid.cells()) == [(0, 1, Cell(66, None))]

    def test_out_of_bounds_cells_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        project = project_from_dict({"r": 1, "c": 1, "d": [[0, 0, 65, 7], [5, 5, 66, 7]]})
        assert list(project.grid.cells()) == [(0, 0, Cell(65, 7))]
        assert "Dropped 1 cells" in caplog.text

    def test_short_full_grid_padded(self) -> None:
        project = project_from_dict({"rows": 2, "cols": 2, "gridData": [[{"charCode": 65, "attribute": 7}]]})
        assert project.grid.rows == 2
        assert project.grid[0, 0] == Cell(65, 7)
        assert project.grid[1, 1] is None

    def test_invalid_payloads(self) -> None:
        with pytest.raises(ProjectFormatError):
            loads_project("not json")
        with pytest.raises(ProjectFormatError):
            project_from_dict({"rows": 2})
        with pytest.raises(ProjectFormatError):
            project_from_dict({"rows": 0, "cols": 2})
        with pytest.raises(ProjectFormatError):
            project_from_dict({"rows": 1, "cols": 1, "gridData": [[{"charCode": 999, "attribute": 7}]]})

    def test_default_name(self) -> None:
        project = project_from_dict({"rows": 1, "cols": 1})
        assert project.name == "Untitled Project"


class TestProjectFiles:
    """Tests for saving and loading from disk."""

    def test_save_and_load(self, tmp_path: Path, hello_grid: Grid) -> None:
        path = tmp_path / "art.json"
        save_project(Project(grid=hello_grid, name="art", timestamp=42), path)
        payload = json.loads(path.read_text())
        assert payload["rows"] == 2
        assert payload["timestamp"] == 42
        assert payload["gridData"][0][0] == {"charCode": 72, "attribute": 0x1E}

        loaded = load_project(path)
        assert loaded.timestamp == 42
        assert list(loaded.grid.cells()) == list(hello_grid.cells())

    def test_name_from_filename(self, tmp_path: Path) -> None:
        path = tmp_path / "banner.json"
        path.write_text(json.dumps({"rows": 1, "cols": 1}))
        assert load_project(path).name == "banner"


class TestShare:
    """Tests for share strings."""

    def test_compress_runs(self) -> None:
        assert compress_string("abbbbbc") == "a~05bc"
        assert compress_string("aaa") == "aaa"
        assert compress_string("x~y") == "x~01~y"

    def test_compress_round_trip(self) -> None:
        text = "1000000,,,,~~~" + "z" * 300
        assert decompress_string(compress_string(text)) == text

    def test_decompress_malformed(self) -> None:
        with pytest.raises(ProjectFormatError):
            decompress_string("ab~0")

    def test_share_round_trip(self, hello_grid: Grid) -> None:
        encoded = encode_share_payload(Project(grid=hello_grid, name="a" * 40))
        restored = decode_share_payload(encoded)
        assert restored.name == "a" * 20
        assert list(restored.grid.cells()) == list(hello_grid.cells())

    def test_share_keeps_zero_bytes(self) -> None:
        grid = Grid.from_rows([[Cell(None, 0x00), Cell(0, 0x07), Cell(ord("A"), 0x1E)]])
        restored = decode_share_payload(encode_share_payload(Project(grid=grid, name="black")))
        assert restored.grid[0, 0] == Cell(None, 0x00)
        assert restored.grid[0, 1] == Cell(0, 0x07)
        assert restored.grid[0, 2] == Cell(ord("A"), 0x1E)

    def test_share_uses_packed_without_zero_bytes(self, hello_grid: Grid) -> None:
        encoded = encode_share_payload(Project(grid=hello_grid, name="hello"))
        payload = json.loads(decompress_string(base64.b64decode(encoded).decode("latin-1")))
        assert sniff_format(payload["d"]) is PayloadFormat.PACKED

    def test_invalid_share(self) -> None:
        with pytest.raises(ProjectFormatError):
            decode_share_payload("***")


class TestText:
    """Tests for plain-text import and export."""

    def test_import_sizes_to_text(self) -> None:
        grid = import_text("Hi\nthere", bg_index=1, fg_index=14)
        assert (grid.rows, grid.cols) == (2, 5)
        assert grid[0, 0] == Cell(ord("H"), 0x1E)
        assert grid[0, 2] is None

    def test_import_maps_cp437(self) -> None:
        grid = import_text("█")
        assert grid[0, 0] == Cell(0xDB, 0x07)

    def test_paste_clips(self) -> None:
        grid = Grid(1, 2)
        paste_text(grid, "abc\ndef", col=1)
        assert grid[0, 0] is None
        assert grid[0, 1] == Cell(ord("a"), 0x07)

    def test_export(self) -> None:
        grid = Grid(3, 4)
        grid[0, 1] = Cell(ord("A"))
        grid[0, 3] = Cell(None, 0x10)
        grid[1, 0] = Cell(0xDB, 0x07)
        assert export_text(grid) == " A\n█"

    def test_round_trip(self) -> None:
        assert export_text(import_text("ab\n c")) == "ab\n c"
