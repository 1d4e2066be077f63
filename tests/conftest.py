"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from typing import Optional

import pytest

from pixtasm.core.cell import Cell
from pixtasm.core.grid import Grid


def get_test_project_dir() -> Optional[Path]:
    """
    Get external project directory from the environment.

    Set PIXTASM_TEST_DIR to a directory of saved .json projects.
    """
    if env_path := os.environ.get("PIXTASM_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path
    return None


@pytest.fixture(scope="session")
def test_project_dir() -> Path:
    """Fixture providing external project directory, skips if unavailable."""
    project_dir = get_test_project_dir()
    if project_dir is None:
        pytest.skip("External projects not found. Set PIXTASM_TEST_DIR")
    return project_dir


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize project_file over the external directory, if any."""
    if "project_file" in metafunc.fixturenames:
        project_dir = get_test_project_dir()
        files = sorted(project_dir.glob("*.json"))[:50] if project_dir else []
        metafunc.parametrize("project_file", files, ids=lambda p: p.name)


@pytest.fixture
def hello_grid() -> Grid:
    """Two rows: yellow-on-blue 'Hi$' with a gap, then a red bar."""
    grid = Grid(2, 6)
    grid[0, 0] = Cell(ord('H'), 0x1E)
    grid[0, 1] = Cell(ord('i'), 0x1E)
    grid[0, 2] = Cell(ord('$'), 0x1E)
    grid[0, 4] = Cell(ord('"'), None)
    grid.fill_rect(1, 1, 1, 4, Cell(None, 0x40))
    return grid


@pytest.fixture
def project_path(tmp_path: Path, hello_grid: Grid) -> Path:
    """A saved project file holding hello_grid."""
    from pixtasm.io.project import Project, save_project

    path = tmp_path / "hello.json"
    save_project(Project(grid=hello_grid, name="hello", timestamp=0), path)
    return path
