"""
pixtasm: DOS text-mode pixel art to TASM

Paint a grid of CP437 cells, then turn it into assembly source that
redraws it under DOS, or into a letter-coded sprite table.

Quick Start:
    >>> import pixtasm
    >>> grid = pixtasm.Grid(1, 3)
    >>> grid[0, 0] = pixtasm.Cell(ord('H'), pixtasm.encode(1, 14))
    >>> print(pixtasm.generate_tasm(grid))

Features:
    - 8-bit attribute codec (blink, 8 backgrounds, 16 foregrounds)
    - Row segmentation into '$'-strings and repeated-character blocks
    - TASM program output with BIOS/DOS video macros
    - Sprite DB tables keyed by background colour
    - Project files, share strings, and plain-text import
    - Terminal, HTML, and text previews
"""

__version__ = "0.1.0"

# Core types
from pixtasm.core.attribute import Attribute, decode, encode
from pixtasm.core.cell import Cell
from pixtasm.core.grid import Grid

# Generators
from pixtasm.tasm.generator import GeneratorOptions, TasmGenerator, generate_tasm
from pixtasm.tasm.sprite_db import generate_sprite_db

# Project files
from pixtasm.io.project import Project, load_project, save_project

from pixtasm.errors import GridShapeError, PixtasmError, ProjectFormatError

__all__ = [
    # Version
    "__version__",
    # Core types
    "Attribute",
    "Cell",
    "Grid",
    "decode",
    "encode",
    # Generators
    "GeneratorOptions",
    "TasmGenerator",
    "generate_tasm",
    "generate_sprite_db",
    # Projects
    "Project",
    "load_project",
    "save_project",
    # Errors
    "PixtasmError",
    "GridShapeError",
    "ProjectFormatError",
]
