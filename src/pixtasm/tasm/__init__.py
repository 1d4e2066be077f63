"""TASM code generation from text-mode grids."""

from pixtasm.tasm.generator import GeneratorOptions, TasmGenerator, generate_tasm
from pixtasm.tasm.segments import Segment, SegmentKind, group_grid, group_row
from pixtasm.tasm.sprite_db import generate_sprite_db

__all__ = [
    "GeneratorOptions",
    "TasmGenerator",
    "generate_tasm",
    "Segment",
    "SegmentKind",
    "group_grid",
    "group_row",
    "generate_sprite_db",
]
