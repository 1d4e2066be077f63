"""Core data structures for text-mode grids."""

from pixtasm.core.attribute import Attribute, decode, encode
from pixtasm.core.cell import Cell
from pixtasm.core.grid import Grid

__all__ = ["Attribute", "Cell", "Grid", "decode", "encode"]
