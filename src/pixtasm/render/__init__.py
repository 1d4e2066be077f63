"""Renderers for previewing grids in various formats."""

from pixtasm.render.terminal import TerminalRenderer
from pixtasm.render.html import HtmlRenderer
from pixtasm.render.text import TextRenderer

__all__ = ["TerminalRenderer", "HtmlRenderer", "TextRenderer"]
