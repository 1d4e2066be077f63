"""Exception types raised by pixtasm."""


class PixtasmError(Exception):
    """Base class for all pixtasm errors."""


class GridShapeError(PixtasmError, ValueError):
    """Grid dimensions are empty or rows are jagged."""


class ProjectFormatError(PixtasmError, ValueError):
    """A project or share payload could not be decoded."""
