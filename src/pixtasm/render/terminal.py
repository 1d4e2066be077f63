"""Render a grid to terminal escape sequences for previewing."""

from pixtasm.codec.cp437 import glyph
from pixtasm.core.grid import Grid

RESET = "\x1b[0m"

# DOS palette order (blue, green, cyan, red...) to ANSI order (red, green, yellow, blue...)
DOS_TO_ANSI = (0, 4, 2, 6, 1, 5, 3, 7)


def _sgr_fg(index: int) -> str:
    base = 30 if index < 8 else 90
    return str(base + DOS_TO_ANSI[index & 7])


def _sgr_bg(index: int) -> str:
    return str(40 + DOS_TO_ANSI[index])


class TerminalRenderer:
    """
    Render a Grid with SGR colour codes.

    Codes are only emitted when the attribute changes. Blank cells are
    drawn as spaces in the terminal's default colours.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render(self, grid: Grid) -> str:
        lines: list[str] = []

        for row in grid.iter_rows():
            parts: list[str] = []
            last: int | None = None

            for cell in row:
                if cell is None:
                    if last is not None:
                        parts.append(RESET)
                        last = None
                    parts.append(' ')
                    continue

                attribute = cell.effective_attribute
                if attribute != last:
                    decoded = cell.decoded()
                    sgr = ['0', _sgr_fg(decoded.foreground), _sgr_bg(decoded.background)]
                    if decoded.blink:
                        sgr.append('5')
                    parts.append(f"\x1b[{';'.join(sgr)}m")
                    last = attribute

                parts.append(glyph(cell.effective_char))

            # Reset at end of each line to prevent color bleeding
            if last is not None:
                parts.append(RESET)
            lines.append(''.join(parts).rstrip(' '))

        result = '\n'.join(lines)

        if self.reset_at_end:
            result += RESET

        return result
