"""Generate TASM source that redraws a grid in DOS text mode."""

import logging
from dataclasses import dataclass, field

from pixtasm.core.constants import DEFAULT_ATTRIBUTE
from pixtasm.core.grid import Grid
from pixtasm.tasm import templates
from pixtasm.tasm.segments import Segment, SegmentKind, group_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorOptions:
    """
    Knobs for TASM output.

    Args:
        column_scale: Multiplier applied to column numbers in setcursor.
            1 maps grid columns straight to screen columns; 2 reproduces
            the older double-width layout.
        default_attribute: Attribute that needs no colorz call.
        page: Video page passed to renderc.
    """
    column_scale: int = 1
    default_attribute: int = DEFAULT_ATTRIBUTE
    page: int = 0

    def __post_init__(self) -> None:
        if self.column_scale < 1:
            raise ValueError(f"column_scale must be >= 1, got {self.column_scale}")


@dataclass
class GenerationStats:
    """Counts gathered during one generate() call."""
    text_segments: int = 0
    block_segments: int = 0
    string_bytes: int = 0


@dataclass
class _EmitContext:
    """Mutable state for a single generate() call."""
    labels: int = 0
    data: list[str] = field(default_factory=list)
    code: list[str] = field(default_factory=list)
    stats: GenerationStats = field(default_factory=GenerationStats)

    def next_label(self, row: int, col: int) -> str:
        label = f"txt_{self.labels}_R{row}_C{col}"
        self.labels += 1
        return label


def escape_string(chars: bytes | tuple[int, ...]) -> str:
    """Render character codes as the body of a double-quoted db literal."""
    return ''.join(chr(code) for code in chars).replace('"', '""')


def insert_data(preamble: str, declarations: str) -> str:
    """Splice string declarations in after the last data-section marker."""
    index = preamble.rfind(templates.DATA_MARKER)
    if index == -1:
        return preamble + declarations
    split = index + len(templates.DATA_MARKER)
    return preamble[:split] + declarations + preamble[split:]


class TasmGenerator:
    """
    Turn a Grid into a complete TASM program.

    Rows are scanned top to bottom; each row is split into segments
    (see pixtasm.tasm.segments) and every segment becomes a setcursor
    call followed by either a '$'-string print or a renderc fill.
    """

    def __init__(self, options: GeneratorOptions | None = None):
        self.options = options or GeneratorOptions()
        self.last_stats: GenerationStats | None = None

    def generate(self, grid: Grid) -> str:
        """Return TASM source for the grid. The grid is not modified."""
        ctx = _EmitContext()

        for segment in group_grid(grid):
            if segment.kind is SegmentKind.TEXT:
                self._emit_text(ctx, segment)
            else:
                self._emit_block(ctx, segment)

        self.last_stats = ctx.stats
        logger.debug(
            "Generated %d text and %d block segments (%d string bytes) for %dx%d grid",
            ctx.stats.text_segments,
            ctx.stats.block_segments,
            ctx.stats.string_bytes,
            grid.rows,
            grid.cols,
        )

        return (
            insert_data(templates.PREAMBLE, ''.join(ctx.data))
            + ''.join(ctx.code)
            + templates.POSTAMBLE
        )

    def _setcursor(self, segment: Segment) -> str:
        return f"\n\tsetcursor {segment.row}, {segment.col * self.options.column_scale}\n"

    def _emit_text(self, ctx: _EmitContext, segment: Segment) -> None:
        label = ctx.next_label(segment.row, segment.col)
        ctx.data.append(
            f"\t{label} db \"{escape_string(segment.chars)}\",{templates.STRING_TERMINATOR}\n"
        )

        ctx.code.append(self._setcursor(segment))
        if segment.attribute != self.options.default_attribute:
            ctx.code.append(f"\tcolorz {segment.attribute}, {segment.length}\n")
        ctx.code.append("\tmov ah, 09h\n")
        ctx.code.append(f"\tmov dx, offset {label}\n")
        ctx.code.append("\tint 21h\n")

        ctx.stats.text_segments += 1
        ctx.stats.string_bytes += segment.length + 1

    def _emit_block(self, ctx: _EmitContext, segment: Segment) -> None:
        ctx.code.append(self._setcursor(segment))
        ctx.code.append(
            f"\trenderc {segment.char_code}, {self.options.page}, "
            f"{segment.attribute:02x}h, {segment.length}\n"
        )
        ctx.stats.block_segments += 1


def generate_tasm(grid: Grid, options: GeneratorOptions | None = None) -> str:
    """Generate TASM source for a grid with the given options."""
    return TasmGenerator(options).generate(grid)
