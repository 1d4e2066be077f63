"""Render a grid to HTML."""

from pixtasm.codec.cp437 import glyph
from pixtasm.core.attribute import Attribute
from pixtasm.core.grid import Grid


class HtmlRenderer:
    """Render a Grid to a <pre> block with inline-styled spans."""

    def __init__(
        self,
        css_class: str = "pixtasm-art",
        font_family: str = "monospace",
    ):
        self.css_class = css_class
        self.font_family = font_family

    def render(self, grid: Grid) -> str:
        """Render grid to HTML string."""
        lines: list[str] = []

        for row in grid.iter_rows():
            spans: list[str] = []
            run: list[str] = []
            run_attr: int | None = None

            for cell in row:
                attribute = None if cell is None else cell.effective_attribute
                if attribute != run_attr and run:
                    spans.append(self._make_span(''.join(run), run_attr))
                    run = []
                run_attr = attribute
                char = ' ' if cell is None else glyph(cell.effective_char)
                run.append(self._escape_html(char))

            if run:
                spans.append(self._make_span(''.join(run), run_attr))

            lines.append(''.join(spans))

        body = '<br>\n'.join(lines)

        return f'''<pre class="{self.css_class}" style="font-family: {self.font_family}; background: #000; padding: 1em;">
{body}
</pre>'''

    def _make_span(self, text: str, attribute: int | None) -> str:
        """Wrap a run of characters sharing one attribute."""
        if attribute is None:
            return text
        decoded = Attribute.from_byte(attribute)
        style = f"color: {decoded.foreground_color}; background: {decoded.background_color}"
        if decoded.blink:
            style += "; text-decoration: blink"
        return f'<span style="{style}">{text}</span>'

    def _escape_html(self, char: str) -> str:
        """Escape special HTML characters."""
        return (char
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace(' ', '&nbsp;')
        )
