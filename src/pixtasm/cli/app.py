"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from pixtasm.errors import PixtasmError


def _write_or_print(text: str, output: Optional[Path], encoding: str = "utf-8") -> None:
    if output is None:
        # Bytes go to the binary stream so the encoding holds on stdout too
        typer.echo(text.encode(encoding))
    else:
        output.write_text(text, encoding=encoding)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="pixtasm",
        help="Turn DOS text-mode pixel art into TASM source and sprite tables.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    def _load(path: Path):
        from pixtasm.io.project import load_project

        try:
            return load_project(path)
        except (PixtasmError, OSError) as e:
            console.print(f"[red]Cannot load {path}: {e}[/]")
            raise typer.Exit(1)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Turn DOS text-mode pixel art into TASM source and sprite tables."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )

    @app.command()
    def tasm(
        project: Annotated[Path, typer.Argument(help="Project file (.json)")],
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write assembly here instead of stdout")] = None,
        column_scale: Annotated[int, typer.Option("--column-scale", min=1, help="Screen columns per grid column")] = 1,
    ) -> None:
        """Generate a TASM program that draws the project."""
        from pixtasm.tasm.generator import GeneratorOptions, TasmGenerator

        doc = _load(project)
        generator = TasmGenerator(GeneratorOptions(column_scale=column_scale))
        source = generator.generate(doc.grid)
        # One byte per character code, as the assembler reads it
        _write_or_print(source, output, encoding="latin-1")

        if output is not None:
            stats = generator.last_stats
            assert stats is not None
            console.print(
                f"[green]Wrote {output}[/]: {stats.text_segments} strings, "
                f"{stats.block_segments} blocks"
            )

    @app.command()
    def sprite(
        project: Annotated[Path, typer.Argument(help="Project file (.json)")],
        label: Annotated[str, typer.Option("--label", "-l", help="Label for the first DB line")] = "SPRITE",
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output path")] = None,
    ) -> None:
        """Generate a letter-coded sprite DB table."""
        from pixtasm.tasm.sprite_db import generate_sprite_db

        doc = _load(project)
        _write_or_print(generate_sprite_db(doc.grid, label), output)

    @app.command()
    def view(
        project: Annotated[Path, typer.Argument(help="Project file (.json)")],
    ) -> None:
        """Preview the project in the terminal."""
        from pixtasm.render.terminal import TerminalRenderer

        doc = _load(project)
        print(TerminalRenderer().render(doc.grid))

    @app.command()
    def info(
        project: Annotated[Path, typer.Argument(help="Project file (.json)")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show size and content statistics for a project."""
        from pixtasm.tasm.segments import SegmentKind, group_grid

        doc = _load(project)
        grid = doc.grid
        segments = list(group_grid(grid))
        data = {
            "name": doc.name,
            "rows": grid.rows,
            "cols": grid.cols,
            "cells": sum(1 for _ in grid.cells()),
            "text_segments": sum(1 for s in segments if s.kind is SegmentKind.TEXT),
            "block_segments": sum(1 for s in segments if s.kind is SegmentKind.BLOCK),
        }

        if json_output:
            print(json.dumps(data, indent=2))
        else:
            out = Console()
            out.print(f"[bold cyan]{doc.name}[/]")
            out.print(f"  [bold]Size:[/]     {grid.cols}x{grid.rows}")
            out.print(f"  [bold]Cells:[/]    {data['cells']}")
            out.print(f"  [bold]Strings:[/]  {data['text_segments']}")
            out.print(f"  [bold]Blocks:[/]   {data['block_segments']}")

    @app.command()
    def convert(
        project: Annotated[Path, typer.Argument(help="Project file (.json)")],
        dest: Annotated[Path, typer.Argument(help="Destination file")],
        format: Annotated[Optional[str], typer.Option("--format", "-f", help="Output format (auto-detected from extension)")] = None,
    ) -> None:
        """Convert a project to HTML, plain text, or compact JSON."""
        from pixtasm.io.project import PayloadFormat, save_project
        from pixtasm.render.html import HtmlRenderer
        from pixtasm.render.text import TextRenderer

        doc = _load(project)
        fmt = format or dest.suffix.lstrip('.').lower()

        if fmt == "html":
            dest.write_text(HtmlRenderer().render(doc.grid), encoding="utf-8")
        elif fmt in ("txt", "text"):
            dest.write_text(TextRenderer().render(doc.grid), encoding="utf-8")
        elif fmt == "json":
            save_project(doc, dest)
        elif fmt in ("packed", "tuples"):
            save_project(doc, dest, PayloadFormat(fmt))
        else:
            console.print(f"[red]Unknown format: {fmt}[/]")
            raise typer.Exit(1)

        console.print(f"[green]Converted {project} → {dest}[/]")

    @app.command("import")
    def import_(
        source: Annotated[Path, typer.Argument(help="Text file with ASCII art")],
        dest: Annotated[Path, typer.Argument(help="Project file to create")],
        rows: Annotated[Optional[int], typer.Option("--rows", min=1, help="Grid rows (default: fit text)")] = None,
        cols: Annotated[Optional[int], typer.Option("--cols", min=1, help="Grid columns (default: fit text)")] = None,
        bg: Annotated[int, typer.Option("--bg", min=0, max=7, help="Background index")] = 0,
        fg: Annotated[int, typer.Option("--fg", min=0, max=15, help="Foreground index")] = 7,
    ) -> None:
        """Create a project from plain text."""
        from pixtasm.io.project import Project, save_project
        from pixtasm.io.text import import_text

        try:
            text = source.read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Cannot read {source}: {e}[/]")
            raise typer.Exit(1)

        grid = import_text(text, rows=rows, cols=cols, bg_index=bg, fg_index=fg)
        save_project(Project(grid=grid, name=dest.stem), dest)
        console.print(f"[green]Imported {source} → {dest}[/] ({grid.cols}x{grid.rows})")

    @app.command()
    def share(
        project: Annotated[Path, typer.Argument(help="Project file (.json)")],
    ) -> None:
        """Print a compact share string for a project."""
        from pixtasm.io.share import URL_LIMIT, encode_share_payload

        doc = _load(project)
        try:
            encoded = encode_share_payload(doc)
        except PixtasmError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        print(encoded)
        if len(encoded) > URL_LIMIT:
            console.print(f"[yellow]Share string is {len(encoded)} characters; too long for a URL[/]")

    @app.command()
    def unshare(
        encoded: Annotated[str, typer.Argument(help="Share string")],
        dest: Annotated[Path, typer.Argument(help="Project file to create")],
    ) -> None:
        """Restore a project from a share string."""
        from pixtasm.io.project import save_project
        from pixtasm.io.share import decode_share_payload

        try:
            doc = decode_share_payload(encoded)
        except PixtasmError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        save_project(doc, dest)
        console.print(f"[green]Saved {doc.name} → {dest}[/]")

    return app
