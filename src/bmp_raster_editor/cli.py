"""
BMP Raster Editor CLI

Command-line interface for inspecting, previewing and drawing on BMP files.
"""

import sys
import logging
import json
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.logging import RichHandler

from bmp_raster_editor.bmp_codec import BmpImage, decode, encode
from bmp_raster_editor.errors import BmpError
from bmp_raster_editor.pixels import Pixel
from bmp_raster_editor.preview import preview as render_preview
from bmp_raster_editor.raster_editor import RasterEditor
from bmp_raster_editor.pil_bridge import save_as

from bmp_raster_editor.core.options import CodecOptions
from bmp_raster_editor.core.parsing import (
    parse_point as _parse_point_core,
    parse_color as _parse_color_core,
    parse_padding_mode as _parse_padding_mode_core,
    parse_row_order as _parse_row_order_core,
)
from bmp_raster_editor.core.results import OperationResult
from bmp_raster_editor.core.actions import (
    DrawKind,
    DrawOperation,
    edit_bmp,
    inspect_bmp,
    DEFAULT_CROSS,
)

logger = logging.getLogger("bmp_raster_editor")

console = Console()

app = typer.Typer(help="BMP Raster Editor - inspect, preview and draw on 24/32-bit BMP files")


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, console=Console(stderr=True))],
        force=True,
    )


def print_header(text: str) -> None:
    """Print fancy header."""
    console.print(Panel(text, expand=False, style="bold blue"))


def print_success(text: str) -> None:
    """Print success message."""
    console.print(f"✓ {text}", style="green")


def print_warning(text: str) -> None:
    """Print warning message."""
    console.print(f"⚠️  {text}", style="yellow")


def print_error(text: str) -> None:
    """Print error message."""
    console.print(f"❌ {text}", style="red")


def parse_point(value: str) -> Tuple[int, int]:
    """CLI wrapper around core.parsing.parse_point (ValueError -> BadParameter)."""
    try:
        return _parse_point_core(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def parse_color(value: str) -> Pixel:
    """CLI wrapper around core.parsing.parse_color (ValueError -> BadParameter)."""
    try:
        return _parse_color_core(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def build_options(padding: Optional[str], row_order: Optional[str]) -> CodecOptions:
    """
    Combine environment configuration with command-line overrides.

    Command-line values win over BMP_EDITOR_* variables.
    """
    try:
        options = CodecOptions.from_env()
        overrides = {}
        if padding:
            overrides["padding"] = _parse_padding_mode_core(padding)
        if row_order:
            overrides["row_order"] = _parse_row_order_core(row_order)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if not overrides:
        return options
    return CodecOptions(
        padding=overrides.get("padding", options.padding),
        row_order=overrides.get("row_order", options.row_order),
        max_dimension=options.max_dimension,
        validate_length=options.validate_length,
    )


def get_options(ctx: typer.Context) -> CodecOptions:
    if isinstance(ctx.obj, CodecOptions):
        return ctx.obj
    return CodecOptions.from_env()


def report_result(result: OperationResult) -> None:
    """Print warnings/errors of a result and exit non-zero on failure."""
    for warning in result.warnings:
        print_warning(warning)
    if not result.ok:
        for error in result.errors:
            print_error(error)
        sys.exit(1)
    logger.debug(result.to_summary())


def load_image(path: str, options: CodecOptions) -> BmpImage:
    try:
        return decode(path, options)
    except BmpError as e:
        print_error(str(e))
        sys.exit(1)


def print_preview(image: BmpImage) -> None:
    for text in render_preview(image):
        console.print(text, markup=False, highlight=False)


@app.callback()
def main_callback(
    ctx: typer.Context,
    padding: Optional[str] = typer.Option(
        None, "--padding", help="Row padding formula: bgr (historical) or pixel"
    ),
    row_order: Optional[str] = typer.Option(
        None, "--row-order", help="Encoder row order: match-header or as-stored"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Global codec options."""
    setup_logging(verbose)
    ctx.obj = build_options(padding, row_order)


@app.command()
def info(
    ctx: typer.Context,
    image: str = typer.Argument(..., help="Path to BMP file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Show the header fields of a BMP file."""
    result = inspect_bmp(image, get_options(ctx))

    if as_json:
        console.print(json.dumps(result.to_dict(), indent=2), soft_wrap=True, markup=False, highlight=False)
        if not result.ok:
            sys.exit(1)
        return

    report_result(result)
    print_header("BMP Info")

    table = Table(title=image)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Dimensions", f"{result.size[0]}x{result.size[1]}")
    table.add_row("Bit depth", str(result.bit_count))
    table.add_row("Row order", "top-down" if result.metadata["top_down"] else "bottom-up")
    table.add_row("Header bytes", str(result.metadata["header_bytes"]))
    for name, value in result.metadata["header"].items():
        table.add_row(name, str(value))

    console.print(table)


@app.command()
def preview(
    ctx: typer.Context,
    image: str = typer.Argument(..., help="Path to BMP file"),
) -> None:
    """Print an ASCII preview ('@' black, '*' white)."""
    bmp = load_image(image, get_options(ctx))
    print_preview(bmp)


def _run_edit(ctx: typer.Context, input_path: str, output_path: str, ops: List[DrawOperation]) -> None:
    result = edit_bmp(input_path, output_path, ops, get_options(ctx))
    report_result(result)
    print_success(f"Wrote {output_path} ({result.points_drawn} points drawn)")


@app.command()
def cross(
    ctx: typer.Context,
    input_path: str = typer.Argument(..., help="Input BMP file"),
    output_path: str = typer.Argument(..., help="Output BMP file"),
    start: str = typer.Option(
        f"{DEFAULT_CROSS[0][0]},{DEFAULT_CROSS[0][1]}", "--from", help="First corner x,y"
    ),
    end: str = typer.Option(
        f"{DEFAULT_CROSS[1][0]},{DEFAULT_CROSS[1][1]}", "--to", help="Opposite corner x,y"
    ),
    color: str = typer.Option("black", "--color", "-c", help="Color name, #RRGGBB or r,g,b"),
) -> None:
    """Draw both diagonals of a rectangle."""
    op = DrawOperation(DrawKind.CROSS, parse_point(start), parse_point(end), parse_color(color))
    _run_edit(ctx, input_path, output_path, [op])


@app.command()
def line(
    ctx: typer.Context,
    input_path: str = typer.Argument(..., help="Input BMP file"),
    output_path: str = typer.Argument(..., help="Output BMP file"),
    start: str = typer.Option(..., "--from", help="Start point x,y"),
    end: str = typer.Option(..., "--to", help="End point x,y"),
    color: str = typer.Option("black", "--color", "-c", help="Color name, #RRGGBB or r,g,b"),
) -> None:
    """Draw a straight line."""
    op = DrawOperation(DrawKind.LINE, parse_point(start), parse_point(end), parse_color(color))
    _run_edit(ctx, input_path, output_path, [op])


@app.command("set-pixel")
def set_pixel(
    ctx: typer.Context,
    input_path: str = typer.Argument(..., help="Input BMP file"),
    output_path: str = typer.Argument(..., help="Output BMP file"),
    at: str = typer.Option(..., "--at", help="Point x,y"),
    color: str = typer.Option("black", "--color", "-c", help="Color name, #RRGGBB or r,g,b"),
) -> None:
    """Set a single pixel (points outside the image are ignored)."""
    op = DrawOperation(DrawKind.PIXEL, parse_point(at), color=parse_color(color))
    _run_edit(ctx, input_path, output_path, [op])


@app.command()
def copy(
    ctx: typer.Context,
    input_path: str = typer.Argument(..., help="Input BMP file"),
    output_path: str = typer.Argument(..., help="Output BMP file"),
) -> None:
    """Decode and re-encode without edits."""
    _run_edit(ctx, input_path, output_path, [])


@app.command()
def export(
    ctx: typer.Context,
    input_path: str = typer.Argument(..., help="Input BMP file"),
    output_path: str = typer.Argument(..., help="Output image (PNG)"),
    format: str = typer.Option("PNG", "--format", help="Pillow output format"),
) -> None:
    """Export the decoded pixels through Pillow."""
    bmp = load_image(input_path, get_options(ctx))
    try:
        save_as(bmp, output_path, format=format.upper())
    except (OSError, ValueError, KeyError) as e:
        print_error(f"Export failed: {e}")
        sys.exit(1)
    print_success(f"Exported {output_path}")


@app.command()
def edit(
    ctx: typer.Context,
    color: str = typer.Option("black", "--color", "-c", help="Color of the cross"),
) -> None:
    """Interactive flow: prompt for files, draw the default cross, show a preview."""
    options = get_options(ctx)
    input_path = typer.prompt("Enter input BMP filename")

    bmp = load_image(input_path, options)
    RasterEditor(bmp).draw_diagonal_cross(
        *DEFAULT_CROSS[0], *DEFAULT_CROSS[1], parse_color(color)
    )
    print_preview(bmp)

    output_path = typer.prompt("Enter output BMP filename")
    try:
        encode(bmp, output_path, options)
    except BmpError as e:
        print_error(str(e))
        sys.exit(1)
    print_success(f"Wrote {output_path}")


def main() -> None:
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(0)
    except Exception as e:
        console.print(f"\n[red bold]Fatal error:[/red bold] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
