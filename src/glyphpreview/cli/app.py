"""CLI application entry point for glyphpreview.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from pydantic import ValidationError

from glyphpreview import __version__
from glyphpreview.cli.output import (
    console,
    print_error,
    print_geometry,
    print_header,
    print_source_info,
    print_step,
    print_success,
    print_template_table,
)
from glyphpreview.config import GlyphPreviewSettings, LoggingConfig, RenderConfig
from glyphpreview.core import GlyphRenderer, compute_bounding_box, plan_transform
from glyphpreview.exceptions import GlyphPreviewError, TemplateFormatError
from glyphpreview.io import MappingTemplateSource, load_templates
from glyphpreview.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphpreview",
    help="Render stroke glyph templates to fitted, centered PNG previews.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphpreview[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render stroke glyph templates to fitted, centered PNG previews."""
    settings = GlyphPreviewSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = {"settings": settings, "logger": logger, "quiet": quiet}


def _open_source(location: str, settings: GlyphPreviewSettings) -> MappingTemplateSource:
    """Load a template source, turning failures into a clean exit."""
    try:
        return load_templates(location, settings.source)
    except FileNotFoundError:
        print_error(
            f"Template file not found: {location}",
            details=f"The file '{location}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)
    except TemplateFormatError as e:
        print_error(f"Could not read templates: {e.details}")
        raise typer.Exit(code=1)
    except GlyphPreviewError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def render(
    ctx: typer.Context,
    source: Annotated[
        str,
        typer.Argument(
            help="Template JSON file or http(s) URL",
            show_default=False,
        ),
    ],
    name: Annotated[
        str,
        typer.Argument(
            help="Name of the template to render",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output PNG path (default: {name}.png)",
        ),
    ] = None,
    size: Annotated[
        int,
        typer.Option(
            "--size",
            "-s",
            help="Surface width in pixels (and height unless --height is given)",
            min=1,
        ),
    ] = 128,
    height: Annotated[
        int | None,
        typer.Option(
            "--height",
            help="Surface height in pixels",
            min=1,
        ),
    ] = None,
    padding: Annotated[
        float,
        typer.Option(
            "--padding",
            "-p",
            help="Padding on every side in pixels",
            min=0.0,
        ),
    ] = 8.0,
    stroke_width: Annotated[
        float | None,
        typer.Option(
            "--stroke-width",
            "-w",
            help="Stroke width in pixels (default: derived from surface size)",
        ),
    ] = None,
    color: Annotated[
        str,
        typer.Option(
            "--color",
            "-c",
            help="Stroke color (CSS name, #hex, rgb())",
        ),
    ] = "#000000",
    background: Annotated[
        str,
        typer.Option(
            "--background",
            "-b",
            help="Background color, or 'transparent'",
        ),
    ] = "transparent",
    center: Annotated[
        bool,
        typer.Option(
            "--center/--no-center",
            help="Center the glyph inside the padded area",
        ),
    ] = True,
    fit: Annotated[
        bool,
        typer.Option(
            "--fit/--no-fit",
            help="Scale the glyph to fill the padded area",
        ),
    ] = True,
    simplify_ratio: Annotated[
        float,
        typer.Option(
            "--simplify",
            help="Fraction of points to keep per stroke (0 = keep all)",
        ),
    ] = 0.0,
    smooth: Annotated[
        bool,
        typer.Option(
            "--smooth",
            help="Round strokes with midpoint curves",
        ),
    ] = False,
    data_url: Annotated[
        bool,
        typer.Option(
            "--data-url",
            help="Print a PNG data URL instead of writing a file",
        ),
    ] = False,
) -> None:
    """Render one template to a PNG file.

    Example:
        glyphpreview render chars.json heart -o heart.png --size 256 --smooth
    """
    settings: GlyphPreviewSettings = ctx.obj["settings"]
    quiet: bool = ctx.obj["quiet"] or data_url

    try:
        config = RenderConfig(
            padding=padding,
            stroke_width=stroke_width,
            stroke_style=color,
            background=background,
            center=center,
            simplify=simplify_ratio,
            smooth=smooth,
            fit_to_canvas=fit,
        )
    except ValidationError as e:
        print_error("Invalid render options", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Loading templates")

    templates = _open_source(source, settings)

    if not quiet:
        print_source_info(source, len(templates))
        print_step(f"Rendering '{escape(name)}'")

    renderer = GlyphRenderer(settings, logger=ctx.obj["logger"])
    try:
        template = templates.get(name)
        surface = renderer.create_surface((size, height or size))
        renderer.render(template, surface, config)

        if data_url:
            typer.echo(surface.to_data_url())
            return

        output_path = output or Path(f"{name}.png")
        surface.write_png(output_path)
    except GlyphPreviewError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_success(
            output_path=str(output_path),
            file_size=_format_file_size(output_path),
            duration_ms=renderer.stats.avg_render_time_ms,
        )


@app.command("list")
def list_templates(
    ctx: typer.Context,
    source: Annotated[
        str,
        typer.Argument(
            help="Template JSON file or http(s) URL",
            show_default=False,
        ),
    ],
) -> None:
    """List the templates in a source with stroke and point counts."""
    settings: GlyphPreviewSettings = ctx.obj["settings"]
    templates = _open_source(source, settings)

    rows = []
    for template_name in templates.names():
        template = templates.get(template_name)
        rows.append((template_name, len(template), template.point_count))

    if not ctx.obj["quiet"]:
        console.print(f"\n[bold]{len(rows)} templates[/bold]\n")
    print_template_table(rows)


@app.command()
def info(
    ctx: typer.Context,
    source: Annotated[
        str,
        typer.Argument(
            help="Template JSON file or http(s) URL",
            show_default=False,
        ),
    ],
    name: Annotated[
        str,
        typer.Argument(
            help="Name of the template to inspect",
            show_default=False,
        ),
    ],
    size: Annotated[
        int,
        typer.Option(
            "--size",
            "-s",
            help="Surface size in pixels to plan for",
            min=1,
        ),
    ] = 128,
    padding: Annotated[
        float,
        typer.Option(
            "--padding",
            "-p",
            help="Padding on every side in pixels",
            min=0.0,
        ),
    ] = 8.0,
) -> None:
    """Show a template's bounding box and how it would be placed."""
    settings: GlyphPreviewSettings = ctx.obj["settings"]
    templates = _open_source(source, settings)

    try:
        template = templates.get(name)
    except GlyphPreviewError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    bbox = compute_bounding_box(template)
    plan = None
    if not template.is_empty():
        plan = plan_transform(bbox, size, size, RenderConfig(padding=padding))

    console.print(f"\n[bold]{escape(name)}[/bold] {len(template)} strokes, {template.point_count} points\n")
    print_geometry(bbox, plan, size, size)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "4 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
