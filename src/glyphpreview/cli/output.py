"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from glyphpreview.core import TransformPlan
from glyphpreview.domain import BoundingBox

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphpreview[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(location: str, template_count: int) -> None:
    """Print template source information.

    Args:
        location: Path or URL the templates came from
        template_count: Number of templates in the source
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(location)
    console.print(line)
    console.print(f"  {template_count:,} templates")


def print_template_table(rows: list[tuple[str, int, int]]) -> None:
    """Print template names with their stroke and point counts.

    Args:
        rows: Tuples of (name, stroke count, point count)
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Name")
    table.add_column("Strokes", justify="right")
    table.add_column("Points", justify="right")
    for name, strokes, points in rows:
        table.add_row(Text(name), str(strokes), str(points))
    console.print(table)


def print_geometry(bbox: BoundingBox, plan: TransformPlan | None, width: int, height: int) -> None:
    """Print a template's bounding box and its planned placement.

    Args:
        bbox: Bounding box before normalization
        plan: Planned transform, or None for an empty template
        width: Surface width in pixels
        height: Surface height in pixels
    """
    console.print(
        f"  Bounds        ({bbox.min_x:g}, {bbox.min_y:g}) – ({bbox.max_x:g}, {bbox.max_y:g})"
    )
    console.print(f"  Size          {bbox.width:g} {SYM_DOT} {bbox.height:g}")
    if plan is None:
        console.print(f"  Surface       {width}x{height} {SYM_DOT} nothing to draw")
        return

    clamped = " [yellow](clamped)[/yellow]" if plan.scale_clamped else ""
    console.print(f"  Surface       {width}x{height}")
    console.print(f"  Scale         {plan.scale:.4g}{clamped}")
    console.print(f"  Origin        ({plan.origin_x:.2f}, {plan.origin_y:.2f})")
    console.print(f"  Stroke width  {plan.stroke_width:g}px {SYM_DOT} {plan.line_width:.4g} glyph units")


def print_success(output_path: str, file_size: str, duration_ms: float | None) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        duration_ms: Render duration in milliseconds
    """
    timing = f" in {duration_ms:.1f}ms" if duration_ms is not None else ""
    console.print(f"\n[bold green]{SYM_OK} Rendered[/bold green]{timing}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
