"""Off-screen drawing surface backed by pycairo.

This module provides CairoSurface, a DrawingContext implementation that
draws into a cairo ARGB32 image surface and can export PNG data.
"""

import base64
import io
import sys
from pathlib import Path

import cairo

from glyphpreview.exceptions import SurfaceExportError
from glyphpreview.surface.color import parse_color
from glyphpreview.surface.context import LineCap, LineJoin

_CAIRO_LINE_CAPS = {
    LineCap.BUTT: cairo.LINE_CAP_BUTT,
    LineCap.ROUND: cairo.LINE_CAP_ROUND,
    LineCap.SQUARE: cairo.LINE_CAP_SQUARE,
}

_CAIRO_LINE_JOINS = {
    LineJoin.MITER: cairo.LINE_JOIN_MITER,
    LineJoin.ROUND: cairo.LINE_JOIN_ROUND,
    LineJoin.BEVEL: cairo.LINE_JOIN_BEVEL,
}


class CairoSurface:
    """A bounded raster surface with canvas-style drawing methods.

    Stroke and fill colors are kept on the surface, like an HTML canvas,
    and applied when stroke() or fill_rect() is called.

    Example:
        surface = CairoSurface(128, 128)
        render_to_surface(template, surface)
        surface.write_png(Path("preview.png"))
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a transparent surface.

        Args:
            width: Surface width in pixels
            height: Surface height in pixels

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")

        self._surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, int(width), int(height))
        self._ctx = cairo.Context(self._surface)
        self._stroke_rgba = parse_color("#000000")
        self._fill_rgba = parse_color("#000000")

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    @property
    def cairo_context(self) -> cairo.Context:
        """Underlying cairo context, for callers that need cairo directly."""
        return self._ctx

    def begin_path(self) -> None:
        self._ctx.new_path()

    def move_to(self, x: float, y: float) -> None:
        self._ctx.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._ctx.line_to(x, y)

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        """Append a quadratic Bezier segment.

        Cairo only has cubic segments, so the quadratic is degree-elevated:
        both cubic control points sit two thirds of the way from an end
        point toward the quadratic control point.
        """
        if not self._ctx.has_current_point():
            self._ctx.move_to(cpx, cpy)
        x0, y0 = self._ctx.get_current_point()

        self._ctx.curve_to(
            x0 + 2.0 / 3.0 * (cpx - x0),
            y0 + 2.0 / 3.0 * (cpy - y0),
            x + 2.0 / 3.0 * (cpx - x),
            y + 2.0 / 3.0 * (cpy - y),
            x,
            y,
        )

    def stroke(self) -> None:
        self._ctx.set_source_rgba(*self._stroke_rgba)
        self._ctx.stroke()

    def set_line_width(self, width: float) -> None:
        self._ctx.set_line_width(width)

    def set_line_cap(self, cap: LineCap) -> None:
        self._ctx.set_line_cap(_CAIRO_LINE_CAPS[LineCap(cap)])

    def set_line_join(self, join: LineJoin) -> None:
        self._ctx.set_line_join(_CAIRO_LINE_JOINS[LineJoin(join)])

    def set_stroke_color(self, color: str) -> None:
        self._stroke_rgba = parse_color(color)

    def set_fill_color(self, color: str) -> None:
        self._fill_rgba = parse_color(color)

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Reset a rectangle to fully transparent pixels."""
        self._ctx.save()
        self._ctx.new_path()
        self._ctx.set_operator(cairo.OPERATOR_CLEAR)
        self._ctx.rectangle(x, y, width, height)
        self._ctx.fill()
        self._ctx.restore()

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._ctx.save()
        self._ctx.new_path()
        self._ctx.set_source_rgba(*self._fill_rgba)
        self._ctx.rectangle(x, y, width, height)
        self._ctx.fill()
        self._ctx.restore()

    def save(self) -> None:
        self._ctx.save()

    def restore(self) -> None:
        self._ctx.restore()

    def translate(self, dx: float, dy: float) -> None:
        self._ctx.translate(dx, dy)

    def scale(self, sx: float, sy: float) -> None:
        self._ctx.scale(sx, sy)

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Read one pixel as premultiplied (red, green, blue, alpha) bytes.

        Args:
            x: Column, 0 <= x < width
            y: Row, 0 <= y < height

        Returns:
            Tuple of channel values in [0, 255]
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} surface")

        self._surface.flush()
        data = self._surface.get_data()
        offset = y * self._surface.get_stride() + x * 4
        pixel = bytes(data[offset : offset + 4])

        # ARGB32 is a native-endian 32-bit word
        if sys.byteorder == "little":
            blue, green, red, alpha = pixel
        else:
            alpha, red, green, blue = pixel
        return (red, green, blue, alpha)

    def to_png_bytes(self) -> bytes:
        """Encode the surface as PNG.

        Raises:
            SurfaceExportError: If cairo fails to encode the surface
        """
        self._surface.flush()
        buffer = io.BytesIO()
        try:
            self._surface.write_to_png(buffer)
        except (cairo.Error, OSError) as e:
            raise SurfaceExportError(str(e)) from e
        return buffer.getvalue()

    def to_data_url(self) -> str:
        """Encode the surface as a base64 PNG data URL."""
        encoded = base64.b64encode(self.to_png_bytes()).decode("ascii")
        return f"data:image/png;base64,{encoded}"

    def write_png(self, path: Path) -> None:
        """Write the surface to a PNG file.

        Raises:
            SurfaceExportError: If the file cannot be written
        """
        data = self.to_png_bytes()
        try:
            path.write_bytes(data)
        except OSError as e:
            raise SurfaceExportError(f"cannot write '{path}': {e}") from e
