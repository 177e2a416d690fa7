"""Stroke rendering onto drawing contexts.

This module turns a normalized template into paths on a DrawingContext.

Key components:
- StrokeRenderer: Draws strokes as straight or smoothed paths
- GlyphRenderer: Runs a full render call (normalize, simplify, plan, draw)
- render_to_surface: Render onto a caller-supplied context
- render_to_image: Render onto a new off-screen surface and export a data URL
"""

from typing import Any

import structlog

from glyphpreview.config import GlyphPreviewSettings, RenderConfig
from glyphpreview.core.geometry import normalize, simplify
from glyphpreview.core.transform import TransformPlan, plan_transform
from glyphpreview.domain import Stroke, Template, as_template
from glyphpreview.exceptions import MissingSurfaceError
from glyphpreview.surface import CairoSurface, DrawingContext, LineCap, LineJoin
from glyphpreview.utils import RenderLogger, RenderStats


class StrokeRenderer:
    """Draws the strokes of a template, one path per stroke.

    In smooth mode, strokes of three or more points are rounded with a
    midpoint heuristic: each consecutive pair (prev, cur) becomes a
    quadratic curve with prev as control point ending at the midpoint of
    the pair, and a final straight segment reaches the true last point.
    This only softens the corners of the polyline. It is not a spline fit
    and does not pass through the interior points.

    A single-point stroke is drawn as a zero-length segment, which paints
    a dot when the context uses round caps. Empty strokes are skipped.
    """

    def __init__(self, smooth: bool = False) -> None:
        self.smooth = smooth

    def draw(self, context: DrawingContext, template: Template) -> int:
        """Stroke every non-empty stroke of the template.

        The context must already be positioned, scaled and styled.

        Args:
            context: Drawing context to draw on
            template: Template in the context's user space

        Returns:
            Number of strokes drawn
        """
        drawn = 0
        for stroke in template.strokes:
            if stroke.is_empty():
                continue
            context.begin_path()
            self.trace(context, stroke)
            context.stroke()
            drawn += 1
        return drawn

    def trace(self, context: DrawingContext, stroke: Stroke) -> None:
        """Add one stroke's path to the context without stroking it."""
        points = stroke.points
        first = points[0]
        context.move_to(first.x, first.y)

        if len(points) == 1:
            context.line_to(first.x, first.y)
            return

        if not self.smooth or len(points) < 3:
            for point in points[1:]:
                context.line_to(point.x, point.y)
            return

        for prev, cur in zip(points, points[1:]):
            mid = prev.midpoint(cur)
            context.quadratic_curve_to(prev.x, prev.y, mid.x, mid.y)

        last = points[-1]
        context.line_to(last.x, last.y)


def apply_stroke_style(context: DrawingContext, config: RenderConfig, line_width: float) -> None:
    """Set the visual stroke parameters for a render call."""
    context.set_line_cap(LineCap.ROUND)
    context.set_line_join(LineJoin.ROUND)
    context.set_stroke_color(config.stroke_style)
    context.set_line_width(line_width)


def prepare_surface(context: DrawingContext, config: RenderConfig) -> None:
    """Clear the whole surface and paint the background, if any."""
    context.clear_rect(0, 0, context.width, context.height)
    if config.has_background:
        context.set_fill_color(config.background)
        context.fill_rect(0, 0, context.width, context.height)


class GlyphRenderer:
    """Renders glyph templates onto drawing contexts.

    Each call works on its own normalized copy of the template, so one
    renderer can serve many surfaces. Calls that share a surface must not
    overlap.

    Example:
        renderer = GlyphRenderer()
        renderer.render(template, CairoSurface(128, 128))
        print(renderer.stats.rendered_count)
    """

    def __init__(
        self,
        settings: GlyphPreviewSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            settings: Application settings; render defaults come from settings.render
            logger: Structured logger (defaults to the "glyphpreview" logger)
        """
        self.settings = settings or GlyphPreviewSettings()
        self.logger = logger or structlog.get_logger("glyphpreview")
        self.render_logger = RenderLogger(self.logger)

    @property
    def stats(self) -> RenderStats:
        return self.render_logger.stats

    def render(
        self,
        template: Template | Any,
        surface: DrawingContext | None,
        config: RenderConfig | None = None,
    ) -> TransformPlan | None:
        """Draw a template fitted onto a surface.

        Args:
            template: Template or raw template data; never modified
            surface: Drawing context to draw on
            config: Render configuration (defaults to settings.render)

        Returns:
            The transform used, or None if the template had no points

        Raises:
            MissingSurfaceError: If surface is None
            TemplateFormatError: If raw template data cannot be parsed
            ColorError: If a stroke or background color is invalid
        """
        name = template.name if isinstance(template, Template) else None
        if surface is None:
            error = MissingSurfaceError(name)
            self.render_logger.log_render_error(name, error)
            raise error

        try:
            template = as_template(template)
            name = template.name
            config = config or self.settings.render
            started = self.render_logger.log_render_start(name, surface.width, surface.height)

            normalized, bbox = normalize(template)
            prepared = simplify(normalized, config.simplify)

            prepare_surface(surface, config)

            if prepared.is_empty():
                self.render_logger.log_render_empty(name)
                return None

            plan = plan_transform(bbox, surface.width, surface.height, config)
            if plan.scale_clamped:
                self.render_logger.log_scale_clamped(name, bbox.width, bbox.height)

            surface.save()
            try:
                surface.translate(plan.origin_x, plan.origin_y)
                surface.scale(plan.scale, plan.scale)
                apply_stroke_style(surface, config, plan.line_width)
                strokes = StrokeRenderer(smooth=config.smooth).draw(surface, prepared)
            finally:
                surface.restore()
        except Exception as e:
            self.render_logger.log_render_error(name, e)
            raise

        self.render_logger.log_render_complete(
            name, strokes, prepared.point_count, plan.scale, started
        )
        return plan

    def render_image(
        self,
        template: Template | Any,
        size: int | tuple[int, int],
        config: RenderConfig | None = None,
    ) -> str:
        """Render onto a new off-screen surface and return a PNG data URL.

        Args:
            template: Template or raw template data
            size: Square side in pixels, or (width, height)
            config: Render configuration (defaults to settings.render)

        Returns:
            "data:image/png;base64,..." string
        """
        surface = self.create_surface(size)
        self.render(template, surface, config)
        return surface.to_data_url()

    @staticmethod
    def create_surface(size: int | tuple[int, int]) -> CairoSurface:
        """Allocate an off-screen surface of the given size."""
        if isinstance(size, tuple):
            width, height = size
        else:
            width = height = size
        return CairoSurface(width, height)


def render_to_surface(
    template: Template | Any,
    surface: DrawingContext | None,
    config: RenderConfig | None = None,
) -> None:
    """Draw a template fitted onto a caller-supplied surface.

    Args:
        template: Template or raw template data; never modified
        surface: Drawing context to draw on
        config: Render configuration (defaults to RenderConfig())

    Raises:
        MissingSurfaceError: If surface is None
    """
    GlyphRenderer().render(template, surface, config)


def render_to_image(
    template: Template | Any,
    size: int | tuple[int, int],
    config: RenderConfig | None = None,
) -> str:
    """Render a template onto an off-screen surface and encode it.

    Args:
        template: Template or raw template data
        size: Square side in pixels, or (width, height)
        config: Render configuration (defaults to RenderConfig())

    Returns:
        PNG image as a "data:image/png;base64,..." string
    """
    return GlyphRenderer().render_image(template, size, config)
