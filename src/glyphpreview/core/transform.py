"""Scale-to-fit transform planning.

Given a normalized glyph's bounding box and a target surface size, works out
the uniform scale, the centering offset and the line width that keeps the
rendered stroke at its requested pixel width.
"""

import logging
import math
from dataclasses import dataclass

from glyphpreview.config import RenderConfig
from glyphpreview.domain import BoundingBox

logger = logging.getLogger(__name__)

MIN_AUTO_STROKE_WIDTH = 1
MAX_AUTO_STROKE_WIDTH = 6
AUTO_STROKE_DIVISOR = 50


@dataclass(frozen=True, slots=True)
class TransformPlan:
    """Placement of a glyph on a surface.

    Glyph point (x, y) lands on surface pixel
    (origin_x + x * scale, origin_y + y * scale).

    Attributes:
        scale: Uniform glyph-to-pixel scale factor
        origin_x: Surface x of the glyph origin
        origin_y: Surface y of the glyph origin
        extra_x: Horizontal centering offset inside the padded area
        extra_y: Vertical centering offset inside the padded area
        available_w: Width of the padded drawing area
        available_h: Height of the padded drawing area
        stroke_width: Rendered stroke width in surface pixels
        scale_clamped: True if the computed scale was unusable and reset to 1
    """

    scale: float
    origin_x: float
    origin_y: float
    extra_x: float
    extra_y: float
    available_w: float
    available_h: float
    stroke_width: float
    scale_clamped: bool = False

    @property
    def line_width(self) -> float:
        """Line width in glyph space.

        Drawn under the scaled transform this comes out as stroke_width
        surface pixels.
        """
        return self.stroke_width / self.scale

    def to_surface(self, x: float, y: float) -> tuple[float, float]:
        """Map a normalized glyph coordinate to surface pixels."""
        return (self.origin_x + x * self.scale, self.origin_y + y * self.scale)


def resolve_stroke_width(canvas_w: float, canvas_h: float, config: RenderConfig) -> float:
    """Pick the stroke width in surface pixels.

    An explicit config value wins. Otherwise one fiftieth of the smaller
    surface side, rounded and clamped to [1, 6].

    Args:
        canvas_w: Surface width in pixels
        canvas_h: Surface height in pixels
        config: Render configuration

    Returns:
        Stroke width in pixels
    """
    if config.stroke_width is not None:
        return config.stroke_width

    derived = round(min(canvas_w, canvas_h) / AUTO_STROKE_DIVISOR)
    return float(max(MIN_AUTO_STROKE_WIDTH, min(MAX_AUTO_STROKE_WIDTH, derived)))


def plan_transform(
    bbox: BoundingBox,
    canvas_w: float,
    canvas_h: float,
    config: RenderConfig,
) -> TransformPlan:
    """Compute scale and offset that place a glyph on a surface.

    Args:
        bbox: Bounding box of the normalized glyph
        canvas_w: Surface width in pixels
        canvas_h: Surface height in pixels
        config: Render configuration (padding, center, fit_to_canvas, stroke_width)

    Returns:
        TransformPlan for the glyph
    """
    padding = config.padding
    available_w = max(1.0, canvas_w - 2 * padding)
    available_h = max(1.0, canvas_h - 2 * padding)

    # A zero-sized glyph (a dot, a straight line or nothing) divides by 1
    width = bbox.width or 1.0
    height = bbox.height or 1.0

    if config.fit_to_canvas:
        scale = min(available_w / width, available_h / height)
    else:
        scale = 1.0

    scale_clamped = False
    if not math.isfinite(scale) or scale <= 0:
        logger.warning(
            "Unusable scale %r for glyph %.3gx%.3g on %sx%s, using 1",
            scale, width, height, canvas_w, canvas_h,
        )
        scale = 1.0
        scale_clamped = True

    if config.center:
        extra_x = (available_w - width * scale) / 2.0
        extra_y = (available_h - height * scale) / 2.0
    else:
        extra_x = extra_y = 0.0

    return TransformPlan(
        scale=scale,
        origin_x=padding + extra_x,
        origin_y=padding + extra_y,
        extra_x=extra_x,
        extra_y=extra_y,
        available_w=available_w,
        available_h=available_h,
        stroke_width=resolve_stroke_width(canvas_w, canvas_h, config),
        scale_clamped=scale_clamped,
    )
