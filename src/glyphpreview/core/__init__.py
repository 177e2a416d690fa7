"""Core processing algorithms for glyphpreview.

This module contains the core algorithms for:

- Geometry operations (bounding box, normalization, decimation)
- Transform planning (scale-to-fit, centering, line width)
- Stroke rendering (straight and smoothed paths)

Geometry and planning are pure functions. Rendering only has side effects
on the drawing context it is given.

Key functions:
- compute_bounding_box: Box around every point of a template
- normalize: Copy of a template moved to the origin
- simplify: Naive per-stroke point decimation
- plan_transform: Scale and offset fitting a glyph onto a surface
- render_to_surface: Draw a template onto a drawing context
- render_to_image: Draw a template off-screen and export a PNG data URL

Key classes:
- TransformPlan: Result of transform planning
- StrokeRenderer: Draws strokes as paths
- GlyphRenderer: Orchestrates render calls and tracks statistics
"""

from glyphpreview.core.geometry import (
    compute_bounding_box,
    normalize,
    simplify,
    simplify_stroke,
)
from glyphpreview.core.renderer import (
    GlyphRenderer,
    StrokeRenderer,
    render_to_image,
    render_to_surface,
)
from glyphpreview.core.transform import (
    TransformPlan,
    plan_transform,
    resolve_stroke_width,
)

__all__ = [
    # Renderer classes
    "GlyphRenderer",
    "StrokeRenderer",
    # Transform classes
    "TransformPlan",
    # Geometry functions
    "compute_bounding_box",
    "normalize",
    "plan_transform",
    "render_to_image",
    "render_to_surface",
    "resolve_stroke_width",
    "simplify",
    "simplify_stroke",
]
