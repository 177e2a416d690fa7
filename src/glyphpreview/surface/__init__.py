"""Drawing surface layer for glyphpreview.

This module holds everything that touches pixels. The renderer depends only
on the DrawingContext protocol; CairoSurface is the concrete off-screen
implementation used for image export.

Key classes:
- DrawingContext: Protocol of canvas-style drawing primitives
- CairoSurface: pycairo image surface implementing DrawingContext
- LineCap, LineJoin: Stroke end and join styles
"""

from glyphpreview.surface.cairo_surface import CairoSurface
from glyphpreview.surface.color import parse_color
from glyphpreview.surface.context import DrawingContext, LineCap, LineJoin

__all__ = [
    "CairoSurface",
    "DrawingContext",
    "LineCap",
    "LineJoin",
    "parse_color",
]
