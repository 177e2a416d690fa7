"""Domain models for glyphpreview.

This module contains the value types describing a glyph template. All
models are designed to be:

- Immutable where possible (frozen dataclasses for points and boxes)
- Serializable to and from the JSON shapes templates are stored in
- Independent of any drawing surface

Key classes:
- Point: A 2D point in glyph space
- Stroke: One continuous pen path
- Template: A glyph as an ordered list of strokes
- BoundingBox: Axis-aligned box derived from a template
"""

from glyphpreview.domain.stroke import Point, Stroke, parse_point
from glyphpreview.domain.template import BoundingBox, Template, as_template

__all__: list[str] = [
    # Core types
    "Point",
    "Stroke",
    "Template",
    "BoundingBox",
    # Parsing
    "as_template",
    "parse_point",
]
