"""Glyphpreview - Render hand-drawn stroke glyphs onto bounded 2D surfaces.

Glyphpreview takes a glyph template (an ordered list of stroke polylines),
normalizes it, optionally decimates its points, fits it into a padded drawing
area and strokes it onto a drawing surface. It backs the character previews
of a virtual keyboard.

Example:
    $ glyphpreview render chars.json heart -o heart.png

This will draw the "heart" template from chars.json centered on a 128x128 PNG.
"""

__version__ = "0.1.0"

from glyphpreview.core.geometry import compute_bounding_box, normalize, simplify
from glyphpreview.core.renderer import render_to_image, render_to_surface

__all__ = [
    "__version__",
    "compute_bounding_box",
    "normalize",
    "render_to_image",
    "render_to_surface",
    "simplify",
]
