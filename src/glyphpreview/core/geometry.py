"""Geometric operations on glyph templates.

This module provides the geometry engine used before drawing:
- Bounding box computation over all strokes
- Origin normalization (translate so the box starts at 0,0)
- Naive per-stroke point decimation

All functions are pure and never modify the template they are given.
"""

import math
from typing import Any

from glyphpreview.domain import BoundingBox, Stroke, Template, as_template


def compute_bounding_box(template: Template | Any) -> BoundingBox:
    """Calculate the bounding box of every point in a template.

    Empty strokes contribute nothing, and so do non-finite coordinates.

    Args:
        template: Template (or raw template data) to measure

    Returns:
        BoundingBox of all points. The zero box when there are no points.

    Examples:
        >>> compute_bounding_box([[{"x": 2, "y": 3}, {"x": 12, "y": 8}]]).to_tuple()
        (2.0, 3.0, 12.0, 8.0, 10.0, 5.0)
        >>> compute_bounding_box([]).is_zero()
        True
    """
    template = as_template(template)

    min_x = min_y = math.inf
    max_x = max_y = -math.inf

    for stroke in template.strokes:
        for point in stroke.points:
            if not point.is_finite():
                continue
            min_x = min(min_x, point.x)
            min_y = min(min_y, point.y)
            max_x = max(max_x, point.x)
            max_y = max(max_y, point.y)

    if min_x == math.inf:
        return BoundingBox()

    return BoundingBox(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)


def normalize(template: Template | Any) -> tuple[Template, BoundingBox]:
    """Translate a copy of the template so its bounding box starts at (0, 0).

    The caller's template is left untouched. Points with non-finite
    coordinates are dropped from the copy. The returned box is the one
    measured before the shift; its width and height are the same either way.

    Args:
        template: Template (or raw template data) to normalize

    Returns:
        Tuple of (shifted copy, original bounding box)
    """
    source = as_template(template).finite()
    bbox = compute_bounding_box(source)

    if bbox.min_x == 0 and bbox.min_y == 0:
        return source, bbox

    return source.translated(-bbox.min_x, -bbox.min_y), bbox


def simplify_stroke(stroke: Stroke, ratio: float) -> Stroke:
    """Decimate one stroke, keeping every n-th point.

    Strokes of two points or fewer are returned as a copy. Otherwise
    keeps indices 0, n, 2n, ... with n = max(1, floor(1 / ratio)), capped at the
    last index, and re-appends the last point if the stride skipped it.

    Args:
        stroke: Stroke to decimate
        ratio: Fraction of points to keep, strictly between 0 and 1

    Returns:
        New stroke with the same first and last point
    """
    if len(stroke.points) <= 2:
        return stroke.copy()

    last_index = len(stroke.points) - 1

    # 1 / ratio overflows to inf for subnormal ratios; a stride past the
    # last index keeps only the endpoints anyway
    inverse = 1.0 / ratio
    keep_every = last_index if not math.isfinite(inverse) else max(1, math.floor(inverse))
    keep_every = min(keep_every, last_index)
    kept = stroke.points[::keep_every]

    if last_index % keep_every != 0:
        kept.append(stroke.points[last_index])

    return Stroke(points=kept)


def simplify(template: Template | Any, ratio: float) -> Template:
    """Reduce the number of points in every stroke of a template.

    This is naive decimation, not curve-aware simplification. Ratios
    outside the open interval (0, 1) disable it and return the input
    as-is; callers must not rely on the result being a distinct object.

    Args:
        template: Template (or raw template data) to simplify
        ratio: Fraction of points to keep per stroke

    Returns:
        Simplified template
    """
    template = as_template(template)

    if ratio <= 0 or ratio >= 1:
        return template

    return Template(
        strokes=[simplify_stroke(stroke, ratio) for stroke in template.strokes],
        name=template.name,
    )
