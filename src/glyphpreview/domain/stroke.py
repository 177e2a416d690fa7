"""Core geometric types for stroke representation.

This module defines the fundamental geometric types of a glyph template:
- Point: A 2D point in glyph space
- Stroke: One continuous pen path (pen-down to pen-up)
"""

import logging
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D glyph space.

    Immutable and hashable, so strokes can share points between copies
    without any risk of one copy altering another.

    Attributes:
        x: X coordinate in glyph units (caller-defined scale)
        y: Y coordinate in glyph units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def is_finite(self) -> bool:
        """Check that both coordinates are finite numbers."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def translated(self, dx: float, dy: float) -> "Point":
        """Return a copy moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def midpoint(self, other: "Point") -> "Point":
        """Return the point halfway between this point and another."""
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


def parse_point(data: Any) -> Point | None:
    """Parse a point from its JSON shape, tolerating malformed input.

    Accepts ``{"x": .., "y": ..}`` objects and ``[x, y]`` pairs. Anything
    else, including non-numeric or non-finite coordinates, yields None.

    Args:
        data: Raw point data

    Returns:
        Point, or None if the data does not describe a usable point
    """
    if isinstance(data, Point):
        return data if data.is_finite() else None

    if isinstance(data, dict):
        raw_x, raw_y = data.get("x"), data.get("y")
    elif isinstance(data, (list, tuple)) and len(data) == 2:
        raw_x, raw_y = data
    else:
        logger.debug("Dropping malformed point: %r", data)
        return None

    # bool is an int subclass but never a coordinate
    if isinstance(raw_x, bool) or isinstance(raw_y, bool):
        logger.debug("Dropping malformed point: %r", data)
        return None

    try:
        point = Point(float(raw_x), float(raw_y))
    except (TypeError, ValueError):
        logger.debug("Dropping malformed point: %r", data)
        return None

    if not point.is_finite():
        logger.debug("Dropping non-finite point: %r", data)
        return None

    return point


@dataclass
class Stroke:
    """One continuous pen path.

    Points are kept in drawing order. A stroke may be empty or hold a
    single point.

    Attributes:
        points: Ordered list of points
    """

    points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def is_empty(self) -> bool:
        """Check if the stroke has no points."""
        return not self.points

    @property
    def first(self) -> Point | None:
        """First point, or None for an empty stroke."""
        return self.points[0] if self.points else None

    @property
    def last(self) -> Point | None:
        """Last point, or None for an empty stroke."""
        return self.points[-1] if self.points else None

    def copy(self) -> "Stroke":
        """Return an independent copy of this stroke.

        Points are immutable, so only the list itself is cloned.
        """
        return Stroke(points=list(self.points))

    def finite(self) -> "Stroke":
        """Return a copy without points that have non-finite coordinates."""
        return Stroke(points=[p for p in self.points if p.is_finite()])

    def translated(self, dx: float, dy: float) -> "Stroke":
        """Return a new stroke with every point moved by (dx, dy)."""
        return Stroke(points=[p.translated(dx, dy) for p in self.points])

    def to_dict(self) -> list[dict[str, Any]]:
        """Serialize to a list of point dictionaries."""
        return [p.to_dict() for p in self.points]

    @classmethod
    def from_data(cls, data: Sequence[Any]) -> "Stroke":
        """Build a stroke from raw JSON-shaped data.

        Malformed points are dropped, see parse_point().

        Args:
            data: Sequence of raw points

        Returns:
            Stroke instance
        """
        points = [p for p in (parse_point(raw) for raw in data) if p is not None]
        return cls(points=points)
