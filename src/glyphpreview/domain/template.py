"""Glyph template representation.

This module defines the template domain model, which represents one glyph
as an ordered list of strokes, and the bounding box derived from it.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from glyphpreview.domain.stroke import Stroke
from glyphpreview.exceptions import TemplateFormatError


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned rectangle containing every point of a template.

    Attributes:
        min_x: Smallest x coordinate
        min_y: Smallest y coordinate
        max_x: Largest x coordinate
        max_y: Largest y coordinate
    """

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def is_zero(self) -> bool:
        """Check if this is the all-zero box of an empty template."""
        return self == BoundingBox()

    def to_tuple(self) -> tuple[float, float, float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y, width, height)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y, self.width, self.height)

    def to_dict(self) -> dict[str, float]:
        """Serialize to dictionary, including the derived dimensions."""
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
            "width": self.width,
            "height": self.height,
        }


@dataclass
class Template:
    """A glyph defined as an ordered list of strokes.

    Stroke order is the visual stroke order. It does not affect the rendered
    result but is kept so output is reproducible.

    Attributes:
        strokes: Ordered list of strokes
        name: Optional template name (e.g., "heart", "alpha")
    """

    strokes: list[Stroke] = field(default_factory=list)
    name: str | None = None

    def __len__(self) -> int:
        return len(self.strokes)

    def __iter__(self) -> Iterator[Stroke]:
        return iter(self.strokes)

    @property
    def point_count(self) -> int:
        """Total number of points over all strokes."""
        return sum(len(stroke) for stroke in self.strokes)

    def is_empty(self) -> bool:
        """Check if the template has no points at all.

        A template whose strokes are all empty counts as empty.
        """
        return all(stroke.is_empty() for stroke in self.strokes)

    def copy(self) -> "Template":
        """Return an independent copy of this template.

        Changes to the copy's strokes never reach the original.
        """
        return Template(strokes=[s.copy() for s in self.strokes], name=self.name)

    def finite(self) -> "Template":
        """Return a copy with every non-finite point dropped.

        A template built from Point objects skips the checks parse_point()
        applies to raw data, so NaN or infinite coordinates can still be
        present. Strokes left without points stay in place, empty.
        """
        return Template(strokes=[s.finite() for s in self.strokes], name=self.name)

    def translated(self, dx: float, dy: float) -> "Template":
        """Return a new template with every point moved by (dx, dy)."""
        return Template(
            strokes=[s.translated(dx, dy) for s in self.strokes],
            name=self.name,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with name and strokes fields
        """
        return {
            "name": self.name,
            "strokes": [s.to_dict() for s in self.strokes],
        }

    @classmethod
    def from_data(cls, data: Any, name: str | None = None) -> "Template":
        """Build a template from raw JSON-shaped data.

        Accepts a list of strokes or an object with a "strokes" field.
        Malformed points are dropped; a stroke that is not a list is
        treated as empty.

        Args:
            data: Raw template data
            name: Name to use when the data does not carry one

        Returns:
            Template instance

        Raises:
            TemplateFormatError: If data is neither a list nor a strokes object
        """
        if isinstance(data, dict):
            if "strokes" not in data:
                raise TemplateFormatError(name, "object template without 'strokes'")
            name = data.get("name", name)
            data = data["strokes"]

        if not isinstance(data, (list, tuple)):
            raise TemplateFormatError(
                name, f"expected a list of strokes, got {type(data).__name__}"
            )

        strokes = []
        for raw_stroke in data:
            if isinstance(raw_stroke, Stroke):
                strokes.append(raw_stroke.copy())
            elif isinstance(raw_stroke, (list, tuple)):
                strokes.append(Stroke.from_data(raw_stroke))
            else:
                strokes.append(Stroke())

        return cls(strokes=strokes, name=name)


def as_template(data: "Template | Sequence[Any] | dict[str, Any]") -> Template:
    """Coerce caller input into a Template.

    Template instances are passed through as-is; they are never mutated
    downstream, so no copy is made here.

    Args:
        data: Template or raw JSON-shaped template data

    Returns:
        Template instance
    """
    if isinstance(data, Template):
        return data
    return Template.from_data(data)
