"""Drawing context capabilities the renderer depends on.

The renderer only talks to a DrawingContext. Any object that provides these
methods can be drawn on: the pycairo-backed CairoSurface, a recording stub in
tests, or an adapter around another 2D canvas.
"""

from enum import Enum
from typing import Protocol, runtime_checkable


class LineCap(str, Enum):
    """Shape drawn at the open ends of a stroked path."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(str, Enum):
    """Shape drawn where two path segments meet."""

    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


@runtime_checkable
class DrawingContext(Protocol):
    """A 2D drawing context with canvas-style path primitives.

    Coordinates passed to path methods are in the current user space, which
    translate() and scale() modify. Line width is also measured in user
    space at the time stroke() is called.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_line_cap(self, cap: LineCap) -> None: ...

    def set_line_join(self, join: LineJoin) -> None: ...

    def set_stroke_color(self, color: str) -> None: ...

    def set_fill_color(self, color: str) -> None: ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...
