"""Shared fixtures for glyphpreview tests."""

from typing import Any

import pytest

from glyphpreview.domain import Point, Stroke, Template


class RecordingContext:
    """Drawing context that records every call instead of drawing.

    Tracks translate/scale/save/restore so tests can check the user-space
    transform and line width in effect when stroke() is called.
    """

    def __init__(self, width: int = 100, height: int = 100) -> None:
        self._width = width
        self._height = height
        self.calls: list[tuple[Any, ...]] = []
        self.strokes: list[dict[str, Any]] = []
        self._state = {"tx": 0.0, "ty": 0.0, "scale": 1.0, "line_width": 1.0}
        self._stack: list[dict[str, float]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def names(self) -> list[str]:
        """Names of recorded calls in order."""
        return [call[0] for call in self.calls]

    def path_calls(self) -> list[tuple[Any, ...]]:
        """Recorded move/line/curve calls in order."""
        return [c for c in self.calls if c[0] in ("move_to", "line_to", "quadratic_curve_to")]

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", x, y))

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        self.calls.append(("quadratic_curve_to", cpx, cpy, x, y))

    def stroke(self) -> None:
        self.calls.append(("stroke",))
        self.strokes.append(dict(self._state))

    def set_line_width(self, width: float) -> None:
        self.calls.append(("set_line_width", width))
        self._state["line_width"] = width

    def set_line_cap(self, cap: Any) -> None:
        self.calls.append(("set_line_cap", cap))

    def set_line_join(self, join: Any) -> None:
        self.calls.append(("set_line_join", join))

    def set_stroke_color(self, color: str) -> None:
        self.calls.append(("set_stroke_color", color))

    def set_fill_color(self, color: str) -> None:
        self.calls.append(("set_fill_color", color))

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.calls.append(("clear_rect", x, y, width, height))

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.calls.append(("fill_rect", x, y, width, height))

    def save(self) -> None:
        self.calls.append(("save",))
        self._stack.append(dict(self._state))

    def restore(self) -> None:
        self.calls.append(("restore",))
        self._state = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        self.calls.append(("translate", dx, dy))
        self._state["tx"] += dx * self._state["scale"]
        self._state["ty"] += dy * self._state["scale"]

    def scale(self, sx: float, sy: float) -> None:
        self.calls.append(("scale", sx, sy))
        self._state["scale"] *= sx


@pytest.fixture
def recording_context() -> RecordingContext:
    """A 100x100 recording drawing context."""
    return RecordingContext(100, 100)


@pytest.fixture
def corner_template() -> Template:
    """A single stroke (0,0) -> (10,0) -> (10,10)."""
    return Template(
        strokes=[Stroke(points=[Point(0, 0), Point(10, 0), Point(10, 10)])],
        name="corner",
    )


@pytest.fixture
def offset_template() -> Template:
    """Two strokes away from the origin, spanning (20,30) to (60,50)."""
    return Template(
        strokes=[
            Stroke(points=[Point(20, 30), Point(60, 30)]),
            Stroke(points=[Point(40, 30), Point(40, 50), Point(25, 45)]),
        ],
        name="tee",
    )


@pytest.fixture
def long_stroke_template() -> Template:
    """One stroke of 11 points along the x axis."""
    return Template(strokes=[Stroke(points=[Point(float(i), 0.0) for i in range(11)])])


@pytest.fixture
def context_factory() -> type[RecordingContext]:
    """The RecordingContext class, for tests that need custom sizes."""
    return RecordingContext
